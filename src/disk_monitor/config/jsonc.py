"""Comment stripping for JSONC (JSON with comments) documents."""


def strip_jsonc_comments(text: str) -> str:
    """Remove // line comments and /* */ block comments from JSONC text.

    Comment markers inside string literals are kept. Newlines inside block
    comments are preserved so JSON parse errors still report useful line
    numbers. An unterminated block comment swallows the rest of the text.

    Args:
        text: JSONC document

    Returns:
        Plain JSON text
    """
    out = []
    i = 0
    length = len(text)
    in_string = False

    while i < length:
        ch = text[i]

        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < length:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = length if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            comment = text[i:] if end == -1 else text[i : end + 2]
            out.append("\n" * comment.count("\n"))
            i = length if end == -1 else end + 2
        else:
            out.append(ch)
            i += 1

    return "".join(out)
