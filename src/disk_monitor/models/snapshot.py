"""Point-in-time disk usage reading."""

from pydantic import BaseModel, ConfigDict, Field


class UsageSnapshot(BaseModel):
    """Disk usage for a single path.

    Produced by a disk usage provider for one check and not retained.
    Sizes are pre-formatted, human-readable strings (e.g. "150G").
    """

    model_config = ConfigDict(frozen=True)

    usage_percent: float = Field(description="Percentage of the filesystem in use")
    used: str = Field(default="", description="Space in use")
    available: str = Field(default="", description="Space available to unprivileged users")
    total: str = Field(default="", description="Filesystem size")
