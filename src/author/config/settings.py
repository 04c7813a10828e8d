"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings.

    Only logging can be configured. Root discovery always starts from the
    working directory and the author file always lives at the root.
    """

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives a DEBUG trace of the invocation",
    )

    model_config = {
        "env_prefix": "AUTHOR_",
    }
