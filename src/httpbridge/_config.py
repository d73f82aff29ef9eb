import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from ._utils.constants import (
    DEFAULT_DOWNLOAD_CHUNK_SIZE,
    DEFAULT_SPOOL_MAX_SIZE,
    DEFAULT_TIMEOUT,
    DEFAULT_UPLOAD_CHUNK_SIZE,
    ENV_CACHE_DIR,
    ENV_DATA_DIR,
    ENV_DOCUMENTS_DIR,
    ENV_EXTERNAL_DIR,
    ENV_TIMEOUT,
)


def _home() -> Path:
    return Path.home()


class Config(BaseModel):
    """Process-wide defaults; per-request options always take precedence."""

    timeout: Optional[float] = Field(
        default=DEFAULT_TIMEOUT,
        description="Seconds applied to every timeout phase a call leaves unset; None disables it",
    )
    download_chunk_size: int = Field(default=DEFAULT_DOWNLOAD_CHUNK_SIZE, gt=0)
    upload_chunk_size: int = Field(default=DEFAULT_UPLOAD_CHUNK_SIZE, gt=0)
    spool_max_size: int = Field(default=DEFAULT_SPOOL_MAX_SIZE, ge=0)
    documents_dir: Path = Field(default_factory=lambda: _home() / "Documents")
    data_dir: Path = Field(default_factory=lambda: _home() / ".local" / "share")
    cache_dir: Path = Field(default_factory=lambda: _home() / ".cache")
    external_dir: Path = Field(default_factory=_home)

    @classmethod
    def from_env(cls) -> "Config":
        values = {}
        timeout = os.getenv(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = float(timeout)
        for env_var, field_name in (
            (ENV_DOCUMENTS_DIR, "documents_dir"),
            (ENV_DATA_DIR, "data_dir"),
            (ENV_CACHE_DIR, "cache_dir"),
            (ENV_EXTERNAL_DIR, "external_dir"),
        ):
            value = os.getenv(env_var)
            if value:
                values[field_name] = Path(os.path.expanduser(value))
        return cls(**values)
