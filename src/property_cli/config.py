from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DEFAULT_DATA_FILE = "properties.json"
DEFAULT_CHUNK_SIZE = 1000


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass
class Settings:
    """Runtime settings, read from the environment when instantiated."""

    data_file: str = field(default_factory=lambda: os.environ.get("PROPERTY_CLI_DATA_FILE", DEFAULT_DATA_FILE))
    chunk_size: int = field(default_factory=lambda: _env_int("PROPERTY_CLI_CHUNK_SIZE") or DEFAULT_CHUNK_SIZE)
    seed: Optional[int] = field(default_factory=lambda: _env_int("PROPERTY_CLI_SEED"))
    log_level: str = field(default_factory=lambda: os.environ.get("PROPERTY_CLI_LOG_LEVEL", "INFO"))

    def data_path(self) -> Path:
        # relative paths resolve against the working directory at call time
        return Path.cwd() / self.data_file
