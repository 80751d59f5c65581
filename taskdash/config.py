"""Settings loaded from TASKDASH_* environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKDASH"
DEFAULT_DATA_FILE = Path(".taskdash") / "storage.json"
DEFAULT_LOG_LEVEL = "INFO"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(f"{ENV_PREFIX}_{name}")
    return default if v is None or not v.strip() else v.strip()


@dataclass(frozen=True)
class Settings:
    data_file: Path
    log_level: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            data_file=Path(_env("DATA_FILE", str(DEFAULT_DATA_FILE))).expanduser(),
            log_level=_env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
