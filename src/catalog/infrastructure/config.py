"""Settings for the catalog, read from the environment.

An optional ``.env`` file in the working directory is loaded first;
variables already set in the environment take precedence over it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from catalog.domain.exceptions import ConfigError

STORAGE_BACKENDS = ("json", "memory")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    storage: str = "json"
    data_dir: Path = Path("data")
    log_level: str = "WARNING"
    log_file: Path | None = None

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"


def load_settings() -> Settings:
    """Build Settings from ``CATALOG_*`` environment variables.

    Raises ConfigError for an unknown storage backend or log level.
    """
    load_dotenv(find_dotenv(usecwd=True))

    storage = os.getenv("CATALOG_STORAGE", "json").strip().lower()
    if storage not in STORAGE_BACKENDS:
        raise ConfigError(
            f"CATALOG_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got {storage!r}"
        )

    log_level = os.getenv("CATALOG_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Unknown CATALOG_LOG_LEVEL {log_level!r}")

    log_file = os.getenv("CATALOG_LOG_FILE")

    return Settings(
        storage=storage,
        data_dir=Path(os.getenv("CATALOG_DATA_DIR", "data")),
        log_level=log_level,
        log_file=Path(log_file) if log_file else None,
    )
