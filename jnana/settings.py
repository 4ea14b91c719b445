"""Runtime configuration from environment variables (``.env`` supported)."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path

from dotenv import load_dotenv


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    job_db_file: str
    company_file: str
    log_level: str

    @property
    def job_db_path(self) -> Path:
        return self.data_dir / self.job_db_file

    @property
    def company_path(self) -> Path:
        return self.data_dir / self.company_file


def load_settings(env_file: str | Path | None = ".env") -> Settings:
    """Read ``JNANA_*`` variables, after loading *env_file* when given.

    Values already set in the environment take precedence over the file.

    Raises:
        ValueError: If ``JNANA_LOG_LEVEL`` is not a standard level name.
    """
    if env_file is not None:
        load_dotenv(env_file)

    log_level = os.getenv("JNANA_LOG_LEVEL", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"JNANA_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got '{log_level}'")

    return Settings(
        data_dir=Path(os.getenv("JNANA_DATA_DIR", "data")),
        job_db_file=os.getenv("JNANA_JOB_DB_FILE", "job_database.json"),
        company_file=os.getenv("JNANA_COMPANY_FILE", "companies.json"),
        log_level=log_level,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
