"""Repository for job database persistence (JSON file)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import shutil
import threading

from jnana.job_database import (
    JobDatabase,
    JobSuggestion,
    create_default_job_database,
    normalize_job_key,
)


logger = logging.getLogger(__name__)


class JobDatabaseRepository:
    """Thread-safe repository for the editable job lookup table."""

    def __init__(self, config_path: str | Path = "job_database.json"):
        self.config_path = Path(config_path)
        self.backup_path = Path(f"{config_path}.backup")
        self._lock = threading.Lock()

    def load(self) -> JobDatabase:
        """Load the job table, writing the bundled defaults on first use."""
        with self._lock:
            if not self.config_path.exists():
                db = create_default_job_database()
                self._save_without_lock(db)
                return db

            try:
                with open(self.config_path, encoding="utf-8") as f:
                    data = json.load(f)
                return JobDatabase.model_validate(data)
            except Exception as e:
                raise ValueError(f"Failed to load job database: {e}") from e

    def save(self, db: JobDatabase) -> None:
        """Save the job table, keeping a backup of the previous file."""
        with self._lock:
            self._create_backup()
            self._save_without_lock(db)

    def _save_without_lock(self, db: JobDatabase) -> None:
        temp_path = self.config_path.with_suffix(".tmp")
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(db.model_dump(exclude_none=True), f, indent=2, ensure_ascii=False)
            temp_path.replace(self.config_path)
        except Exception as e:
            if temp_path.exists():
                temp_path.unlink()
            raise ValueError(f"Failed to save job database: {e}") from e

    def _create_backup(self) -> None:
        if self.config_path.exists():
            try:
                shutil.copyfile(self.config_path, self.backup_path)
            except OSError:
                logger.warning("Failed to create job database backup", exc_info=True)

    def add_suggestion(self, profile_key: str, job: JobSuggestion) -> JobDatabase:
        """Append *job* under the normalised form of *profile_key*."""
        key = normalize_job_key(profile_key)
        if len(key) != 3:
            raise ValueError(f"Profile key '{profile_key}' must contain three RIASEC letters")

        db = self.load()
        for db_key, jobs in self._matching_keys(db, key):
            if any(j.title == job.title for j in jobs):
                raise ValueError(f"Job '{job.title}' already listed under '{db_key}'")

        new_db = JobDatabase({**db.root, key: [*db.get(key), job]})
        self.save(new_db)
        return new_db

    def remove_key(self, profile_key: str) -> JobDatabase:
        """Remove every stored key that normalises to the same letters as *profile_key*."""
        db = self.load()
        removed = {db_key for db_key, _ in self._matching_keys(db, normalize_job_key(profile_key))}
        if not removed:
            raise ValueError(f"Profile key '{profile_key}' not found")
        new_db = JobDatabase({k: v for k, v in db.root.items() if k not in removed})
        self.save(new_db)
        return new_db

    def reset_to_defaults(self) -> JobDatabase:
        db = create_default_job_database()
        self.save(db)
        return db

    @staticmethod
    def _matching_keys(db: JobDatabase, key: str) -> list[tuple[str, list[JobSuggestion]]]:
        if not key:
            return []
        return [(k, jobs) for k, jobs in db.items() if normalize_job_key(k) == key]
