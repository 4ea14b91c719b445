"""Repository for company profiles and their people (JSON file)."""

from __future__ import annotations

import json
from pathlib import Path
import threading

from pydantic import BaseModel, Field

from jnana.org_models import CompanyProfile, Person


_DEFAULT_PATH = "companies.json"


class CompanyRecord(BaseModel):
    """A company profile with the people assigned to it."""

    profile: CompanyProfile
    people: list[Person] = Field(default_factory=list)


class CompanyRepository:
    """Thread-safe persistence layer for CompanyRecord entries keyed by company id."""

    def __init__(self, config_path: str | Path = _DEFAULT_PATH) -> None:
        self._path = Path(config_path)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load_all(self) -> list[CompanyRecord]:
        with self._lock:
            return list(self._read().values())

    def get(self, company_id: str) -> CompanyRecord | None:
        """Return the record, or ``None`` when the company is not stored."""
        with self._lock:
            return self._read().get(company_id)

    def save(self, record: CompanyRecord) -> None:
        """Insert or replace *record* (atomic write)."""
        with self._lock:
            records = self._read()
            records[record.profile.id] = record
            self._atomic_write(records)

    def delete(self, company_id: str) -> None:
        """Remove a company; unknown ids are ignored."""
        with self._lock:
            records = self._read()
            if records.pop(company_id, None) is not None:
                self._atomic_write(records)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read(self) -> dict[str, CompanyRecord]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
            return {cid: CompanyRecord(**raw) for cid, raw in data.items()}
        except Exception as exc:
            raise ValueError(f"Failed to load companies: {exc}") from exc

    def _atomic_write(self, records: dict[str, CompanyRecord]) -> None:
        tmp = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(
                    {cid: rec.model_dump(mode="json") for cid, rec in records.items()},
                    fh,
                    indent=2,
                    ensure_ascii=False,
                )
            tmp.replace(self._path)
        except Exception as exc:
            if tmp.exists():
                tmp.unlink()
            raise ValueError(f"Failed to save companies: {exc}") from exc
