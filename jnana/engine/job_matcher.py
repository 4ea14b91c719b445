"""Profile code → job suggestions, with graceful fallback.

Lookup cascade: exact sorted-key match, then every key containing the two
dominant letters (capped at 8), then a single generic suggestion.
All functions are *pure*.
"""

from __future__ import annotations

import logging

from jnana.job_database import (
    GENERIC_JOB_SUGGESTION,
    JobDatabase,
    JobSuggestion,
    normalize_job_key,
)
from jnana.riasec_types import DIMENSIONS, ScoreVector, parse_profile_code


logger = logging.getLogger(__name__)

MAX_PARTIAL_MATCHES = 8

_BASELINE_SCORE = 10
_BENCHMARK_SCORES = (26, 22, 18)


def suggest_jobs(
    profile_code: str,
    db: JobDatabase,
    dominant_pair: tuple[str, str] | None = None,
) -> list[JobSuggestion]:
    """Return job suggestions for *profile_code*; never empty.

    *dominant_pair* overrides the two letters used for partial matching when
    *profile_code* is already an alphabetically sorted key and no longer
    carries the ranking.
    """
    key = normalize_job_key(profile_code)
    exact = _exact_matches(key, db)
    if exact:
        return exact

    letters = list(dominant_pair) if dominant_pair else parse_profile_code(profile_code)[:2]
    if len(letters) == 2:
        partial = _partial_matches(letters[0], letters[1], db)
        if partial:
            logger.debug("No exact jobs for %s, using %d partial matches", profile_code, len(partial))
            return partial

    logger.debug("No jobs for %s, using generic suggestion", profile_code)
    return [GENERIC_JOB_SUGGESTION.model_copy()]


def _exact_matches(key: str, db: JobDatabase) -> list[JobSuggestion]:
    if not key:
        return []
    jobs: list[JobSuggestion] = []
    for db_key, suggestions in db.items():
        if normalize_job_key(db_key) == key:
            jobs.extend(suggestions)
    return jobs


def _partial_matches(first: str, second: str, db: JobDatabase) -> list[JobSuggestion]:
    """Union of every key holding both letters; duplicate titles keep the last entry."""
    unique: dict[str, JobSuggestion] = {}
    for db_key, suggestions in db.items():
        upper = db_key.upper()
        if first in upper and second in upper:
            for job in suggestions:
                unique[job.title] = job
    return list(unique.values())[:MAX_PARTIAL_MATCHES]


def benchmark_score(job: JobSuggestion, profile_code: str) -> ScoreVector:
    """Ideal vector for comparison charts.

    Uses the job's declared ``ideal_score`` when present; otherwise baseline
    10 everywhere with the code's 1st/2nd/3rd letters raised to 26/22/18.
    """
    if job.ideal_score is not None:
        return job.ideal_score
    scores = {dim: _BASELINE_SCORE for dim in DIMENSIONS}
    for dim, value in zip(parse_profile_code(profile_code), _BENCHMARK_SCORES):
        scores[dim] = value
    return ScoreVector(**scores)
