"""RIASEC profiling and organisational analytics."""

from .job_database import JobDatabase, JobSuggestion, create_default_job_database
from .org_models import CompanyProfile, OrgNode, Person
from .riasec_types import DIMENSIONS, ScoreVector

__all__ = [
    "CompanyProfile",
    "DIMENSIONS",
    "JobDatabase",
    "JobSuggestion",
    "OrgNode",
    "Person",
    "ScoreVector",
    "create_default_job_database",
]
