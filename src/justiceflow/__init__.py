"""JusticeFlow core - case store, role projections and workflows."""

from .config import Settings, settings
from .storage import FileBackend, MemoryBackend, RedisBackend, StorageBackend, get_backend
from .store import CaseStore, JsonCollection
from .schemas import (
    Account,
    Case,
    CaseDossier,
    CaseStatus,
    Document,
    JudicialInfo,
    MedicalInfo,
    MedicalReport,
    MedicalStatus,
    Organization,
    OrganizationKind,
    Outcome,
    OutcomeStatus,
    Party,
    PatientRow,
)
from .filters import (
    apply_filters,
    category_predicate,
    date_range_predicate,
    jurisdiction_predicate,
    search_predicate,
)
from .projections import (
    admin_report,
    flatten_patients,
    jmo_patients,
    judge_cases,
    parse_row_key,
    police_cases,
)
from .extraction import extract_judicial, extract_medical
from .registry import AccountRegistry, OrganizationRegistry, next_id
from .services import CourtService, MedicalService, PoliceService, ReviewService
from .utils import (
    setup_logging,
    JusticeFlowError,
    PermanentError,
    RetryableError,
    ValidationFailed,
    StorageUnavailable,
)

__version__ = "0.1.0"
__all__ = [
    "Settings",
    "settings",
    "StorageBackend",
    "MemoryBackend",
    "FileBackend",
    "RedisBackend",
    "get_backend",
    "CaseStore",
    "JsonCollection",
    "Account",
    "Case",
    "CaseDossier",
    "CaseStatus",
    "Document",
    "JudicialInfo",
    "MedicalInfo",
    "MedicalReport",
    "MedicalStatus",
    "Organization",
    "OrganizationKind",
    "Outcome",
    "OutcomeStatus",
    "Party",
    "PatientRow",
    "apply_filters",
    "category_predicate",
    "date_range_predicate",
    "jurisdiction_predicate",
    "search_predicate",
    "admin_report",
    "flatten_patients",
    "jmo_patients",
    "judge_cases",
    "parse_row_key",
    "police_cases",
    "extract_judicial",
    "extract_medical",
    "AccountRegistry",
    "OrganizationRegistry",
    "next_id",
    "CourtService",
    "MedicalService",
    "PoliceService",
    "ReviewService",
    "setup_logging",
    "JusticeFlowError",
    "PermanentError",
    "RetryableError",
    "ValidationFailed",
    "StorageUnavailable",
]
