from .base import RecordModel
from .document import Document
from .case import (
    Case,
    CaseStatus,
    COURT_LOCKED_STATUSES,
    CourtHistoryEntry,
    JudicialRecord,
    LEGACY_STATUS_MAP,
    MedicalReport,
    MedicalStatus,
    Party,
    PartyRole,
    normalize_status,
)
from .organization import ID_PREFIXES, Organization, OrganizationKind
from .account import ATTORNEY_PLACE, Account, AccountStatus, Role
from .views import (
    CaseDossier,
    JudicialInfo,
    MedicalInfo,
    Outcome,
    OutcomeStatus,
    PatientRow,
)

__all__ = [
    "RecordModel",
    "Document",
    "Case",
    "CaseStatus",
    "COURT_LOCKED_STATUSES",
    "CourtHistoryEntry",
    "JudicialRecord",
    "LEGACY_STATUS_MAP",
    "MedicalReport",
    "MedicalStatus",
    "Party",
    "PartyRole",
    "normalize_status",
    "ID_PREFIXES",
    "Organization",
    "OrganizationKind",
    "ATTORNEY_PLACE",
    "Account",
    "AccountStatus",
    "Role",
    "CaseDossier",
    "JudicialInfo",
    "MedicalInfo",
    "Outcome",
    "OutcomeStatus",
    "PatientRow",
]
