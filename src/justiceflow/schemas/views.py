"""Read-side shapes returned by projections and services."""

import enum
from typing import Any, List, Optional

from pydantic import BaseModel

from ..utils.errors import (
    AccessDenied,
    PermanentError,
    RecordNotFound,
    ValidationFailed,
    VersionConflict,
)
from .case import Case, Party
from .document import Document


class PatientRow(BaseModel):
    """One hospitalized party of one case, as seen by a medical officer.

    ``row_key`` is ``"{case_id}-{party_index}"`` and is enough to find the
    party again when a report is submitted.
    """

    row_key: str
    case: Case
    party: Party
    party_index: int

    @property
    def medical_status(self) -> str:
        report = self.party.medical_report
        return report.status if report else "Pending"


class JudicialInfo(BaseModel):
    has_data: bool
    verdict: str
    remarks: str
    sentence: str
    next_hearing: str


class MedicalInfo(BaseModel):
    has_data: bool
    notes: str
    documents: List[Document] = []
    status: Optional[str] = None
    updated_date: Optional[str] = None
    party_name: Optional[str] = None


class CaseDossier(BaseModel):
    """Everything the read-only reviewer sees for one case."""

    case: Case
    judicial: JudicialInfo
    medical: List[MedicalInfo] = []


class OutcomeStatus(str, enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    DENIED = "denied"
    INVALID = "invalid"
    CONFLICT = "conflict"


class Outcome(BaseModel):
    """Result of a service call.

    Not-found, denial, rejected input and version conflicts are reported
    here instead of being raised, so callers branch on ``status``.
    """

    status: OutcomeStatus
    value: Any = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.OK

    @classmethod
    def success(cls, value: Any = None, message: str = "") -> "Outcome":
        return cls(status=OutcomeStatus.OK, value=value, message=message)

    @classmethod
    def not_found(cls, message: str) -> "Outcome":
        return cls(status=OutcomeStatus.NOT_FOUND, message=message)

    @classmethod
    def denied(cls, message: str) -> "Outcome":
        return cls(status=OutcomeStatus.DENIED, message=message)

    @classmethod
    def invalid(cls, message: str) -> "Outcome":
        return cls(status=OutcomeStatus.INVALID, message=message)

    @classmethod
    def conflict(cls, message: str) -> "Outcome":
        return cls(status=OutcomeStatus.CONFLICT, message=message)

    @classmethod
    def from_error(cls, error: PermanentError) -> "Outcome":
        """Report a permanent error raised inside a service call.

        Raises:
            TypeError: If ``error`` has no matching outcome status
        """
        for error_type, status in _ERROR_STATUSES:
            if isinstance(error, error_type):
                return cls(status=status, message=str(error))
        raise TypeError(f"No outcome for {type(error).__name__}") from error


_ERROR_STATUSES = (
    (ValidationFailed, OutcomeStatus.INVALID),
    (RecordNotFound, OutcomeStatus.NOT_FOUND),
    (AccessDenied, OutcomeStatus.DENIED),
    (VersionConflict, OutcomeStatus.CONFLICT),
)
