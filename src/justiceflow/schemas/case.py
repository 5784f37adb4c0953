"""Case, party and medical report records.

Records are parsed from the persisted JSON layout exactly once, when the
store reads a collection. Legacy shapes (alternate status spellings, flat
judicial fields, party lists written before parties carried ids) are folded
into the canonical shape here so that nothing downstream has to know about
them.
"""

import enum
import logging
from typing import Any, List, Optional
from uuid import uuid4

from pydantic import AliasChoices, Field, ValidationError, field_validator, model_validator

from ..aliases import fold_judicial
from .base import RecordModel
from .document import Document

logger = logging.getLogger(__name__)


class CaseStatus(str, enum.Enum):
    PENDING = "Pending"
    UNDER_INVESTIGATION = "Under Investigation"
    ADJOURNED = "Adjourned"
    CASE_DISMISSED = "Case Dismissed"
    REFERRED = "Referred to Higher Court"
    CLOSED = "Closed"


# Spellings written by older dashboards.
LEGACY_STATUS_MAP = {
    "Open": CaseStatus.PENDING,
    "Investigating": CaseStatus.UNDER_INVESTIGATION,
    "Dismissed": CaseStatus.CASE_DISMISSED,
    "Referred": CaseStatus.REFERRED,
}

# Once a court sets one of these the police can no longer change the status.
COURT_LOCKED_STATUSES = frozenset({
    CaseStatus.CLOSED,
    CaseStatus.CASE_DISMISSED,
    CaseStatus.ADJOURNED,
    CaseStatus.REFERRED,
})

_STATUS_LOOKUP = {s.value.lower(): s for s in CaseStatus}
_STATUS_LOOKUP.update({k.lower(): v for k, v in LEGACY_STATUS_MAP.items()})


def normalize_status(value) -> CaseStatus:
    """Map a stored status string onto the canonical enumeration.

    Matching ignores letter case, so ``"closed"`` reads as ``Closed``.

    Raises:
        ValueError: If the value is neither canonical nor a known legacy spelling
    """
    if isinstance(value, CaseStatus):
        return value
    if not value:
        return CaseStatus.PENDING
    status = _STATUS_LOOKUP.get(str(value).strip().lower())
    if status is None:
        raise ValueError(f"Unknown case status: {value!r}")
    return status


class PartyRole(str, enum.Enum):
    VICTIM = "Victim"
    SUSPECT = "Suspect"
    WITNESS = "Witness"


LEGACY_ROLE_MAP = {"Accused": PartyRole.SUSPECT}


class MedicalStatus(str, enum.Enum):
    IN_HOSPITAL = "In Hospital"
    STABLE = "In Hospital - Stable"
    CRITICAL = "In Hospital - Critical"
    DISCHARGED = "Discharged"
    DECEASED = "Deceased"


class MedicalReport(RecordModel):
    """Single live report for one party; each submission overwrites it."""

    status: str = MedicalStatus.IN_HOSPITAL.value
    notes: str = ""
    documents: List[Document] = []
    updated_date: Optional[str] = None
    officer: Optional[str] = None
    location: Optional[str] = None


class Party(RecordModel):
    party_id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = ""
    nic: str = ""
    role: PartyRole = PartyRole.VICTIM
    statement: str = ""
    is_hospitalized: bool = False
    hospital_name: Optional[str] = None
    medical_report: Optional[MedicalReport] = None

    @field_validator("role", mode="before")
    @classmethod
    def _legacy_role(cls, value):
        return LEGACY_ROLE_MAP.get(value, value)

    @field_validator("party_id", mode="before")
    @classmethod
    def _fill_party_id(cls, value):
        return value or uuid4().hex


class CourtHistoryEntry(RecordModel):
    date: str
    action: str
    details: str = ""
    next_date: Optional[str] = None


class JudicialRecord(RecordModel):
    verdict: Optional[str] = None
    remarks: Optional[str] = None
    sentence: Optional[str] = None
    next_hearing: Optional[str] = None


def _readable(case_id: Any, entries: list, model) -> list:
    """Parse list entries one by one, dropping the ones that do not parse."""
    readable = []
    for entry in entries:
        try:
            readable.append(entry if isinstance(entry, model) else model.model_validate(entry))
        except ValidationError:
            logger.warning(f"[schemas] Dropping unreadable {model.__name__} entry of case {case_id!r}")
    return readable


def _readable_parties(case_id: Any, entries: list) -> List[Party]:
    """Parse the party list, giving id-less parties a stable positional id.

    The fallback id is ``"{case_id}-{index}"`` over the readable parties, so
    it is the same on every read of the same stored list.
    """
    parties = []
    for entry in entries:
        if isinstance(entry, Party):
            parties.append(entry)
            continue
        if not isinstance(entry, dict):
            logger.warning(f"[schemas] Dropping unreadable party entry of case {case_id!r}")
            continue
        entry = dict(entry)
        if not entry.get("partyId") and not entry.get("party_id"):
            entry["partyId"] = f"{case_id}-{len(parties)}"
        try:
            parties.append(Party.model_validate(entry))
        except ValidationError:
            logger.warning(f"[schemas] Dropping unreadable party entry of case {case_id!r}")
    return parties


class Case(RecordModel):
    """Root incident record.

    Court, station and hospital are referenced by name, not by id. Unknown
    keys found in storage are kept so that a wholesale rewrite does not drop
    them.
    """

    id: str
    date: str = ""
    venue: str = Field(
        default="",
        validation_alias=AliasChoices("venue", "location"),
        serialization_alias="venue",
    )
    description: str = Field(
        default="",
        validation_alias=AliasChoices("desc", "description"),
        serialization_alias="desc",
    )
    status: CaseStatus = CaseStatus.PENDING
    assigned_court: str = ""
    station: str = ""
    officer: str = ""
    reporter_role: str = ""
    victim_name: str = ""
    jmo_required: bool = False
    evidence: List[Document] = []
    parties: List[Party] = []
    judicial: Optional[JudicialRecord] = Field(
        default=None,
        validation_alias=AliasChoices("courtData", "judicial"),
        serialization_alias="courtData",
    )
    court_history: List[CourtHistoryEntry] = []
    version: int = 0

    class Config:
        extra = "allow"

    @model_validator(mode="before")
    @classmethod
    def _normalize_legacy(cls, value):
        if not isinstance(value, dict):
            return value

        data = fold_judicial(value)
        case_id = data.get("id")
        if isinstance(data.get("parties"), list):
            data["parties"] = _readable_parties(case_id, data["parties"])
        if isinstance(data.get("evidence"), list):
            data["evidence"] = _readable(case_id, data["evidence"], Document)
        if isinstance(data.get("courtHistory"), list):
            data["courtHistory"] = _readable(case_id, data["courtHistory"], CourtHistoryEntry)
        return data

    @field_validator("status", mode="before")
    @classmethod
    def _canonical_status(cls, value):
        try:
            return normalize_status(value)
        except ValueError:
            logger.warning(f"[schemas] Unknown case status {value!r}, reading as {CaseStatus.PENDING.value}")
            return CaseStatus.PENDING

    @field_validator("parties", "evidence", "court_history", mode="before")
    @classmethod
    def _list_or_empty(cls, value):
        if not isinstance(value, list):
            return []
        return value

    def hospitals(self) -> List[str]:
        """Names of hospitals where a party of this case is admitted."""
        return [
            p.hospital_name for p in self.parties
            if p.is_hospitalized and p.hospital_name
        ]


__all__ = [
    "CaseStatus",
    "LEGACY_STATUS_MAP",
    "COURT_LOCKED_STATUSES",
    "normalize_status",
    "PartyRole",
    "MedicalStatus",
    "MedicalReport",
    "Party",
    "CourtHistoryEntry",
    "JudicialRecord",
    "Case",
]
