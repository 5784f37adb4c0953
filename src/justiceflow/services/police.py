"""Police intake: registering cases and maintaining them at the station."""

import logging
import random
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from ..config import settings
from ..projections import police_cases
from ..schemas import (
    COURT_LOCKED_STATUSES,
    Case,
    CaseStatus,
    Document,
    Outcome,
    Party,
    PartyRole,
)
from ..store import CaseStore
from ..utils.errors import AccessDenied, PermanentError, ValidationFailed
from ..validation import require, validate_iso_date, validate_nic
from .base import CaseService

logger = logging.getLogger(__name__)

POLICE_STATUSES = (CaseStatus.PENDING, CaseStatus.UNDER_INVESTIGATION, CaseStatus.CLOSED)
MAX_ID_ATTEMPTS = 100


def _build_party(raw: Any) -> Party:
    party = raw if isinstance(raw, Party) else Party.model_validate(raw)
    require(party_name=party.name)
    validate_nic(party.nic)
    if party.is_hospitalized:
        require(hospital=party.hospital_name)
    else:
        party = party.model_copy(update={"hospital_name": None})
    return party


def _build_documents(raw: Optional[Iterable[Any]]) -> List[Document]:
    documents = []
    for item in raw or []:
        documents.append(item if isinstance(item, Document) else Document.model_validate(item))
    return documents


class PoliceService(CaseService):
    """Operations available to an officer of one station."""

    def __init__(self, station: str, officer: str, store: Optional[CaseStore] = None):
        super().__init__(store)
        self.station = station
        self.officer = officer

    def _generate_case_id(self, existing: Iterable[str]) -> str:
        taken = set(existing)
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = f"{settings.CASE_ID_PREFIX}-{random.randint(1000, 9999)}"
            if candidate not in taken:
                return candidate
        raise ValidationFailed("Could not allocate a free case id.")

    def _owned(self, case_id: str) -> Case:
        case = self._require(case_id)
        if case.station != self.station:
            logger.warning(f"[police] {self.station} denied access to {case_id}")
            raise AccessDenied(f"Case {case_id} belongs to {case.station}.")
        return case

    def list_cases(self, search: str = "", start: str = "", end: str = "", court: str = "") -> List[Case]:
        return police_cases(self.store.fetch_all(), self.station, search, start, end, court)

    def register_case(
        self,
        date: str,
        venue: str,
        description: str,
        assigned_court: str,
        parties: Iterable[Any] = (),
        evidence: Optional[Iterable[Any]] = None,
        reporter_role: str = PartyRole.VICTIM.value,
        case_id: Optional[str] = None,
    ) -> Outcome:
        """Validate and insert a new case at the top of the store.

        Args:
            date: Incident date, ``YYYY-MM-DD``, not in the future
            venue: Where the incident happened
            description: Free-text account
            assigned_court: Court name the case is referred to
            parties: Party mappings or models, in the order given
            evidence: Documents captured at intake
            reporter_role: Role of the person reporting
            case_id: Explicit id; generated as ``CRIM-nnnn`` when omitted

        Returns:
            Outcome holding the stored Case
        """
        try:
            require(date=date, venue=venue, description=description, assigned_court=assigned_court)
            validate_iso_date(date, "incident date", allow_future=False)
            party_models = [_build_party(p) for p in parties]
            documents = _build_documents(evidence)
        except ValidationFailed as e:
            return Outcome.invalid(str(e))
        except ValidationError as e:
            return Outcome.invalid(f"Invalid party or evidence data: {e.error_count()} errors.")

        existing_ids = [c.id for c in self.store.fetch_all()]
        if case_id is None:
            try:
                case_id = self._generate_case_id(existing_ids)
            except ValidationFailed as e:
                return Outcome.invalid(str(e))
        elif case_id in existing_ids:
            return Outcome.invalid(f"Case {case_id} already exists.")

        victim = next((p for p in party_models if p.role == PartyRole.VICTIM), None)
        if victim is None and party_models:
            victim = party_models[0]

        case = Case(
            id=case_id,
            date=date,
            venue=venue,
            description=description,
            reporter_role=reporter_role,
            evidence=documents,
            parties=party_models,
            status=CaseStatus.PENDING,
            victim_name=victim.name if victim else "N/A",
            jmo_required=any(p.is_hospitalized for p in party_models),
            assigned_court=assigned_court,
            station=self.station,
            officer=self.officer,
        )
        self.store.insert(case)
        logger.info(f"[police] Registered case {case.id} at {self.station}")
        return Outcome.success(case)

    def update_details(
        self,
        case_id: str,
        venue: Optional[str] = None,
        description: Optional[str] = None,
        reporter_role: Optional[str] = None,
        new_evidence: Optional[Iterable[Any]] = None,
        expected_version: Optional[int] = None,
    ) -> Outcome:
        """Edit venue/description/reporter role and append evidence.

        Existing evidence is never removed.
        """
        try:
            case = self._owned(case_id)
        except PermanentError as e:
            return Outcome.from_error(e)

        try:
            if venue is not None:
                require(venue=venue)
            if description is not None:
                require(description=description)
            documents = _build_documents(new_evidence)
        except ValidationFailed as e:
            return Outcome.invalid(str(e))
        except ValidationError as e:
            return Outcome.invalid(f"Invalid evidence data: {e.error_count()} errors.")

        changes = {"evidence": case.evidence + documents}
        if venue is not None:
            changes["venue"] = venue
        if description is not None:
            changes["description"] = description
        if reporter_role is not None:
            changes["reporter_role"] = reporter_role

        outcome = self._commit(case.model_copy(update=changes), expected_version)
        if outcome.ok:
            logger.info(f"[police] Updated case {case_id} (+{len(documents)} evidence)")
        return outcome

    def change_status(self, case_id: str, status: str, expected_version: Optional[int] = None) -> Outcome:
        """Move a case between the statuses the police may set.

        Once the court has adjourned, dismissed, referred or closed a case its
        status is locked for the police.
        """
        try:
            case = self._owned(case_id)
        except PermanentError as e:
            return Outcome.from_error(e)

        try:
            new_status = CaseStatus(status)
        except ValueError:
            return Outcome.invalid(f"Unknown status: {status}.")
        if new_status not in POLICE_STATUSES:
            return Outcome.invalid(f"Police cannot set status {new_status.value}.")
        if case.status in COURT_LOCKED_STATUSES:
            return Outcome.invalid(f"Case {case_id} is {case.status.value}; status is locked.")

        outcome = self._commit(case.model_copy(update={"status": new_status}), expected_version)
        if outcome.ok:
            logger.info(f"[police] Case {case_id} status -> {new_status.value}")
        return outcome


__all__ = ["PoliceService", "POLICE_STATUSES"]
