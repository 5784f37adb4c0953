"""Judicial workflow: case lookup and rulings for one court."""

import logging
from typing import List, Optional

from ..projections import judge_cases
from ..schemas import CaseStatus, CourtHistoryEntry, JudicialRecord, Outcome, Case, normalize_status
from ..store import CaseStore
from ..utils.errors import ValidationFailed
from ..validation import require, validate_iso_date
from .base import CaseService, today

logger = logging.getLogger(__name__)

REASON_REQUIRED = (CaseStatus.CASE_DISMISSED, CaseStatus.REFERRED)
DEFAULT_RULING_DETAILS = "Status updated by Court"


class CourtService(CaseService):
    """Operations available to a judge of one court."""

    def __init__(self, court: str, store: Optional[CaseStore] = None):
        super().__init__(store)
        self.court = court

    def list_cases(self, search: str = "", start: str = "", end: str = "", status: str = "") -> List[Case]:
        return judge_cases(self.store.fetch_all(), self.court, search, start, end, status)

    def lookup(self, case_id: str) -> Outcome:
        """Find a case by id, ignoring case.

        A case assigned to another court is denied, not reported missing.
        """
        if not (case_id or "").strip():
            return Outcome.invalid("Please enter a Case ID.")

        case = self.store.find(case_id.strip(), case_insensitive=True)
        if case is None:
            return Outcome.not_found(f"Case ID {case_id} does not exist in the registry.")
        if case.assigned_court != self.court:
            logger.warning(f"[court] {self.court} denied access to {case.id}")
            return Outcome.denied(f"You are not authorized to view cases from {case.assigned_court}.")
        return Outcome.success(case)

    def record_ruling(
        self,
        case_id: str,
        status: str,
        reason: str = "",
        note: str = "",
        next_date: str = "",
        verdict: Optional[str] = None,
        sentence: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> Outcome:
        """Set the case status and append one court history entry.

        Adjournments need a next hearing date; dismissals and referrals need
        a reason. Earlier history entries are never modified.
        """
        found = self.lookup(case_id)
        if not found.ok:
            return found
        case: Case = found.value

        try:
            require(ruling_status=status)
            try:
                ruling = normalize_status(status)
            except ValueError as e:
                raise ValidationFailed(f"Unknown ruling status: {status}.") from e
            if ruling == CaseStatus.ADJOURNED:
                require(next_hearing_date=next_date)
            if next_date:
                validate_iso_date(next_date, "next hearing date")
            if ruling in REASON_REQUIRED:
                require(reason=reason)
        except ValidationFailed as e:
            return Outcome.invalid(str(e))

        entry = CourtHistoryEntry(
            date=today(),
            action=f"Ruling: {ruling.value}",
            details=reason or note or DEFAULT_RULING_DETAILS,
            next_date=next_date or None,
        )

        judicial = case.judicial.model_copy() if case.judicial else JudicialRecord()
        if verdict:
            judicial.verdict = verdict
        if sentence:
            judicial.sentence = sentence
        if reason or note:
            judicial.remarks = reason or note
        if next_date:
            judicial.next_hearing = next_date

        updated = case.model_copy(update={
            "status": ruling,
            "court_history": case.court_history + [entry],
            "judicial": judicial,
        })

        outcome = self._commit(updated, expected_version)
        if outcome.ok:
            logger.info(f"[court] Ruling on {case.id}: {ruling.value}")
        return outcome


__all__ = ["CourtService"]
