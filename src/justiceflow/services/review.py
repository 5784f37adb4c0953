"""Read-only case review for attorneys."""

import logging
from typing import Optional

from ..extraction import extract_judicial, medical_summaries
from ..schemas import CaseDossier, Outcome
from ..store import CaseStore
from .base import CaseService

logger = logging.getLogger(__name__)


class ReviewService(CaseService):
    """Attorneys see any case by id but never write."""

    def __init__(self, store: Optional[CaseStore] = None):
        super().__init__(store)

    def lookup(self, case_id: str) -> Outcome:
        term = (case_id or "").strip()
        if not term:
            return Outcome.invalid("Please enter a Case ID.")
        case = self.store.find(term, case_insensitive=True)
        if case is None:
            return Outcome.not_found(f"Case ID {term} not found.")
        return Outcome.success(case)

    def dossier(self, case_id: str) -> Outcome:
        """Case plus judicial and medical summaries ready for display."""
        found = self.lookup(case_id)
        if not found.ok:
            return found

        case = found.value
        dossier = CaseDossier(
            case=case,
            judicial=extract_judicial(case),
            medical=medical_summaries(case),
        )
        logger.debug(f"[review] Built dossier for {case.id}")
        return Outcome.success(dossier)


__all__ = ["ReviewService"]
