"""Common plumbing for role services."""

import logging
from datetime import date
from typing import Optional

from ..schemas import Case, Outcome
from ..store import CaseStore
from ..utils.errors import PermanentError, RecordNotFound, VersionConflict

logger = logging.getLogger(__name__)


def today() -> str:
    return date.today().isoformat()


class CaseService:
    """Base for services that read and write cases through a ``CaseStore``."""

    def __init__(self, store: Optional[CaseStore] = None):
        self.store = store or CaseStore()

    def _require(self, case_id: str) -> Case:
        case = self.store.find(case_id)
        if case is None:
            raise RecordNotFound(f"Case {case_id} does not exist.")
        return case

    def _commit(self, case: Case, expected_version: Optional[int] = None) -> Outcome:
        """Write a full copy of ``case`` back, bumping its version.

        Without ``expected_version`` the write is last-writer-wins. With it,
        a stored version that moved on since the caller read the case is a
        conflict and nothing is written.
        """
        try:
            stored = self._require(case.id)
            if expected_version is not None and stored.version != expected_version:
                logger.warning(
                    f"[services] Version conflict on {case.id}: "
                    f"expected {expected_version}, stored {stored.version}"
                )
                raise VersionConflict(f"Case {case.id} was changed by someone else. Reload and try again.")
        except PermanentError as e:
            return Outcome.from_error(e)

        updated = case.model_copy(update={"version": stored.version + 1})
        self.store.update_by_id(updated)
        return Outcome.success(updated)


__all__ = ["CaseService", "today"]
