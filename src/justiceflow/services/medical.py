"""Medical officer (JMO) workflow: patient lists and report submission."""

import logging
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from ..config import settings
from ..projections import jmo_patients, parse_row_key
from ..schemas import Document, MedicalReport, MedicalStatus, Outcome, PatientRow
from ..store import CaseStore
from ..utils.errors import ValidationFailed
from ..validation import validate_choice
from .base import CaseService, today

logger = logging.getLogger(__name__)


class MedicalService(CaseService):
    """Operations available to a medical officer of one hospital."""

    def __init__(self, hospital: str, officer: str, store: Optional[CaseStore] = None):
        super().__init__(store)
        self.hospital = hospital
        self.officer = officer

    def list_patients(self, search: str = "", start: str = "", end: str = "") -> List[PatientRow]:
        return jmo_patients(self.store.fetch_all(), self.hospital, search, start, end)

    @staticmethod
    def _attachments(documents: Optional[Iterable[Any]]) -> List[Document]:
        attachments = []
        for item in documents or []:
            doc = item if isinstance(item, Document) else Document.model_validate(item)
            if doc.size_bytes > settings.MAX_ATTACHMENT_BYTES:
                raise ValidationFailed(
                    f"File {doc.name} is too large. Maximum limit is "
                    f"{settings.MAX_ATTACHMENT_BYTES // 1000}KB."
                )
            attachments.append(doc)
        return attachments

    def submit_report(
        self,
        row_key: str,
        status: str,
        notes: str = "",
        documents: Optional[Iterable[Any]] = None,
        party_id: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> Outcome:
        """Overwrite the medical report of one admitted party.

        The party is addressed by its original position in the case, taken
        from ``row_key``. When ``party_id`` is given it must match the party
        at that position. The case's own status is not touched.

        Args:
            row_key: ``"{case_id}-{party_index}"`` from a patient row
            status: One of the ``MedicalStatus`` values
            notes: Examination notes
            documents: Attachments; each at most ``MAX_ATTACHMENT_BYTES``
            party_id: Synthetic id of the party the caller was looking at
            expected_version: Case version the caller read

        Returns:
            Outcome holding the updated Case
        """
        try:
            case_id, index = parse_row_key(row_key)
            validate_choice(status, [s.value for s in MedicalStatus], "status")
            attachments = self._attachments(documents)
        except ValidationFailed as e:
            return Outcome.invalid(str(e))
        except ValidationError as e:
            return Outcome.invalid(f"Invalid attachment data: {e.error_count()} errors.")
        except ValueError as e:
            return Outcome.invalid(str(e))

        case = self.store.find(case_id)
        if case is None:
            return Outcome.not_found(f"Case {case_id} does not exist.")
        if index >= len(case.parties):
            return Outcome.not_found(f"Case {case_id} has no party at position {index}.")

        party = case.parties[index]
        if party_id is not None and party.party_id != party_id:
            return Outcome.conflict(f"Party at position {index} of {case_id} has changed.")
        if not party.is_hospitalized or party.hospital_name != self.hospital:
            return Outcome.denied(f"{party.name} is not a patient of {self.hospital}.")

        report = MedicalReport(
            status=status,
            notes=notes,
            documents=attachments,
            updated_date=today(),
            officer=self.officer,
            location=self.hospital,
        )

        updated = case.model_copy(deep=True)
        updated.parties[index] = party.model_copy(update={"medical_report": report})

        outcome = self._commit(updated, expected_version)
        if outcome.ok:
            logger.info(f"[medical] Report submitted for {row_key} ({status})")
        return outcome


__all__ = ["MedicalService"]
