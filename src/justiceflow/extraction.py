"""Defensive readers for judicial and medical sub-records.

The read-only reviewer must render whatever the court and medical roles
wrote, whichever field-name variant produced it. These readers never return
None for a displayable field: unresolved fields fall back to a placeholder
string, and ``has_data`` tells the caller whether anything real was found.
"""

import logging
from typing import Any, List, Mapping, Optional

from .aliases import is_present, resolve_judicial, resolve_medical
from .schemas import Case, Document, MedicalInfo, JudicialInfo

logger = logging.getLogger(__name__)

NO_VERDICT = "No verdict recorded."
NO_REMARKS = "No additional remarks recorded."
NO_SENTENCE = "No sentence recorded."
NO_HEARING = "No hearing scheduled."
NO_MEDICAL_NOTES = "No medical observations recorded."


def _as_mapping(record: Any) -> Optional[Mapping]:
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record
    if hasattr(record, "to_record"):
        return record.to_record()
    return None


def _last_next_date(record: Mapping) -> Optional[str]:
    history = record.get("courtHistory")
    if not isinstance(history, list):
        return None
    for entry in reversed(history):
        if isinstance(entry, Mapping) and is_present(entry.get("nextDate")):
            return entry["nextDate"]
    return None


def extract_judicial(record: Any) -> JudicialInfo:
    """Read verdict, remarks, sentence and next hearing from a case.

    Containers (``courtData``, ``judicialData``) are searched before flat
    aliases. The next hearing falls back to the latest court history entry
    that scheduled one.

    Args:
        record: Raw case mapping or a ``Case``

    Returns:
        JudicialInfo with placeholders for unresolved fields
    """
    data = _as_mapping(record) or {}
    resolved = resolve_judicial(data)

    verdict = resolved["verdict"]
    remarks = resolved["remarks"]
    sentence = resolved["sentence"]
    next_hearing = resolved["nextHearing"] or _last_next_date(data)

    return JudicialInfo(
        has_data=any(v is not None for v in (verdict, remarks, sentence)),
        verdict=str(verdict) if verdict is not None else NO_VERDICT,
        remarks=str(remarks) if remarks is not None else NO_REMARKS,
        sentence=str(sentence) if sentence is not None else NO_SENTENCE,
        next_hearing=str(next_hearing) if next_hearing is not None else NO_HEARING,
    )


def _documents(value: Any) -> List[Document]:
    if not isinstance(value, list):
        return []
    documents = []
    for item in value:
        try:
            documents.append(Document.model_validate(item))
        except ValueError:
            logger.warning("[extraction] Dropping unreadable attachment")
    return documents


def extract_medical(record: Any, party_name: Optional[str] = None) -> MedicalInfo:
    """Read medical notes and attachments from a party or a legacy case.

    Args:
        record: Raw party/case mapping, or a ``Party``/``Case`` model
        party_name: Label carried through to the result

    Returns:
        MedicalInfo; ``has_data`` is true only if notes or documents exist
    """
    data = _as_mapping(record) or {}
    resolved = resolve_medical(data)

    notes = resolved["notes"]
    documents = _documents(resolved["documents"])

    return MedicalInfo(
        has_data=notes is not None or len(documents) > 0,
        notes=str(notes) if notes is not None else NO_MEDICAL_NOTES,
        documents=documents,
        status=resolved["status"],
        updated_date=resolved["updatedDate"],
        party_name=party_name,
    )


def medical_summaries(case: Case) -> List[MedicalInfo]:
    """One entry per hospitalized party, plus legacy case-level medical data.

    Reports belong to parties, so two admitted parties of the same case get
    independent entries.
    """
    summaries = [
        extract_medical(party, party_name=party.name)
        for party in case.parties
        if party.is_hospitalized
    ]

    legacy = extract_medical(case.to_record())
    if legacy.has_data:
        summaries.append(legacy)

    return summaries


__all__ = [
    "NO_VERDICT",
    "NO_REMARKS",
    "NO_SENTENCE",
    "NO_HEARING",
    "NO_MEDICAL_NOTES",
    "extract_judicial",
    "extract_medical",
    "medical_summaries",
]
