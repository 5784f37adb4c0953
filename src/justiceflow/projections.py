"""Role-specific projections of the case collection.

All functions here are pure: they never touch the store and never mutate
their input. Each role view applies the role's jurisdiction first, then the
user-selected filters.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .filters import (
    any_of_predicate,
    apply_filters,
    category_predicate,
    date_range_predicate,
    jurisdiction_predicate,
    search_predicate,
)
from .schemas import Case, PatientRow

logger = logging.getLogger(__name__)

POLICE_SEARCH_FIELDS = ("id", "victim_name", "venue")
JUDGE_SEARCH_FIELDS = ("id", "victim_name", "venue")
JMO_SEARCH_FIELDS = ("case.id", "party.name", "party.nic")


def row_key(case_id: str, party_index: int) -> str:
    return f"{case_id}-{party_index}"


def parse_row_key(key: str) -> Tuple[str, int]:
    """Split a row key into case id and party index.

    Case ids contain dashes themselves, so the index is the last segment.

    Raises:
        ValueError: If the key has no numeric trailing segment
    """
    case_id, sep, index = key.rpartition("-")
    if not sep or not case_id or not index.isdigit():
        raise ValueError(f"Malformed row key: {key!r}")
    return case_id, int(index)


def flatten_patients(cases: Iterable[Case], facility: str) -> List[PatientRow]:
    """Flatten cases into one row per party admitted at ``facility``.

    Hospital names match exactly, without normalization. Cases are walked in
    store order and parties in list order. A case whose party list is absent
    or malformed contributes no rows.
    """
    rows = []
    for case in cases:
        parties = getattr(case, "parties", None)
        if not isinstance(parties, list):
            continue
        for index, party in enumerate(parties):
            if getattr(party, "is_hospitalized", False) is not True:
                continue
            if getattr(party, "hospital_name", None) != facility:
                continue
            rows.append(PatientRow(
                row_key=row_key(case.id, index),
                case=case,
                party=party,
                party_index=index,
            ))

    logger.debug(f"[projections] {len(rows)} patient rows for {facility}")
    return rows


def police_cases(
    cases: Iterable[Case],
    station: str,
    search: str = "",
    start: str = "",
    end: str = "",
    court: str = "",
) -> List[Case]:
    """Cases registered at ``station``."""
    return apply_filters(
        cases,
        jurisdiction_predicate("station", station),
        search_predicate(search, POLICE_SEARCH_FIELDS),
        date_range_predicate("date", start, end),
        category_predicate("assigned_court", court),
    )


def judge_cases(
    cases: Iterable[Case],
    court: str,
    search: str = "",
    start: str = "",
    end: str = "",
    status: str = "",
) -> List[Case]:
    """Cases assigned to ``court``."""
    return apply_filters(
        cases,
        jurisdiction_predicate("assigned_court", court),
        search_predicate(search, JUDGE_SEARCH_FIELDS),
        date_range_predicate("date", start, end),
        category_predicate("status", status),
    )


def jmo_patients(
    cases: Iterable[Case],
    hospital: str,
    search: str = "",
    start: str = "",
    end: str = "",
) -> List[PatientRow]:
    """Patients admitted at ``hospital``; dates filter on the incident date."""
    rows = flatten_patients(cases, hospital)
    return apply_filters(
        rows,
        jurisdiction_predicate("party.hospital_name", hospital),
        search_predicate(search, JMO_SEARCH_FIELDS),
        date_range_predicate("case.date", start, end),
    )


def admin_report(
    cases: Iterable[Case],
    start: str = "",
    end: str = "",
    station: str = "",
    court: str = "",
    hospital: Optional[str] = "",
    status: str = "",
) -> List[Case]:
    """Administrative report across all jurisdictions.

    A case matches the hospital filter when any of its admitted parties is
    at that hospital.
    """
    return apply_filters(
        cases,
        None,
        date_range_predicate("date", start, end),
        category_predicate("station", station),
        category_predicate("assigned_court", court),
        any_of_predicate(lambda c: c.hospitals(), hospital),
        category_predicate("status", status),
    )


__all__ = [
    "row_key",
    "parse_row_key",
    "flatten_patients",
    "police_cases",
    "judge_cases",
    "jmo_patients",
    "admin_report",
]
