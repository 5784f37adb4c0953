"""Client-side predicate filtering over cases and patient rows.

Predicates are plain callables built from a field path and a user-selected
value. ``apply_filters`` always runs the jurisdiction predicate first and
ANDs everything else; there is no OR composition.

Field paths are dotted (``"case.id"``, ``"party.nic"``) and resolve through
attributes or mapping keys, so the same predicates work on ``Case`` models,
``PatientRow`` models and raw dicts.
"""

import enum
import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Predicate = Callable[[Any], bool]


def field_value(record: Any, path: str) -> Any:
    """Resolve a dotted path; missing segments yield None."""
    value = record
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    if isinstance(value, enum.Enum):
        value = value.value
    return value


def search_predicate(term: Optional[str], fields: Sequence[str]) -> Predicate:
    """Case-insensitive substring match on any of ``fields``.

    An empty term matches every record.
    """
    needle = (term or "").strip().lower()

    def predicate(record: Any) -> bool:
        if not needle:
            return True
        for path in fields:
            value = field_value(record, path)
            if isinstance(value, str) and needle in value.lower():
                return True
        return False

    return predicate


def date_range_predicate(field: str, start: Optional[str] = None, end: Optional[str] = None) -> Predicate:
    """Inclusive range on an ISO ``YYYY-MM-DD`` field.

    Bounds compare as strings, which is only correct for that exact format.
    An empty bound leaves that side open. A record without a date fails any
    non-empty bound.
    """

    def predicate(record: Any) -> bool:
        value = field_value(record, field)
        if start:
            if not value or value < start:
                return False
        if end:
            if not value or value > end:
                return False
        return True

    return predicate


def category_predicate(field: str, selected: Optional[str]) -> Predicate:
    """Exact match on ``field``; an unselected value matches everything."""

    def predicate(record: Any) -> bool:
        if not selected:
            return True
        return field_value(record, field) == selected

    return predicate


def any_of_predicate(values: Callable[[Any], Iterable[str]], selected: Optional[str]) -> Predicate:
    """Exact match against any of several values derived from a record."""

    def predicate(record: Any) -> bool:
        if not selected:
            return True
        return selected in list(values(record))

    return predicate


def jurisdiction_predicate(field: str, place: Optional[str]) -> Predicate:
    """Mandatory narrowing to the acting user's organization.

    Unlike the categorical filters an empty place matches nothing.
    """

    def predicate(record: Any) -> bool:
        if not place:
            return False
        return field_value(record, field) == place

    return predicate


def apply_filters(records: Iterable[T], jurisdiction: Optional[Predicate], *predicates: Predicate) -> List[T]:
    """Jurisdiction first, then every predicate ANDed, order preserved.

    Pass ``jurisdiction=None`` only for roles without a jurisdiction
    (administrators, read-only reviewers).
    """
    scoped = [r for r in records if jurisdiction(r)] if jurisdiction is not None else list(records)
    result = [r for r in scoped if all(p(r) for p in predicates)]
    logger.debug(f"[filters] {len(scoped)} in jurisdiction, {len(result)} after filters")
    return result


__all__ = [
    "Predicate",
    "field_value",
    "search_predicate",
    "date_range_predicate",
    "category_predicate",
    "any_of_predicate",
    "jurisdiction_predicate",
    "apply_filters",
]
