"""Alias tables for judicial and medical sub-records.

Upstream roles wrote the same datum under several names over time, either
flat on the record or nested in a container object. Each field below lists
the container keys it may appear under and the flat aliases, in lookup
priority order.
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

JUDICIAL_CONTAINERS: Tuple[str, ...] = ("courtData", "judicialData")

# field -> (container keys, flat keys)
JUDICIAL_FIELDS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "verdict": (("verdict",), ("verdict", "judicialVerdict")),
    "remarks": (("remarks", "summary"), ("remarks", "judicialRemarks")),
    "sentence": (("sentence",), ("sentence",)),
    "nextHearing": (("nextHearing",), ("nextHearing",)),
}

MEDICAL_CONTAINERS: Tuple[str, ...] = ("medicalReport", "jmoReport", "medical")

MEDICAL_FIELDS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "notes": (("notes", "description", "summary", "observations"), ("medicalNotes",)),
    "documents": (("documents", "files", "attachments"), ()),
    "status": (("status",), ()),
    "updatedDate": (("updatedDate",), ()),
    "officer": (("officer",), ()),
    "location": (("location",), ()),
}


def is_present(value: Any) -> bool:
    """A value counts as recorded unless it is None or a blank string."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def _lookup(source: Any, key: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


def resolve(
    record: Any,
    containers: Sequence[str],
    container_keys: Sequence[str],
    flat_keys: Sequence[str],
) -> Optional[Any]:
    """Return the first recorded value for one field, or None.

    Containers are searched before flat keys.
    """
    if record is None:
        return None

    for container_name in containers:
        container = _lookup(record, container_name)
        if not isinstance(container, Mapping):
            continue
        for key in container_keys:
            value = container.get(key)
            if is_present(value):
                return value

    for key in flat_keys:
        value = _lookup(record, key)
        if is_present(value):
            return value

    return None


def resolve_judicial(record: Any) -> Dict[str, Any]:
    """Resolve every judicial field; unresolved fields map to None."""
    return {
        field: resolve(record, JUDICIAL_CONTAINERS, container_keys, flat_keys)
        for field, (container_keys, flat_keys) in JUDICIAL_FIELDS.items()
    }


def resolve_medical(record: Any) -> Dict[str, Any]:
    """Resolve every medical field; unresolved fields map to None."""
    return {
        field: resolve(record, MEDICAL_CONTAINERS, container_keys, flat_keys)
        for field, (container_keys, flat_keys) in MEDICAL_FIELDS.items()
    }


def fold_judicial(raw: Mapping) -> Dict[str, Any]:
    """Move legacy judicial fields of a raw case into ``courtData``.

    Returns a new mapping; the input is left untouched. Flat judicial aliases
    and the ``judicialData`` container are removed once their values have
    been copied into ``courtData``.
    """
    data = dict(raw)
    resolved = {k: v for k, v in resolve_judicial(data).items() if v is not None}

    for _, flat_keys in JUDICIAL_FIELDS.values():
        for key in flat_keys:
            data.pop(key, None)
    for container_name in JUDICIAL_CONTAINERS:
        data.pop(container_name, None)

    if resolved:
        data["courtData"] = resolved
    return data


__all__ = [
    "JUDICIAL_CONTAINERS",
    "JUDICIAL_FIELDS",
    "MEDICAL_CONTAINERS",
    "MEDICAL_FIELDS",
    "is_present",
    "resolve",
    "resolve_judicial",
    "resolve_medical",
    "fold_judicial",
]
