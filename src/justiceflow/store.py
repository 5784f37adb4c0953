"""Record Store: the single authority over persisted case data.

Every operation reads the full collection blob, changes it in memory and
writes the full blob back. There is no locking: two callers working from
stale snapshots overwrite each other, last writer wins.
"""

import copy
import json
import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .config import settings
from .schemas import Case
from .seed import SEED_CASES
from .storage import StorageBackend, get_backend

logger = logging.getLogger(__name__)

# canonical key -> keys earlier releases wrote the same collection under
LEGACY_KEYS = {
    "justiceflow_users_final": ("justiceflow_users_seq",),
}


class JsonCollection:
    """One JSON array persisted under one key.

    A missing key seeds the collection and persists the seed right away. An
    unparseable blob is treated exactly like a missing one.
    """

    def __init__(
        self,
        backend: StorageBackend,
        key: str,
        seed: Optional[Sequence[dict]] = None,
        legacy_keys: Optional[Sequence[str]] = None,
    ):
        self.backend = backend
        self.key = key
        self.seed = list(seed or [])
        self.legacy_keys = tuple(legacy_keys if legacy_keys is not None else LEGACY_KEYS.get(key, ()))

    def load(self) -> List[dict]:
        raw = self.backend.get(self.key)
        if raw is None:
            raw = self._migrate_legacy()
        if raw is None:
            return self._reseed()

        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"[store] Corrupt blob under {self.key}, reseeding: {e}")
            return self._reseed()

        if not isinstance(items, list):
            logger.warning(f"[store] Blob under {self.key} is not a list, reseeding")
            return self._reseed()

        return items

    def save(self, items: List[dict]) -> None:
        self.backend.set(self.key, json.dumps(items))
        logger.debug(f"[store] Saved {len(items)} records under {self.key}")

    def _reseed(self) -> List[dict]:
        if not settings.SEED_ON_FIRST_USE:
            return []
        items = copy.deepcopy(self.seed)
        self.save(items)
        logger.info(f"[store] Seeded {self.key} with {len(items)} records")
        return items

    def _migrate_legacy(self) -> Optional[str]:
        for legacy_key in self.legacy_keys:
            raw = self.backend.get(legacy_key)
            if raw is None:
                continue
            try:
                items = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning(f"[store] Ignoring corrupt legacy key {legacy_key}")
                continue
            if not isinstance(items, list):
                continue

            self.backend.set(self.key, raw)
            self.backend.delete(legacy_key)
            logger.info(f"[store] Migrated {len(items)} records from {legacy_key} to {self.key}")
            return raw
        return None


class CaseStore:
    """Case collection with fetch-all, insert and update-by-id.

    Args:
        backend: Storage backend; defaults to the configured one
        key: Collection key; defaults to ``settings.CASES_KEY``
        seed: Records written on first use
    """

    def __init__(
        self,
        backend: Optional[StorageBackend] = None,
        key: Optional[str] = None,
        seed: Optional[Sequence[dict]] = None,
    ):
        self.collection = JsonCollection(
            backend or get_backend(),
            key or settings.CASES_KEY,
            seed=SEED_CASES if seed is None else seed,
        )

    @staticmethod
    def _parse(items: List[dict]) -> List[Case]:
        cases = []
        for item in items:
            try:
                cases.append(Case.model_validate(item))
            except ValidationError as e:
                record_id = item.get("id") if isinstance(item, dict) else None
                logger.warning(f"[store] Skipping unreadable case {record_id!r}: {e.error_count()} errors")
        return cases

    def fetch_all(self) -> List[Case]:
        """Return every case, newest first."""
        return self._parse(self.collection.load())

    def insert(self, case: Case) -> List[Case]:
        """Prepend ``case`` and persist.

        The caller supplies a unique id; duplicates are not checked here.
        """
        items = [case.to_record()] + self.collection.load()
        self.collection.save(items)
        logger.info(f"[store] Inserted case {case.id}")
        return self._parse(items)

    def update_by_id(self, case: Case) -> List[Case]:
        """Replace the stored case with the same id, wholesale.

        Fields missing from ``case`` are not merged from the stored copy.
        An unknown id leaves the collection untouched.
        """
        items = self.collection.load()
        for index, item in enumerate(items):
            if isinstance(item, dict) and item.get("id") == case.id:
                items[index] = case.to_record()
                self.collection.save(items)
                logger.info(f"[store] Updated case {case.id}")
                return self._parse(items)

        logger.info(f"[store] No case {case.id} to update")
        return self._parse(items)

    def find(self, case_id: str, case_insensitive: bool = False) -> Optional[Case]:
        """Return the case with ``case_id`` or None."""
        wanted = case_id.lower() if case_insensitive else case_id
        for case in self.fetch_all():
            candidate = case.id.lower() if case_insensitive else case.id
            if candidate == wanted:
                return case
        return None


__all__ = ["LEGACY_KEYS", "JsonCollection", "CaseStore"]
