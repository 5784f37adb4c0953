"""Test configuration and fixtures."""

import pytest

from justiceflow.schemas import Case
from justiceflow.storage import MemoryBackend
from justiceflow.store import CaseStore


@pytest.fixture
def backend():
    """Fresh in-memory storage for each test."""
    return MemoryBackend()


@pytest.fixture
def store(backend):
    """Case store that starts empty instead of seeded."""
    return CaseStore(backend, seed=[])


@pytest.fixture
def seeded_store(backend):
    """Case store seeded with the bundled example data."""
    return CaseStore(backend)


@pytest.fixture
def make_case():
    """Build a Case from persisted-layout keyword arguments."""

    def _make(case_id: str, **fields) -> Case:
        data = {
            "id": case_id,
            "date": "2024-06-01",
            "venue": "Borella",
            "desc": "Incident",
            "status": "Pending",
            "assignedCourt": "Mount Lavinia Magistrate Court",
            "station": "Mount Lavinia HQ",
            "parties": [],
        }
        data.update(fields)
        return Case.model_validate(data)

    return _make


@pytest.fixture
def hospitalized_party():
    def _party(name: str = "Saman Perera", hospital: str = "National Hospital", **fields) -> dict:
        party = {
            "name": name,
            "nic": "198512345670",
            "role": "Victim",
            "isHospitalized": True,
            "hospitalName": hospital,
        }
        party.update(fields)
        return party

    return _party
