"""Tests for record parsing and legacy normalization."""

import pytest
from pydantic import ValidationError

from justiceflow.schemas import (
    Account,
    Case,
    CaseStatus,
    Document,
    Outcome,
    OutcomeStatus,
    Party,
    PartyRole,
    normalize_status,
)
from justiceflow.utils.errors import AccessDenied, RecordNotFound, ValidationFailed, VersionConflict


@pytest.mark.parametrize("stored,expected", [
    ("Open", CaseStatus.PENDING),
    ("Investigating", CaseStatus.UNDER_INVESTIGATION),
    ("Dismissed", CaseStatus.CASE_DISMISSED),
    ("Referred", CaseStatus.REFERRED),
    ("Closed", CaseStatus.CLOSED),
    ("", CaseStatus.PENDING),
    (None, CaseStatus.PENDING),
])
def test_normalize_status(stored, expected):
    assert normalize_status(stored) == expected


def test_unknown_status_is_rejected():
    with pytest.raises(ValueError):
        normalize_status("Archived")


def test_status_matching_ignores_case():
    assert normalize_status("closed") == CaseStatus.CLOSED
    assert normalize_status("under investigation") == CaseStatus.UNDER_INVESTIGATION
    assert normalize_status("OPEN") == CaseStatus.PENDING


def test_unknown_stored_status_reads_as_pending(caplog):
    case = Case.model_validate({"id": "A", "status": "Archived"})

    assert case.status == CaseStatus.PENDING
    assert "Unknown case status 'Archived'" in caplog.text


def test_case_reads_persisted_layout():
    case = Case.model_validate({
        "id": "A",
        "location": "Borella",
        "desc": "Incident",
        "assignedCourt": "Court A",
        "victimName": "Saman",
        "jmoRequired": True,
    })

    assert case.venue == "Borella"
    assert case.description == "Incident"
    assert case.assigned_court == "Court A"
    assert case.jmo_required is True


def test_case_writes_persisted_layout():
    record = Case(id="A", venue="Borella", description="Incident").to_record()

    assert record["venue"] == "Borella"
    assert record["desc"] == "Incident"
    assert "description" not in record
    assert record["assignedCourt"] == ""
    assert record["courtData"] is None
    assert record["version"] == 0


def test_flat_judicial_fields_fold_into_court_data():
    case = Case.model_validate({"id": "A", "judicialVerdict": "Guilty", "judicialRemarks": "First offence"})

    assert case.judicial.verdict == "Guilty"
    assert case.judicial.remarks == "First offence"
    record = case.to_record()
    assert "judicialVerdict" not in record
    assert record["courtData"]["verdict"] == "Guilty"


def test_unknown_keys_survive_a_rewrite():
    case = Case.model_validate({"id": "A", "legacyFlag": "x"})

    assert case.to_record()["legacyFlag"] == "x"


def test_malformed_lists_read_as_empty():
    case = Case.model_validate({"id": "A", "parties": None, "evidence": "x", "courtHistory": {}})

    assert case.parties == []
    assert case.evidence == []
    assert case.court_history == []


def test_party_legacy_role_and_generated_id():
    party = Party.model_validate({"name": "Nimal", "role": "Accused", "partyId": ""})

    assert party.role == PartyRole.SUSPECT
    assert party.party_id


def test_party_ids_are_distinct():
    assert Party(name="A").party_id != Party(name="A").party_id


def test_case_hospitals():
    case = Case.model_validate({"id": "A", "parties": [
        {"name": "A", "isHospitalized": True, "hospitalName": "National Hospital"},
        {"name": "B", "isHospitalized": False, "hospitalName": "Other"},
    ]})

    assert case.hospitals() == ["National Hospital"]


def test_document_from_bare_filename():
    doc = Document.model_validate("photo.jpg")

    assert doc.name == "photo.jpg"
    assert doc.type == "unknown"
    assert doc.has_content is False
    assert doc.size_bytes == 0


def test_document_accepts_file_data_alias():
    doc = Document.model_validate({"name": "a.png", "fileData": "data:image/png;base64,QUJD"})

    assert doc.has_content is True
    assert doc.size_bytes == 3
    assert doc.to_record()["data"] == "data:image/png;base64,QUJD"


def test_account_role_is_case_insensitive_and_public_hides_password():
    account = Account.model_validate({"id": "USR-1", "name": "A", "email": "a@x", "role": "Police", "password": "s"})

    assert account.role.value == "police"
    assert "password" not in account.public()


@pytest.mark.parametrize("error,status", [
    (ValidationFailed("bad"), OutcomeStatus.INVALID),
    (RecordNotFound("missing"), OutcomeStatus.NOT_FOUND),
    (AccessDenied("no"), OutcomeStatus.DENIED),
    (VersionConflict("stale"), OutcomeStatus.CONFLICT),
])
def test_outcome_from_error(error, status):
    outcome = Outcome.from_error(error)

    assert outcome.status == status
    assert outcome.message == str(error)
    assert outcome.ok is False


def test_case_without_id_is_unreadable():
    with pytest.raises(ValidationError):
        Case.model_validate({"status": "Pending"})


def test_unreadable_party_entries_are_dropped():
    case = Case.model_validate({"id": "A", "parties": [
        None,
        "Saman",
        {"name": "Nimal", "role": "Bystander"},
        {"name": "Kamal", "nic": "197812345670"},
    ]})

    assert [p.name for p in case.parties] == ["Kamal"]


def test_unreadable_evidence_and_history_entries_are_dropped():
    case = Case.model_validate({
        "id": "A",
        "evidence": ["photo.jpg", None, 42],
        "courtHistory": [{"date": "2024-01-01", "action": "Ruling: Pending"}, {"details": "no date"}],
    })

    assert [d.name for d in case.evidence] == ["photo.jpg"]
    assert [h.action for h in case.court_history] == ["Ruling: Pending"]


def test_parties_without_id_get_stable_positional_ids():
    raw = {"id": "CRIM-0001", "parties": [{"name": "A"}, {"name": "B", "partyId": "kept"}, {"name": "C"}]}

    first = Case.model_validate(raw)
    second = Case.model_validate(raw)

    assert [p.party_id for p in first.parties] == ["CRIM-0001-0", "kept", "CRIM-0001-2"]
    assert [p.party_id for p in second.parties] == [p.party_id for p in first.parties]
    assert "partyId" not in raw["parties"][0]
