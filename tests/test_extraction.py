"""Tests for defensive judicial and medical extraction."""

from justiceflow.extraction import (
    NO_HEARING,
    NO_MEDICAL_NOTES,
    NO_REMARKS,
    NO_SENTENCE,
    NO_VERDICT,
    extract_judicial,
    extract_medical,
    medical_summaries,
)


class TestExtractJudicial:
    def test_container_verdict(self):
        info = extract_judicial({"id": "A", "courtData": {"verdict": "Guilty"}})

        assert info.has_data is True
        assert info.verdict == "Guilty"
        assert info.remarks == NO_REMARKS

    def test_flat_alias_verdict(self):
        info = extract_judicial({"id": "A", "judicialVerdict": "Not Guilty"})

        assert info.has_data is True
        assert info.verdict == "Not Guilty"

    def test_nothing_recorded(self):
        info = extract_judicial({"id": "A"})

        assert info.has_data is False
        assert info.verdict == NO_VERDICT
        assert info.remarks == "No additional remarks recorded."
        assert info.sentence == NO_SENTENCE
        assert info.next_hearing == NO_HEARING

    def test_container_wins_over_flat(self):
        info = extract_judicial({
            "id": "A",
            "verdict": "Flat",
            "judicialData": {"verdict": "Nested", "summary": "From summary"},
        })

        assert info.verdict == "Nested"
        assert info.remarks == "From summary"

    def test_blank_values_count_as_absent(self):
        info = extract_judicial({"id": "A", "courtData": {"verdict": "  "}, "judicialRemarks": ""})

        assert info.has_data is False
        assert info.verdict == NO_VERDICT

    def test_next_hearing_alone_is_not_judicial_data(self):
        info = extract_judicial({"id": "A", "courtData": {"nextHearing": "2024-09-01"}})

        assert info.has_data is False
        assert info.next_hearing == "2024-09-01"

    def test_next_hearing_falls_back_to_history(self):
        info = extract_judicial({
            "id": "A",
            "courtHistory": [
                {"date": "2024-01-01", "action": "Ruling: Adjourned", "nextDate": "2024-02-01"},
                {"date": "2024-02-01", "action": "Ruling: Adjourned", "nextDate": "2024-03-15"},
                {"date": "2024-03-15", "action": "Ruling: Pending", "nextDate": None},
            ],
        })

        assert info.next_hearing == "2024-03-15"

    def test_accepts_case_model(self, make_case):
        case = make_case("A", judicialVerdict="Guilty", sentence="Fine of LKR 5000")

        info = extract_judicial(case)

        assert info.verdict == "Guilty"
        assert info.sentence == "Fine of LKR 5000"

    def test_none_record(self):
        assert extract_judicial(None).has_data is False


class TestExtractMedical:
    def test_party_report(self):
        info = extract_medical(
            {"medicalReport": {"notes": "Fractured wrist", "status": "Discharged", "updatedDate": "2024-06-02"}},
            party_name="Saman",
        )

        assert info.has_data is True
        assert info.notes == "Fractured wrist"
        assert info.status == "Discharged"
        assert info.updated_date == "2024-06-02"
        assert info.party_name == "Saman"

    def test_alternate_container_and_notes_keys(self):
        info = extract_medical({"jmoReport": {"observations": "Bruising", "files": ["xray.png"]}})

        assert info.notes == "Bruising"
        assert [d.name for d in info.documents] == ["xray.png"]

    def test_flat_medical_notes(self):
        info = extract_medical({"medicalNotes": "Legacy note"})

        assert info.has_data is True
        assert info.notes == "Legacy note"

    def test_documents_only_counts_as_data(self):
        info = extract_medical({"medical": {"attachments": [{"name": "scan.pdf", "type": "application/pdf"}]}})

        assert info.has_data is True
        assert info.notes == NO_MEDICAL_NOTES

    def test_nothing_recorded(self):
        info = extract_medical({"medicalReport": None})

        assert info.has_data is False
        assert info.notes == NO_MEDICAL_NOTES
        assert info.documents == []

    def test_non_list_documents_ignored(self):
        info = extract_medical({"medicalReport": {"documents": "scan.pdf"}})

        assert info.documents == []
        assert info.has_data is False


def test_medical_summaries_one_per_admitted_party(make_case, hospitalized_party):
    case = make_case("A", parties=[
        hospitalized_party("First", medicalReport={"status": "Discharged", "notes": "OK"}),
        hospitalized_party("Second"),
        {"name": "Walk-in", "nic": "198512345670", "isHospitalized": False},
    ])

    summaries = medical_summaries(case)

    assert [s.party_name for s in summaries] == ["First", "Second"]
    assert summaries[0].notes == "OK"
    assert summaries[1].has_data is False


def test_medical_summaries_include_legacy_case_level_data(make_case):
    case = make_case("A", medicalNotes="Examined at scene")

    summaries = medical_summaries(case)

    assert len(summaries) == 1
    assert summaries[0].notes == "Examined at scene"
    assert summaries[0].party_name is None
