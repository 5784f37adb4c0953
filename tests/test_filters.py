"""Tests for the predicate filter engine."""

from justiceflow.filters import (
    apply_filters,
    category_predicate,
    date_range_predicate,
    field_value,
    jurisdiction_predicate,
    search_predicate,
)
from justiceflow.schemas import CaseStatus


def test_field_value_walks_mappings_and_attributes(make_case):
    case = make_case("CRIM-1000", parties=[{"name": "Nimal", "nic": "199012345670"}])

    assert field_value({"case": {"id": "X"}}, "case.id") == "X"
    assert field_value(case, "assigned_court") == "Mount Lavinia Magistrate Court"
    assert field_value(case, "status") == "Pending"
    assert field_value(case, "missing.deeper") is None


def test_search_is_case_insensitive_substring():
    records = [{"id": "CRIM-1000", "venue": "Borella"}, {"id": "CRIM-2000", "venue": "Pettah"}]

    result = apply_filters(records, None, search_predicate("bOrEl", ["id", "venue"]))

    assert result == [records[0]]


def test_search_matches_any_field():
    records = [{"id": "CRIM-1000", "venue": "Pettah"}, {"id": "CRIM-2000", "venue": "Borella"}]

    result = apply_filters(records, None, search_predicate("1000", ["id", "venue"]))

    assert result == [records[0]]


def test_empty_search_matches_everything():
    records = [{"id": "A"}, {"id": "B", "venue": None}]

    assert apply_filters(records, None, search_predicate("", ["id", "venue"])) == records
    assert apply_filters(records, None, search_predicate(None, ["id"])) == records


def test_search_ignores_missing_fields():
    records = [{"id": "A"}]

    assert apply_filters(records, None, search_predicate("x", ["venue"])) == []


def test_date_range_is_inclusive_and_bounded():
    records = [{"date": "2023-12-31"}, {"date": "2024-06-01"}, {"date": "2025-01-01"}]

    result = apply_filters(records, None, date_range_predicate("date", "2024-01-01", "2024-12-31"))

    assert result == [{"date": "2024-06-01"}]


def test_date_range_bounds_are_inclusive():
    records = [{"date": "2024-01-01"}, {"date": "2024-12-31"}]

    result = apply_filters(records, None, date_range_predicate("date", "2024-01-01", "2024-12-31"))

    assert result == records


def test_date_range_empty_bound_is_open():
    records = [{"date": "2023-12-31"}, {"date": "2024-06-01"}, {"date": "2025-01-01"}]

    assert apply_filters(records, None, date_range_predicate("date", "2024-01-01", "")) == records[1:]
    assert apply_filters(records, None, date_range_predicate("date", "", "2024-06-01")) == records[:2]
    assert apply_filters(records, None, date_range_predicate("date")) == records


def test_date_range_excludes_undated_records_when_bounded():
    records = [{"date": ""}, {}]

    assert apply_filters(records, None, date_range_predicate("date", "2024-01-01")) == []
    assert apply_filters(records, None, date_range_predicate("date")) == records


def test_category_empty_selection_matches_all():
    records = [{"court": "A"}, {"court": ""}, {"court": "B"}]

    assert apply_filters(records, None, category_predicate("court", "")) == records
    assert apply_filters(records, None, category_predicate("court", None)) == records


def test_category_is_exact_match():
    records = [{"court": "Court A"}, {"court": "court a"}, {"court": "Court AB"}]

    assert apply_filters(records, None, category_predicate("court", "Court A")) == [records[0]]


def test_category_on_enum_field(make_case):
    cases = [make_case("A", status="Closed"), make_case("B", status="Pending")]

    result = apply_filters(cases, None, category_predicate("status", CaseStatus.CLOSED.value))

    assert [c.id for c in result] == ["A"]


def test_jurisdiction_cannot_be_bypassed_by_search():
    records = [
        {"id": "CRIM-1000", "station": "X", "venue": "Borella"},
        {"id": "CRIM-2000", "station": "Y", "venue": "Pettah"},
    ]

    result = apply_filters(
        records,
        jurisdiction_predicate("station", "X"),
        search_predicate("Pettah", ["id", "venue"]),
    )

    assert result == []


def test_jurisdiction_with_empty_place_matches_nothing():
    records = [{"station": ""}, {"station": "X"}]

    assert apply_filters(records, jurisdiction_predicate("station", "")) == []


def test_filters_are_anded():
    records = [
        {"date": "2024-02-01", "court": "A", "id": "1"},
        {"date": "2024-02-01", "court": "B", "id": "2"},
        {"date": "2023-02-01", "court": "A", "id": "3"},
    ]

    result = apply_filters(
        records,
        None,
        date_range_predicate("date", "2024-01-01", ""),
        category_predicate("court", "A"),
    )

    assert [r["id"] for r in result] == ["1"]


def test_apply_filters_preserves_order():
    records = [{"id": str(n)} for n in range(10)]

    assert apply_filters(records, None) == records


def test_search_term_surrounding_whitespace_is_ignored():
    records = [{"id": "CRIM-1000", "venue": "Borella"}]

    assert apply_filters(records, None, search_predicate("  borella ", ["venue"])) == records
    assert apply_filters(records, None, search_predicate("   ", ["venue"])) == records
