from __future__ import annotations

from datetime import date

import pytest

from matchmaker.services.completion import (
    REQUIRED_FIELDS,
    completion_status,
    compute_completion_percentage,
    compute_is_complete,
    compute_missing_fields,
)


def _full_record() -> dict:
    return {
        "first_name": "Asha",
        "last_name": "Rao",
        "date_of_birth": date(1996, 5, 1),
        "gender": "FEMALE",
        "city": "Pune",
        "state": "Maharashtra",
        "education": "B.Tech",
        "occupation": "Engineer",
        "religion": "HINDU",
        "marital_status": "NEVER_MARRIED",
    }


def test_missing_fields_keep_required_order() -> None:
    record = _full_record()
    record["religion"] = None
    record["first_name"] = ""
    del record["city"]

    assert compute_missing_fields(record) == ["first_name", "city", "religion"]


def test_non_required_fields_do_not_affect_completeness() -> None:
    record = _full_record()
    record.update({"bio": "", "height": None, "hobbies": []})

    assert compute_missing_fields(record) == []
    assert compute_completion_percentage(record) == 100


def test_reads_attributes_from_objects() -> None:
    class Row:
        first_name = "Asha"
        last_name = None

    assert compute_missing_fields(Row()) == [f for f in REQUIRED_FIELDS if f != "first_name"]


def test_percentage_grows_as_fields_are_filled() -> None:
    record: dict = {}
    previous = compute_completion_percentage(record)
    assert previous == 0
    for name, value in _full_record().items():
        record[name] = value
        current = compute_completion_percentage(record)
        assert current >= previous
        previous = current
    assert previous == 100


def test_percentage_is_rounded() -> None:
    record = _full_record()
    for name in ("city", "state", "religion"):
        record[name] = None
    assert compute_completion_percentage(record) == 70


def test_no_record_defaults() -> None:
    result = completion_status(None)

    assert result.is_complete is False
    assert result.completion_percentage == 0
    assert result.missing_fields == list(REQUIRED_FIELDS)
    assert compute_missing_fields(None) == list(REQUIRED_FIELDS)


def test_is_complete_merges_candidate_over_existing() -> None:
    existing = _full_record()
    existing["religion"] = None

    assert compute_is_complete({}, existing) is False
    assert compute_is_complete({"religion": "HINDU"}, existing) is True
    # The candidate wins, even when it blanks a field.
    assert compute_is_complete({"city": ""}, _full_record()) is False


@pytest.mark.parametrize("candidate", [{"religion": "HINDU"}, {"bio": "x"}, {}])
def test_is_complete_is_idempotent(candidate: dict) -> None:
    existing = _full_record()
    existing["religion"] = None

    once = compute_is_complete(candidate, existing)
    merged = {**existing, **candidate}
    twice = compute_is_complete(candidate, merged)
    assert once == twice


def test_is_complete_without_existing_record() -> None:
    assert compute_is_complete(_full_record(), None) is True
    assert compute_is_complete({"first_name": "Asha"}, None) is False
