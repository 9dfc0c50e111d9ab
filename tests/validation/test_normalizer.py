from __future__ import annotations

from attendance_qa.core.enums import StructuredShape
from attendance_qa.validation.normalizer import classify_structured_data, normalize_structured_data

JOHN = {"firstName": "John", "lastName": "Smith", "studentId": "S1001"}
EMMA = {"firstName": "Emma", "lastName": "Johnson", "studentId": "S1052"}


def test_top_level_array():
    match = classify_structured_data([JOHN, EMMA])

    assert match.shape == StructuredShape.ARRAY
    assert match.records == [JOHN, EMMA]


def test_students_array():
    match = classify_structured_data({"students": [JOHN, EMMA], "total": 2})

    assert match.shape == StructuredShape.STUDENTS_ARRAY
    assert len(match.records) == 2


def test_students_map_keeps_insertion_order():
    match = classify_structured_data({"students": {"S1052": EMMA, "S1001": JOHN}})

    assert match.shape == StructuredShape.STUDENTS_MAP
    assert match.records == [EMMA, JOHN]


def test_inferred_from_student_like_values():
    payload = {"first": JOHN, "second": {"studentId": "S7"}, "meta": {"generatedAt": "2025-10-15"}, "count": 2}

    match = classify_structured_data(payload)

    assert match.shape == StructuredShape.INFERRED
    assert match.records == [JOHN, {"studentId": "S7"}]


def test_explicit_students_key_beats_inference():
    payload = {"students": [EMMA], "highlight": JOHN}

    assert normalize_structured_data(payload) == [EMMA]


def test_unrecognized_payloads_are_empty():
    for payload in (None, {}, "students", 42, {"meta": {"page": 1}}, {"students": "none"}):
        match = classify_structured_data(payload)
        assert match.shape == StructuredShape.EMPTY
        assert match.records == []
