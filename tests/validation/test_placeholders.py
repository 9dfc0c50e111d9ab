from __future__ import annotations

from attendance_qa.validation.placeholders import PlaceholderDetector


def test_detects_display_name_and_individual_fields():
    records = [
        {"firstName": "John", "lastName": "Smith"},
        {"firstName": "Unknown Student", "studentId": None},
        {"firstName": "Unknown", "lastName": "Student"},
        {"firstName": "Jane", "lastName": "TBD"},
        {"firstName": "N/A"},
    ]

    hits = PlaceholderDetector().detect(records)

    assert [h.index for h in hits] == [1, 2, 3, 4]
    assert hits[0].value is records[1]


def test_records_without_names_are_skipped():
    assert PlaceholderDetector().detect([{"studentId": "S1"}, {}, "not a record"]) == []


def test_vocabulary_can_be_replaced():
    detector = PlaceholderDetector(vocabulary=["Student X"])

    hits = detector.detect([{"firstName": "Student", "lastName": "X"}, {"firstName": "Unknown Student"}])

    assert [h.index for h in hits] == [0]
