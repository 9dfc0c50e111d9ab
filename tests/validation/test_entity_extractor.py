from __future__ import annotations

import re

from attendance_qa.validation.extraction import BareNameMatcher, EntityExtractor, IdentifiedNameMatcher, MentionMatcher
from attendance_qa.validation.model import Mention


def test_name_with_id_is_split_into_first_and_last():
    mentions = EntityExtractor().extract("John Smith (S1001) was absent.")

    assert len(mentions) == 1
    m = mentions[0]
    assert (m.full_name, m.first_name, m.last_name, m.id) == ("John Smith", "John", "Smith", "S1001")
    assert m.span == (0, 18)


def test_three_word_name_keeps_remaining_tokens_as_last_name():
    mentions = EntityExtractor().extract("Maria De Souza ( A-12.b ) left early")

    assert [(m.first_name, m.last_name, m.id) for m in mentions] == [("Maria", "De Souza", "A-12.b")]


def test_bare_name_inside_identified_span_is_not_counted_twice():
    mentions = EntityExtractor().extract("Emma Johnson (S1052) and Alice Brown were absent.")

    assert [(m.full_name, m.id) for m in mentions] == [("Emma Johnson", "S1052"), ("Alice Brown", None)]


def test_results_follow_position_in_text():
    mentions = EntityExtractor().extract("Alice Brown missed class, and so did Bob Lee (S9).")

    assert [m.full_name for m in mentions] == ["Alice Brown", "Bob Lee"]


def test_touching_spans_count_as_overlapping():
    mentions = EntityExtractor().extract("Bob Lee (S9)Alice Brown was absent.")

    assert [m.full_name for m in mentions] == ["Bob Lee"]


def test_duplicates_are_kept():
    mentions = EntityExtractor().extract("Bob Lee (S9) was late. Bob Lee (S9) left early.")

    assert len(mentions) == 2


def test_empty_or_missing_text_yields_nothing():
    assert EntityExtractor().extract("") == []
    assert EntityExtractor().extract(None) == []


def test_malformed_id_falls_back_to_bare_name():
    mentions = EntityExtractor().extract("Bob Lee (#?) was absent.")

    assert [(m.full_name, m.id) for m in mentions] == [("Bob Lee", None)]


def test_lowercase_text_has_no_mentions():
    assert EntityExtractor().extract("nobody was absent on monday.") == []


class EmailMatcher(MentionMatcher):
    pattern = re.compile(r"\b([a-z]+)\.([a-z]+)@school\.org")
    claims_overlaps = False

    def build(self, match):
        first, last = match.group(1).title(), match.group(2).title()
        return Mention(full_name=f"{first} {last}", first_name=first, last_name=last, span=(match.start(), match.end()))


def test_custom_matchers_can_be_plugged_in():
    extractor = EntityExtractor(matchers=[IdentifiedNameMatcher(), BareNameMatcher(), EmailMatcher()])

    mentions = extractor.extract("Contact rosa.nguyen@school.org about Bob Lee (S9).")

    assert [m.full_name for m in mentions] == ["Rosa Nguyen", "Bob Lee"]
