"""
Tests for the summary and transcript data models.
"""

import json
import pytest
from hypothesis import given, strategies as st

from app.models.schemas import (
    Highlight,
    MainPoint,
    Reference,
    Transcript,
    VideoSummary,
    parse_summary,
)
from app.utils.error_handling import SummaryParseError


def test_parse_summary(sample_summary_data):
    summary = parse_summary(json.dumps(sample_summary_data))

    assert summary.title == "Testing Python Code"
    assert [p.point for p in summary.main_points] == ["Fixtures", "Mocks"]
    assert summary.highlights[0].timestamp == "03:15"
    assert summary.highlights[1].timestamp is None
    assert summary.references[0].type == "book"


def test_serialized_summary_uses_camel_case(sample_summary_data):
    dumped = json.loads(parse_summary(json.dumps(sample_summary_data)).to_json())

    assert set(dumped) == {"title", "quickSummary", "mainPoints", "highlights", "keyConclusions", "references"}


text = st.text(max_size=30)
summaries = st.builds(
    VideoSummary,
    title=text,
    quick_summary=text,
    main_points=st.lists(st.builds(MainPoint, point=text, description=text), max_size=4),
    highlights=st.lists(st.builds(Highlight, moment=text, timestamp=st.none() | text), max_size=4),
    key_conclusions=text,
    references=st.lists(st.builds(Reference, type=text, description=text), max_size=4),
)


@given(summaries)
def test_summary_round_trip(summary):
    """Serializing and parsing back preserves every field and list order."""
    assert parse_summary(summary.to_json()) == summary


@pytest.mark.parametrize("raw", [
    None,
    "",
    "Here is your summary: it was a good video.",
    "[1, 2, 3]",
    '{"title": "Only a title"}',
    '{"title": "T", "quickSummary": "Q", "keyConclusions": "K", "mainPoints": "not a list"}',
])
def test_parse_summary_rejects_malformed(raw):
    with pytest.raises(SummaryParseError):
        parse_summary(raw)


def test_transcript_keeps_provider_fields():
    transcript = Transcript.model_validate({"content": "Hello", "lang": "en", "availableLangs": ["en"], "x": 1})

    assert transcript.available_langs == ["en"]
    assert transcript.model_dump(by_alias=True)["x"] == 1
