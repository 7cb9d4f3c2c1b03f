"""Tests for the Teams copy/paste text parser."""

import pytest

from transcript_normalizer.transcripts import ParsedEntry, render_entries
from transcript_normalizer.transcripts.teams_parser import TeamsTextParser, format_timestamp


def _parse(content: str) -> list[ParsedEntry]:
    return TeamsTextParser().parse(content)


class TestTimestampStickiness:
    def test_timestamp_carries_forward_to_next_speaker(self):
        entries = _parse("Alice\n1:15\nFirst remark.\nBob\nSecond remark.")

        assert entries == [
            ParsedEntry(text="First remark.", speaker="Alice", timestamp="1:15"),
            ParsedEntry(text="Second remark.", speaker="Bob", timestamp="1:15"),
        ]

    def test_no_timestamp_when_none_was_seen(self):
        entries = _parse("Alice\nFirst remark.\nBob\nSecond remark.")

        assert entries == [
            ParsedEntry(text="First remark.", speaker="Alice"),
            ParsedEntry(text="Second remark.", speaker="Bob"),
        ]

    def test_new_timestamp_replaces_previous(self):
        entries = _parse("Alice\n1:15\nFirst remark.\nBob\n2:30\nSecond remark.")
        assert [e.timestamp for e in entries] == ["1:15", "2:30"]


class TestTeamsTextParser:
    def test_speaker_line_with_long_timestamp(self):
        content = (
            "Alice Smith started transcription\n"
            "Alice Smith   0 minutes 3 seconds\n"
            "Good morning, let's review the roadmap.\n"
            "Bob Jones   1 minute 12 seconds\n"
            "The release is on track.\n"
            "We still need QA sign-off.\n"
            "AI-generated content may be incorrect.\n"
        )

        entries = _parse(content)

        assert entries == [
            ParsedEntry(text="Good morning, let's review the roadmap.", speaker="Alice Smith", timestamp="0:03"),
            ParsedEntry(text="The release is on track. We still need QA sign-off.", speaker="Bob Jones", timestamp="1:12"),
        ]
        assert render_entries(entries, TeamsTextParser.separator) == (
            "[0:03] Alice Smith: Good morning, let's review the roadmap.\n\n"
            "[1:12] Bob Jones: The release is on track. We still need QA sign-off."
        )

    def test_speaker_line_with_short_timestamp(self):
        assert _parse("Mary O'Neil 12:04\nHello.") == [
            ParsedEntry(text="Hello.", speaker="Mary O'Neil", timestamp="12:04"),
        ]

    def test_standalone_long_timestamp(self):
        assert _parse("Bob\n3 minutes 7 seconds\nOkay then.") == [
            ParsedEntry(text="Okay then.", speaker="Bob", timestamp="3:07"),
        ]

    def test_duplicate_speaker_artifact_is_dropped(self):
        content = "Jane Doe\nHello all.\nJane Doe 3 minutes ago\nMore text."
        assert _parse(content) == [
            ParsedEntry(text="Hello all. More text.", speaker="Jane Doe"),
        ]

    def test_text_before_first_speaker_joins_first_speaker(self):
        assert _parse("Intro line.\nAlice\nHello there.") == [
            ParsedEntry(text="Intro line. Hello there.", speaker="Alice"),
        ]

    def test_text_without_any_speaker(self):
        assert _parse("just one remark.\nand another one.") == [
            ParsedEntry(text="just one remark. and another one."),
        ]

    def test_speaker_without_text_produces_no_entry(self):
        assert _parse("Alice\nBob\nHi.") == [ParsedEntry(text="Hi.", speaker="Bob")]

    def test_boilerplate_only(self):
        assert _parse("AI-generated content may be incorrect.\nAlice started transcription") == []

    def test_normalized_lines_are_complete_entries(self):
        content = "[1:15] Alice: It took 2 minutes 5 seconds.\n\n[1:15] Bob: Agreed."

        entries = _parse(content)

        assert entries == [
            ParsedEntry(text="It took 2 minutes 5 seconds.", speaker="Alice", timestamp="1:15"),
            ParsedEntry(text="Agreed.", speaker="Bob", timestamp="1:15"),
        ]
        assert render_entries(entries, TeamsTextParser.separator) == content

    def test_normalized_line_mentioning_transcription_is_kept(self):
        assert _parse("Alice: Bob started transcription late.") == [
            ParsedEntry(text="Bob started transcription late.", speaker="Alice"),
        ]

    def test_normalized_line_between_raw_turns(self):
        entries = _parse("Alice\n1:15\nHello.\nBob: Hi there.\nCarol\nMorning.")

        assert entries == [
            ParsedEntry(text="Hello.", speaker="Alice", timestamp="1:15"),
            ParsedEntry(text="Hi there.", speaker="Bob"),
            ParsedEntry(text="Morning.", speaker="Carol", timestamp="1:15"),
        ]

    def test_section_label_is_not_a_normalized_line(self):
        assert _parse("Alice\nNote: budget is fixed.") == [
            ParsedEntry(text="Note: budget is fixed.", speaker="Alice"),
        ]


class TestRuleClassification:
    @pytest.mark.parametrize(
        "line, speaker, expected",
        [
            ("[1:15] Alice: It took 2 minutes 5 seconds.", None, "rendered-entry"),
            ("Alice: We started transcription late.", None, "rendered-entry"),
            ("1:15", None, "timestamp"),
            ("12:05", None, "timestamp"),
            ("2 minutes 3 seconds", None, "timestamp"),
            ("Jane Doe", None, "speaker"),
            ("Jane Doe 4:20", None, "speaker"),
            ("jane doe 2 minutes 1 second", None, "speaker"),
            ("Jane Doe 4 people joined", "Jane Doe", "duplicate-speaker"),
            ("Jane Doe 4 people joined", "John Roe", "content"),
            ("We shipped it.", None, "content"),
            ("AI-generated content may be incorrect.", None, "boilerplate"),
        ],
    )
    def test_first_matching_rule(self, line, speaker, expected):
        assert TeamsTextParser().classify(line, speaker) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12 minutes 5 seconds", "12:05"),
        ("1 minute 30 seconds", "1:30"),
        ("0 Minutes 0 Seconds", "0:00"),
        ("3:07", "3:07"),
    ],
)
def test_format_timestamp(value, expected):
    assert format_timestamp(value) == expected
