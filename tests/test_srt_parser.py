"""Tests for the SRT parser."""

from transcript_normalizer.transcripts import ParsedEntry
from transcript_normalizer.transcripts.srt_parser import SrtTranscriptParser


def _parse(content: str) -> list[ParsedEntry]:
    return SrtTranscriptParser().parse(content)


class TestSrtParser:
    def test_multi_line_cue_becomes_one_entry(self):
        content = "3\n00:00:05,000 --> 00:00:06,000\nLine one\nLine two"
        assert _parse(content) == [ParsedEntry(text="Line one Line two")]

    def test_blocks_with_fewer_than_three_lines_are_dropped(self):
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\nHello\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\n\n"
            "Stray line\n\n"
            "3\n00:00:05,000 --> 00:00:06,000\nLine one\nLine two\n"
        )
        assert [e.text for e in _parse(content)] == ["Hello", "Line one Line two"]

    def test_entries_have_no_speaker_or_timestamp(self):
        (entry,) = _parse("1\n00:00:01,000 --> 00:00:02,000\nAlice: Hello")
        assert entry.speaker is None
        assert entry.timestamp is None
        assert entry.text == "Alice: Hello"

    def test_extra_blank_lines_between_cues(self):
        content = "1\n00:00:01,000 --> 00:00:02,000\nA\n\n\n\n2\n00:00:02,000 --> 00:00:03,000\nB"
        assert [e.text for e in _parse(content)] == ["A", "B"]

    def test_windows_line_endings(self):
        content = "1\r\n00:00:01,000 --> 00:00:02,000\r\nHello\r\n\r\n2\r\n00:00:02,000 --> 00:00:03,000\r\nWorld"
        assert [e.text for e in _parse(content)] == ["Hello", "World"]

    def test_empty_input(self):
        assert _parse("") == []
