"""
Tests for transcript format detection.

Run with: pytest tests/test_detector.py -v
"""

import pytest

from transcript_normalizer.transcripts import TranscriptFormat, detect_format


class TestDetectFormat:
    """Tests for the ordered detection signatures."""

    def test_webvtt_header(self):
        assert detect_format("WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nHello") == TranscriptFormat.VTT

    def test_vtt_without_header(self):
        content = "1\n00:00:01.000 --> 00:00:02.000\nHello\n\n2\n00:00:02.500 --> 00:00:04.000\nWorld"
        assert detect_format(content) == TranscriptFormat.VTT

    def test_srt_cue(self):
        assert detect_format("1\n00:00:01,000 --> 00:00:02,000\nHello") == TranscriptFormat.SRT

    def test_srt_with_windows_line_endings(self):
        content = "1\r\n00:00:01,000 --> 00:00:02,000\r\nHello\r\n"
        assert detect_format(content) == TranscriptFormat.SRT

    def test_teams_duration_and_disclaimer(self):
        content = "John Doe\n2 minutes 15 seconds\nLet's get started. AI-generated content may be incorrect."
        assert detect_format(content) == TranscriptFormat.TEAMS_TEXT

    def test_plain_fallback(self):
        assert detect_format("just some notes from the meeting") == TranscriptFormat.PLAIN

    def test_empty_string_is_plain(self):
        assert detect_format("") == TranscriptFormat.PLAIN

    def test_non_string_is_plain(self):
        assert detect_format(None) == TranscriptFormat.PLAIN  # type: ignore[arg-type]

    def test_vtt_wins_over_teams_phrases(self):
        content = "WEBVTT\n\nNOTE Alice started transcription\n\n<v Alice>Hi</v>"
        assert detect_format(content) == TranscriptFormat.VTT

    def test_srt_wins_over_teams_phrases(self):
        content = "1\n00:00:01,000 --> 00:00:02,000\nThe call took 2 minutes 5 seconds"
        assert detect_format(content) == TranscriptFormat.SRT

    def test_leading_whitespace_before_header(self):
        assert detect_format("\n\n  WEBVTT\n\nHello") == TranscriptFormat.VTT

    def test_arrow_without_cue_line_is_not_vtt(self):
        assert detect_format("Step one --> step two") == TranscriptFormat.PLAIN


@pytest.mark.parametrize(
    "content, expected",
    [
        ("WEBVTT\nHello", TranscriptFormat.VTT),
        ("Intro\n00:01:02.000 --> 00:01:03.000\nHello", TranscriptFormat.VTT),
        ("Intro\n00:00:01,000 --> 00:00:02,000\nHello", TranscriptFormat.VTT),
        ("12\n01:02:03,456 --> 01:02:04,000\nHello", TranscriptFormat.SRT),
        ("Notice: ai-generated CONTENT may be incorrect", TranscriptFormat.TEAMS_TEXT),
        ("Jane Started Transcription", TranscriptFormat.TEAMS_TEXT),
        ("Bob 1 minute 1 second", TranscriptFormat.TEAMS_TEXT),
        ("Bob 10 Minutes 30 Seconds", TranscriptFormat.TEAMS_TEXT),
        ("Alice: hello\nBob: hi", TranscriptFormat.PLAIN),
        ("[1:15] Alice: It took 2 minutes 5 seconds.\n\n[1:15] Bob: Agreed.", TranscriptFormat.PLAIN),
    ],
)
def test_detection_table(content, expected):
    assert detect_format(content) == expected
