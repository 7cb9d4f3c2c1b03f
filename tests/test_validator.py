"""Tests for the transcript validator."""

import pytest

from transcript_normalizer.transcripts import ValidationErrorKind, ValidationLimits, validate_transcript
from transcript_normalizer.transcripts.validator import binary_ratio


class TestValidateTranscript:
    def test_exact_minimum_length_is_valid(self):
        assert validate_transcript("a" * 50).valid

    def test_one_below_minimum_is_too_short(self):
        result = validate_transcript("a" * 49)
        assert not result.valid
        assert result.error == ValidationErrorKind.TOO_SHORT
        assert "at least 50 characters" in result.message

    def test_minimum_is_caller_supplied(self):
        limits = ValidationLimits(min_length=100)
        assert validate_transcript("a" * 100, limits).valid
        assert validate_transcript("a" * 99, limits).error == ValidationErrorKind.TOO_SHORT

    def test_length_is_measured_after_trimming(self):
        assert validate_transcript("   " + "a" * 49 + "\n\n").error == ValidationErrorKind.TOO_SHORT

    @pytest.mark.parametrize("content", [None, 42, b"bytes content", "", "   \n\t "])
    def test_missing_or_non_string_input(self, content):
        result = validate_transcript(content)
        assert not result.valid
        assert result.error == ValidationErrorKind.INVALID_INPUT

    def test_too_large(self):
        limits = ValidationLimits(min_length=1, max_length=60)
        assert validate_transcript("a" * 60, limits).valid
        assert validate_transcript("a" * 61, limits).error == ValidationErrorKind.TOO_LARGE

    def test_default_maximum_is_ten_mib(self):
        assert ValidationLimits().max_length == 10 * 1024 * 1024

    def test_likely_binary(self):
        result = validate_transcript("a" * 30 + "\x00" * 10 + "a" * 30)
        assert not result.valid
        assert result.error == ValidationErrorKind.LIKELY_BINARY

    def test_binary_ratio_at_threshold_is_valid(self):
        # 6 of 60 characters: exactly 10%.
        assert validate_transcript("a" * 27 + "\x00" * 6 + "a" * 27).valid

    def test_whitespace_counts_as_text(self):
        assert validate_transcript("word\t\n" * 20).valid


def test_binary_ratio():
    assert binary_ratio("") == 0.0
    assert binary_ratio("abc\n") == 0.0
    assert binary_ratio("ab\x01\x02") == 0.5
