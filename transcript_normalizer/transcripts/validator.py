# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript pre-checks.

Callers run `validate_transcript` before normalizing. The check never raises;
problems are reported as a `ValidationResult`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from transcript_normalizer.config import ValidationLimits


class ValidationErrorKind(str, Enum):
    """Reason a transcript was rejected."""

    INVALID_INPUT = "invalid-input"
    TOO_SHORT = "too-short"
    TOO_LARGE = "too-large"
    LIKELY_BINARY = "likely-binary"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of `validate_transcript`."""

    valid: bool
    error: ValidationErrorKind | None = None
    message: str | None = None


def _reject(kind: ValidationErrorKind, message: str) -> ValidationResult:
    return ValidationResult(valid=False, error=kind, message=message)


def binary_ratio(text: str) -> float:
    """Return the share of characters outside printable ASCII and whitespace."""

    if not text:
        return 0.0
    suspicious = sum(1 for ch in text if not (" " <= ch <= "~" or ch.isspace()))
    return suspicious / len(text)


def validate_transcript(content: Any, limits: ValidationLimits | None = None) -> ValidationResult:
    """
    Check whether raw input is acceptable transcript text.

    Args:
        content:
            Raw input. Anything other than a non-blank string is rejected.
        limits:
            Length and content bounds. Defaults to `ValidationLimits()`.

    Returns:
        A result with `valid=True`, or the first failed check.
    """

    limits = limits or ValidationLimits()

    if not isinstance(content, str) or not content.strip():
        return _reject(
            ValidationErrorKind.INVALID_INPUT,
            "Transcript content is required. Please paste or upload a transcript.",
        )

    trimmed = content.strip()
    length = len(trimmed)

    if length < limits.min_length:
        return _reject(
            ValidationErrorKind.TOO_SHORT,
            f"Transcript must be at least {limits.min_length} characters. Current: {length}",
        )

    if length > limits.max_length:
        return _reject(
            ValidationErrorKind.TOO_LARGE,
            f"Transcript exceeds {limits.max_length} character limit. Current: {length}",
        )

    ratio = binary_ratio(trimmed)
    if ratio > limits.max_binary_ratio:
        return _reject(
            ValidationErrorKind.LIKELY_BINARY,
            f"Transcript looks like binary data ({ratio:.0%} non-text characters)",
        )

    return ValidationResult(valid=True)
