"""Transcript detection and normalization.

Raw transcript text is classified into one of the supported formats and
rewritten into a normalized line-oriented representation:

- `[M:SS] Speaker: utterance` when the source carries timestamps,
- `Speaker: utterance` when it only names speakers,
- the cleaned text itself otherwise.

Everything in this package is a pure function over strings, except the source
readers, which load transcript text from files.
"""

from transcript_normalizer.transcripts.base import (
    NormalizedTranscript,
    ParsedEntry,
    SourceError,
    TranscriptFormat,
    TranscriptParser,
)
from transcript_normalizer.transcripts.detector import detect_format
from transcript_normalizer.transcripts.participants import extract_participants
from transcript_normalizer.transcripts.pipeline import normalize_text, normalize_transcript
from transcript_normalizer.transcripts.registry import (
    TRANSCRIPT_PARSING_VERSION,
    get_transcript_parser,
    read_transcript_text,
)
from transcript_normalizer.transcripts.render import render_entries
from transcript_normalizer.transcripts.validator import (
    ValidationErrorKind,
    ValidationLimits,
    ValidationResult,
    validate_transcript,
)

__all__ = [
    "NormalizedTranscript",
    "ParsedEntry",
    "SourceError",
    "TRANSCRIPT_PARSING_VERSION",
    "TranscriptFormat",
    "TranscriptParser",
    "ValidationErrorKind",
    "ValidationLimits",
    "ValidationResult",
    "detect_format",
    "extract_participants",
    "get_transcript_parser",
    "normalize_text",
    "normalize_transcript",
    "read_transcript_text",
    "render_entries",
    "validate_transcript",
]
