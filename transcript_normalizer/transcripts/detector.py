# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Heuristic transcript format detection.

Detection walks an ordered list of signatures and returns the format of the
first one that matches. Subtitle formats come first because their structural
tells (header token, strict timing grammar) are unambiguous, while the Teams
heuristics key off free-text phrases that may also show up in unrelated
pasted content.
"""

import re
from typing import Callable

from transcript_normalizer.transcripts.base import TranscriptFormat, split_lines
from transcript_normalizer.transcripts.render import parse_rendered_line


_VTT_CUE_LINE_RE = re.compile(r"^00:", re.MULTILINE)

_SRT_CUE_RE = re.compile(
    r"^\d+[ \t]*\n\d{2}:\d{2}:\d{2},\d{3}[ \t]*-->[ \t]*\d{2}:\d{2}:\d{2},\d{3}",
    re.MULTILINE,
)

TEAMS_DISCLAIMER = "ai-generated content may be incorrect"
TEAMS_STARTED = "started transcription"

_TEAMS_PATTERNS = [
    re.compile(re.escape(TEAMS_DISCLAIMER), re.IGNORECASE),
    re.compile(re.escape(TEAMS_STARTED), re.IGNORECASE),
    re.compile(r"\d+\s+minutes?\s+\d+\s+seconds?", re.IGNORECASE),
]


def _looks_like_vtt(text: str) -> bool:
    if text.startswith("WEBVTT"):
        return True
    if " --> " not in text or not _VTT_CUE_LINE_RE.search(text):
        return False
    # A full SRT cue also satisfies the loose signature.
    return not _looks_like_srt(text)


def _looks_like_srt(text: str) -> bool:
    return _SRT_CUE_RE.search(text) is not None


def _looks_like_rendered(text: str) -> bool:
    """Every line is already a `[M:SS] Speaker: text` or `Speaker: text` turn."""

    lines = [line for line in split_lines(text) if line.strip()]
    if len(lines) < 2:
        return False
    return all(parse_rendered_line(line) is not None for line in lines)


def _looks_like_teams_text(text: str) -> bool:
    return any(pattern.search(text) for pattern in _TEAMS_PATTERNS)


DETECTION_RULES: list[tuple[TranscriptFormat, Callable[[str], bool]]] = [
    (TranscriptFormat.VTT, _looks_like_vtt),
    (TranscriptFormat.SRT, _looks_like_srt),
    # Normalized output passes through unchanged, even if an utterance
    # mentions a Teams phrase.
    (TranscriptFormat.PLAIN, _looks_like_rendered),
    (TranscriptFormat.TEAMS_TEXT, _looks_like_teams_text),
]


def detect_format(content: str) -> TranscriptFormat:
    """Classify raw transcript text.

    Args:
        content:
            Raw transcript text in any line ending convention.

    Returns:
        The format of the first matching signature, or `PLAIN` if none match.
    """

    if not isinstance(content, str):
        return TranscriptFormat.PLAIN

    text = content.replace("\r\n", "\n").replace("\r", "\n").strip()
    for fmt, matches in DETECTION_RULES:
        if matches(text):
            return fmt

    return TranscriptFormat.PLAIN
