# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Normalization pipeline: detect, parse, render, extract participants.

The pipeline never raises for string input. Run `validate_transcript` first
to reject empty, oversized or binary content.
"""

import logging

from transcript_normalizer.transcripts.base import NormalizedTranscript
from transcript_normalizer.transcripts.detector import detect_format
from transcript_normalizer.transcripts.participants import extract_participants
from transcript_normalizer.transcripts.registry import get_transcript_parser
from transcript_normalizer.transcripts.render import render_entries


logger = logging.getLogger(__name__)


def normalize_transcript(content: str) -> NormalizedTranscript:
    """
    Normalize raw transcript text.

    Args:
        content:
            Raw transcript text in any supported format.

    Returns:
        Entries, rendered text, participants and the detected format.
    """

    if not isinstance(content, str):
        content = ""

    fmt = detect_format(content)
    parser = get_transcript_parser(fmt)

    entries = parser.parse(content.strip())
    raw_text = render_entries(entries, parser.separator)
    participants = extract_participants(raw_text)

    logger.debug(
        "Normalized %s transcript: %d entries, %d participants, %d -> %d characters",
        fmt.value,
        len(entries),
        len(participants),
        len(content),
        len(raw_text),
    )

    return NormalizedTranscript(
        entries=entries,
        participants=participants,
        raw_text=raw_text,
        format=fmt,
    )


def normalize_text(content: str) -> str:
    """Return only the normalized text of a raw transcript."""

    return normalize_transcript(content).raw_text
