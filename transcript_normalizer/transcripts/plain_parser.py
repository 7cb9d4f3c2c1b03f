# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Fallback parser for unstructured text."""

from transcript_normalizer.transcripts.base import ParsedEntry, TranscriptFormat


class PlainTranscriptParser:
    """Pass unstructured text through as a single entry.

    Only line endings and surrounding whitespace are normalized, so running
    already normalized output through the pipeline again is a no-op.
    """

    format = TranscriptFormat.PLAIN
    separator = "\n"

    def parse(self, content: str) -> list[ParsedEntry]:
        text = content.replace("\r\n", "\n").replace("\r", "\n").strip()
        if not text:
            return []
        return [ParsedEntry(text=text)]
