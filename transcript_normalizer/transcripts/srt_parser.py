# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""SRT subtitle parser."""

import re

from transcript_normalizer.transcripts.base import ParsedEntry, TranscriptFormat


class SrtTranscriptParser:
    """Parse SRT cues into one unattributed entry per cue."""

    format = TranscriptFormat.SRT
    separator = "\n"

    _BLOCK_SPLIT_RE = re.compile(r"\n\n+")

    def parse(self, content: str) -> list[ParsedEntry]:
        """Extract cue text.

        Line 0 of every cue block is the index and line 1 the timing range.
        Blocks with fewer than three lines are dropped without recovery, even
        if they carry text.
        """

        text = content.replace("\r\n", "\n").replace("\r", "\n")
        entries: list[ParsedEntry] = []

        for block in self._BLOCK_SPLIT_RE.split(text):
            lines = block.strip().split("\n")
            if len(lines) < 3:
                continue

            cue_text = " ".join(line.strip() for line in lines[2:] if line.strip())
            if cue_text:
                entries.append(ParsedEntry(text=cue_text))

        return entries
