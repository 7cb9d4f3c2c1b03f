# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""WebVTT transcript parser.

Rules:
- Header, `NOTE`, `Kind:` and `Language:` lines are skipped and end the
  current utterance, as do blank lines.
- Cue indices and cue timing lines are skipped. Cue timing is not surfaced.
- A `<v Name>` voice tag starts a new utterance for `Name`. The closing
  `</v>` tag is optional.
- Untagged lines continue the current utterance.
"""

import re

from transcript_normalizer.transcripts.base import ParsedEntry, TranscriptFormat, split_lines


class VttTranscriptParser:
    """Parse WebVTT captions (including Teams voice tags) into entries."""

    format = TranscriptFormat.VTT
    separator = "\n"

    _METADATA_PREFIXES = ("NOTE", "Kind:", "Language:")

    _CUE_INDEX_RE = re.compile(r"^\d+$")
    _CUE_TIMING_RE = re.compile(r"^\d{2}:")
    _VOICE_TAG_RE = re.compile(r"<v\s+([^>]+)>(.*)")
    _VOICE_MARKUP_RE = re.compile(r"</?v[^>]*>")

    def parse(self, content: str) -> list[ParsedEntry]:
        entries: list[ParsedEntry] = []
        speaker: str | None = None
        buffer: list[str] = []

        def flush() -> None:
            text = " ".join(buffer).strip()
            buffer.clear()
            if text:
                entries.append(ParsedEntry(text=text, speaker=speaker))

        for line in split_lines(content):
            stripped = line.strip()

            if not stripped or self._is_metadata(stripped):
                flush()
                continue

            if self._CUE_INDEX_RE.match(stripped):
                continue
            if "-->" in stripped or self._CUE_TIMING_RE.match(stripped):
                continue

            tag = self._VOICE_TAG_RE.search(stripped)
            if tag:
                flush()
                speaker = tag.group(1).strip() or None
                text = tag.group(2).replace("</v>", "").strip()
                if text:
                    buffer.append(text)
                continue

            text = self._VOICE_MARKUP_RE.sub("", stripped).strip()
            if text:
                buffer.append(text)

        flush()
        return entries

    def _is_metadata(self, line: str) -> bool:
        return line.split(" ", 1)[0] == "WEBVTT" or line.startswith(self._METADATA_PREFIXES)
