# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Canonical rendering of parsed entries."""

import re
from typing import Iterable

from transcript_normalizer.transcripts.base import ParsedEntry


# Title-Case word sequence, as accepted for speaker labels.
SPEAKER_NAME = r"[A-Z][a-zA-Z'-]+(?:[ \t]+[A-Z][a-zA-Z'-]+)*"

_RENDERED_LINE_RE = re.compile(
    r"^(?:\[(?P<timestamp>\d{1,2}:\d{2})\][ \t]+)?"
    r"(?:(?P<speaker>" + SPEAKER_NAME + r"):[ \t]+)?"
    r"(?P<text>\S.*)$"
)


def parse_rendered_line(line: str) -> ParsedEntry | None:
    """Read back one line written by `render_entry`.

    Returns:
        The entry, or None if the line has neither a `[M:SS]` bracket nor a
        `Speaker:` label.
    """

    match = _RENDERED_LINE_RE.match(line.strip())
    if not match or not (match.group("timestamp") or match.group("speaker")):
        return None

    return ParsedEntry(
        text=match.group("text").strip(),
        speaker=match.group("speaker"),
        timestamp=match.group("timestamp"),
    )


def render_entry(entry: ParsedEntry) -> str:
    """Render one entry as `[M:SS] Speaker: text`.

    The timestamp bracket and the speaker label are omitted when absent.
    """

    parts: list[str] = []
    if entry.timestamp:
        parts.append(f"[{entry.timestamp}]")
    if entry.speaker:
        parts.append(f"{entry.speaker}:")
    parts.append(entry.text.strip())
    return " ".join(parts)


def render_entries(entries: Iterable[ParsedEntry], separator: str = "\n") -> str:
    """Render entries into normalized transcript text.

    Args:
        entries:
            Parsed entries in document order. Entries without text are skipped.
        separator:
            String placed between rendered entries. Line-per-turn formats use a
            single newline, paragraph-per-turn formats a blank line.

    Returns:
        The rendered text (empty if no entry has text).
    """

    return separator.join(render_entry(e) for e in entries if e.text and e.text.strip())
