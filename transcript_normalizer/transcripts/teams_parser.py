# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Parser for transcripts copied from the Teams caption view.

The copied text has no formal grammar. A typical excerpt looks like this:

    Jane Doe   2 minutes 15 seconds
    Let's get started with the review.
    John Smith
    3:02
    Sounds good.

Lines are classified by an ordered rule table (`TeamsTextParser.RULES`). The
first rule that accepts a line consumes it. Timestamps stick: every entry
carries the most recently seen timestamp until a new one replaces it.
Lines that are already in normalized `[M:SS] Speaker: text` form are taken
over as complete entries, so normalized output parses back to itself.
"""

import re
from dataclasses import dataclass, field
from typing import Callable

from transcript_normalizer.transcripts.base import ParsedEntry, TranscriptFormat, split_lines
from transcript_normalizer.transcripts.detector import TEAMS_DISCLAIMER, TEAMS_STARTED
from transcript_normalizer.transcripts.participants import NON_SPEAKER_LABELS
from transcript_normalizer.transcripts.render import parse_rendered_line


_NAME = r"[A-Z][a-zA-Z'-]+(?:\s+[A-Z][a-zA-Z'-]+)*"
_SHORT_TS = r"\d{1,2}:\d{2}"
_LONG_TS = r"\d+\s+minutes?\s+\d+\s+seconds?"

SHORT_TIMESTAMP_RE = re.compile(rf"^{_SHORT_TS}$")
LONG_TIMESTAMP_RE = re.compile(r"^(\d+)\s+minutes?\s+(\d+)\s+seconds?$", re.IGNORECASE)

# A name followed by a timestamp is accepted regardless of case.
SPEAKER_WITH_TIMESTAMP_RE = re.compile(
    rf"^({_NAME})\s+({_LONG_TS}|{_SHORT_TS})$",
    re.IGNORECASE,
)
SPEAKER_RE = re.compile(rf"^({_NAME})(?:\s+({_SHORT_TS}|{_LONG_TS}))?$")
DUPLICATE_SPEAKER_RE = re.compile(rf"^({_NAME})\s+\d")

_LONG_TS_SEARCH_RE = re.compile(r"(\d+)\s+minutes?\s+(\d+)\s+seconds?", re.IGNORECASE)


def format_timestamp(value: str) -> str:
    """Convert a timestamp to `M:SS` display form.

    Long forms like `2 minutes 5 seconds` become `2:05`. Short forms are
    returned unchanged.
    """

    long_form = _LONG_TS_SEARCH_RE.search(value)
    if long_form:
        return f"{long_form.group(1)}:{long_form.group(2).zfill(2)}"
    return value.strip()


@dataclass
class _ParseState:
    entries: list[ParsedEntry] = field(default_factory=list)
    speaker: str | None = None
    timestamp: str | None = None
    buffer: list[str] = field(default_factory=list)

    def flush(self) -> None:
        text = " ".join(self.buffer).strip()
        self.buffer.clear()
        if text:
            self.entries.append(ParsedEntry(text=text, speaker=self.speaker, timestamp=self.timestamp))


def _rendered_entry_rule(state: _ParseState, line: str) -> bool:
    entry = parse_rendered_line(line)
    if entry is None or entry.speaker in NON_SPEAKER_LABELS:
        return False

    # An already normalized turn is complete on its own line.
    state.flush()
    state.entries.append(entry)
    state.speaker = entry.speaker
    if entry.timestamp:
        state.timestamp = entry.timestamp
    return True


def _boilerplate_rule(state: _ParseState, line: str) -> bool:
    lowered = line.lower()
    return TEAMS_DISCLAIMER in lowered or TEAMS_STARTED in lowered


def _timestamp_rule(state: _ParseState, line: str) -> bool:
    if SHORT_TIMESTAMP_RE.match(line):
        state.timestamp = line
        return True

    long_form = LONG_TIMESTAMP_RE.match(line)
    if long_form:
        state.timestamp = format_timestamp(line)
        return True

    return False


def _speaker_rule(state: _ParseState, line: str) -> bool:
    match = SPEAKER_WITH_TIMESTAMP_RE.match(line) or SPEAKER_RE.match(line)
    if not match:
        return False

    # Text seen before the first speaker line is kept for that speaker.
    if state.buffer and state.speaker:
        state.flush()

    state.speaker = match.group(1).strip()
    if match.group(2):
        state.timestamp = format_timestamp(match.group(2))
    return True


def _duplicate_speaker_rule(state: _ParseState, line: str) -> bool:
    if not state.speaker or not line.startswith(state.speaker):
        return False
    return DUPLICATE_SPEAKER_RE.match(line) is not None


def _content_rule(state: _ParseState, line: str) -> bool:
    state.buffer.append(line)
    return True


class TeamsTextParser:
    """Parse copy/pasted Teams caption text into timestamped entries."""

    format = TranscriptFormat.TEAMS_TEXT
    separator = "\n\n"

    RULES: list[tuple[str, Callable[[_ParseState, str], bool]]] = [
        ("rendered-entry", _rendered_entry_rule),
        ("boilerplate", _boilerplate_rule),
        ("timestamp", _timestamp_rule),
        ("speaker", _speaker_rule),
        ("duplicate-speaker", _duplicate_speaker_rule),
        ("content", _content_rule),
    ]

    def parse(self, content: str) -> list[ParsedEntry]:
        state = _ParseState()

        for line in split_lines(content):
            stripped = line.strip()
            if not stripped:
                continue

            for _name, rule in self.RULES:
                if rule(state, stripped):
                    break

        state.flush()
        return state.entries

    def classify(self, line: str, speaker: str | None = None) -> str:
        """Return the name of the rule that would consume `line`.

        Args:
            line:
                A single stripped transcript line.
            speaker:
                Speaker active before the line, if any.

        Returns:
            One of the rule names in `RULES`.
        """

        state = _ParseState(speaker=speaker)
        for name, rule in self.RULES:
            if rule(state, line):
                return name
        return "content"  # pragma: no cover
