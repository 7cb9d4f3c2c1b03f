# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript data model and parser interfaces."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol


class TranscriptFormat(str, Enum):
    """Source format of a raw transcript."""

    VTT = "vtt"
    SRT = "srt"
    TEAMS_TEXT = "teams-text"
    PLAIN = "plain"


@dataclass(frozen=True)
class ParsedEntry:
    """One speech turn in document order.

    Attributes:
        speaker:
            Speaker name, if the source attributes the turn.
        timestamp:
            Display form of the turn's start time (e.g. `1:15`). This is not a
            parsed duration.
        text:
            Utterance text. Never empty.
    """

    text: str
    speaker: str | None = None
    timestamp: str | None = None


@dataclass(frozen=True)
class NormalizedTranscript:
    """Result of normalizing one raw transcript.

    Attributes:
        entries:
            Parsed speech turns in document order.
        participants:
            Unique speaker names found in the rendered text, sorted ascending.
        raw_text:
            Canonical line-oriented rendering of `entries`.
        format:
            Detected source format.
    """

    entries: list[ParsedEntry]
    participants: list[str]
    raw_text: str
    format: TranscriptFormat = TranscriptFormat.PLAIN


class TranscriptParser(Protocol):
    """Interface for format-specific transcript parsing.

    Implementations are total: malformed input degrades to dropped lines or
    unattributed text, never to an exception.
    """

    format: TranscriptFormat

    # Separator placed between rendered entries.
    separator: str

    def parse(self, content: str) -> list[ParsedEntry]:
        """Return the speech turns contained in `content`."""

        raise NotImplementedError


class SourceReader(Protocol):
    """Interface for reading raw transcript text from a file."""

    def can_read(self, path: Path) -> bool:
        """Return True if this reader supports the given file."""

        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        """Return the raw transcript text stored in the given file."""

        raise NotImplementedError


@dataclass(frozen=True)
class SourceError(RuntimeError):
    """Raised when a transcript file cannot be read."""

    message: str
    path: Path | None = None
    excerpt: str | None = field(default=None, compare=False)

    def __str__(self) -> str:  # pragma: no cover
        parts: list[str] = []

        if self.path is not None:
            parts.append(f"{self.path}: {self.message}")
        else:
            parts.append(self.message)

        if isinstance(self.excerpt, str) and self.excerpt.strip():
            excerpt = self.excerpt.strip().replace("\n", " ")
            if len(excerpt) > 160:
                excerpt = excerpt[:157] + "..."
            parts.append(f"> {excerpt}")

        return "\n".join(parts)


def split_lines(content: str) -> list[str]:
    """Split text into lines, accepting any line ending convention."""

    return content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
