# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Parser and source reader registry."""

from pathlib import Path

from transcript_normalizer.config import ConfigError
from transcript_normalizer.transcripts.base import (
    SourceError,
    SourceReader,
    TranscriptFormat,
    TranscriptParser,
)
from transcript_normalizer.transcripts.odt_reader import OdtSourceReader
from transcript_normalizer.transcripts.plain_parser import PlainTranscriptParser
from transcript_normalizer.transcripts.srt_parser import SrtTranscriptParser
from transcript_normalizer.transcripts.teams_parser import TeamsTextParser
from transcript_normalizer.transcripts.text_reader import TextSourceReader
from transcript_normalizer.transcripts.vtt_parser import VttTranscriptParser


# Bump this whenever normalization output changes in a way that should force
# regeneration of normalized files even if the source bytes are unchanged.
TRANSCRIPT_PARSING_VERSION = 2


_PARSERS: dict[TranscriptFormat, TranscriptParser] = {
    TranscriptFormat.VTT: VttTranscriptParser(),
    TranscriptFormat.SRT: SrtTranscriptParser(),
    TranscriptFormat.TEAMS_TEXT: TeamsTextParser(),
    TranscriptFormat.PLAIN: PlainTranscriptParser(),
}

_READERS: list[SourceReader] = [
    OdtSourceReader(),
    TextSourceReader(),
]


def get_transcript_parser(fmt: TranscriptFormat) -> TranscriptParser:
    """Return the parser for a detected format.

    Unknown values fall back to the plain parser, so dispatch is total.
    """

    return _PARSERS.get(fmt, _PARSERS[TranscriptFormat.PLAIN])


def get_source_reader(path: Path) -> SourceReader:
    """Select a source reader based on the file.

    Args:
        path:
            Transcript file path.

    Returns:
        A reader instance.

    Raises:
        ConfigError:
            If no reader supports the file.
    """

    for reader in _READERS:
        if reader.can_read(path):
            return reader

    supported = ", ".join(sorted({".odt", *TextSourceReader.SUFFIXES}))
    raise ConfigError(f"Unsupported transcript file: {path} (supported: {supported})")


def read_transcript_text(path: Path) -> str:
    """Read a transcript file and normalize errors to ConfigError."""

    reader = get_source_reader(path)
    try:
        return reader.read_text(path)
    except SourceError as exc:
        raise ConfigError(str(exc)) from exc
