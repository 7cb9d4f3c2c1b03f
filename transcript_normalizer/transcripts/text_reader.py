# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Plain text transcript reader (TXT, Markdown, VTT, SRT files).

The reader only decodes the file. Format detection happens on the returned
text, not on the file extension, because pasted Teams transcripts are usually
saved as `.txt`.
"""

from pathlib import Path

from transcript_normalizer.transcripts.base import SourceError


class TextSourceReader:
    """Read UTF-8 text files."""

    SUFFIXES = frozenset({".txt", ".md", ".vtt", ".srt"})

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in self.SUFFIXES

    def read_text(self, path: Path) -> str:
        try:
            # utf-8-sig drops the BOM that caption exports often carry.
            raw = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise SourceError("File is not valid UTF-8 text", path=path) from exc
        except OSError as exc:
            raise SourceError(f"Failed to read text file: {exc}", path=path) from exc

        return raw.replace("\r\n", "\n").replace("\r", "\n")
