# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ODT transcript reader."""

from pathlib import Path

from odfdo import Document

from transcript_normalizer.transcripts.base import SourceError


def _node_text(node: object) -> str:
    # odfdo Paragraph objects often expose richer text via
    # `inner_text`/`text_recursive` than via `.text`.
    for attr in ("inner_text", "text_recursive", "text"):
        try:
            value = getattr(node, attr, None)
            if callable(value):
                value = value()
        except Exception:  # noqa: BLE001
            continue
        if value is not None:
            return str(value)
    return str(node)


class OdtSourceReader:
    """Extract the text of ODT documents, one line per paragraph."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_text(self, path: Path) -> str:
        """Return the document's paragraphs and headings joined by newlines.

        Empty paragraphs are kept as blank lines, since the VTT and SRT
        parsers rely on blank lines between cues.
        """

        try:
            doc = Document(path)
        except Exception as exc:  # noqa: BLE001
            raise SourceError(f"Failed to open ODT file: {exc}", path=path) from exc

        try:
            body = doc.body

            # XPath also finds paragraphs nested in lists, tables and frames.
            try:
                nodes = list(body.xpath(".//text:p | .//text:h"))
            except Exception:  # noqa: BLE001
                nodes = list(body.get_paragraphs())

            return "\n".join(_node_text(n).replace("\r\n", "\n") for n in nodes)
        except Exception as exc:  # noqa: BLE001
            raise SourceError(f"Failed to extract text from ODT file: {exc}", path=path) from exc
