# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Participant extraction from normalized transcript text."""

import re


# Optional `[timestamp]` bracket, then a Title-Case name directly before a colon.
_SPEAKER_LINE_RE = re.compile(
    r"^(?:\[[^\]\n]*\]\s*)?([A-Z][a-zA-Z'-]+(?:[ \t]+[A-Z][a-zA-Z'-]+)*):",
    re.MULTILINE,
)

# Capitalized labels that look like speakers but are section headers.
NON_SPEAKER_LABELS = frozenset({"Note", "Warning", "Error", "Info", "TODO", "WEBVTT"})


def extract_participants(normalized_text: str) -> list[str]:
    """Collect the speaker names of a normalized transcript.

    Args:
        normalized_text:
            Rendered transcript with `Speaker: text` or `[M:SS] Speaker: text`
            lines.

    Returns:
        Unique speaker names, sorted ascending.
    """

    if not isinstance(normalized_text, str):
        return []

    names = {m.group(1) for m in _SPEAKER_LINE_RE.finditer(normalized_text)}
    return sorted(names - NON_SPEAKER_LABELS)
