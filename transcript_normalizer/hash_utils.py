# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Hash utilities.

Hashes are only used for change detection and for stable output file names,
never for security.
"""

import hashlib
from pathlib import Path


def md5_file(path: Path) -> str:
    """Return the lowercase hex MD5 digest of a file's bytes."""

    hasher = hashlib.md5(usedforsecurity=False)
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def document_id(rel_path: str) -> str:
    """
    Compute a stable, filesystem-friendly identifier for a source file.

    Args:
        rel_path:
            POSIX path of the source relative to the config directory.

    Returns:
        The file stem reduced to safe characters, followed by a short hash of
        the full relative path (so equal stems in different folders differ).
    """

    digest = hashlib.sha1(rel_path.encode("utf-8"), usedforsecurity=False).hexdigest()[:10]
    stem = Path(rel_path).stem
    safe = "".join(ch if ch.isalnum() or ch in {"-", "_"} else "_" for ch in stem)
    safe = safe.strip("_") or "transcript"
    return f"{safe}-{digest}"
