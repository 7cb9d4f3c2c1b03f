# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Small CLI interaction helpers.

Existing files are only overwritten with explicit consent:
- `--force` always allows it.
- In interactive terminals, the user is asked.
- In non-interactive contexts (CI, pipes), the action aborts with an error.
"""

import sys
from pathlib import Path

from transcript_normalizer.config import ConfigError


def is_interactive_tty() -> bool:
    """Return True if both stdin and stdout are connected to a TTY."""

    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def prompt_yes_no(question: str, *, default_no: bool = True) -> bool:
    """
    Ask the user a yes/no question.

    Args:
        question:
            Prompt text without the trailing choice suffix.
        default_no:
            If true, empty input is treated as "no".

    Returns:
        True if the user answered yes.
    """

    suffix = "[y/N]" if default_no else "[Y/n]"
    while True:
        answer = input(f"{question} {suffix} ").strip().lower()
        if not answer:
            return not default_no
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False


def confirm_overwrite(path: Path, *, force: bool) -> bool:
    """
    Decide whether an existing file may be replaced.

    Args:
        path:
            Destination path.
        force:
            Value of the action's `--force` flag.

    Returns:
        True if the file does not exist, `force` is set, or the user agreed.
        False if the user declined.

    Raises:
        ConfigError:
            If the file exists, `force` is not set and no prompt can be shown.
    """

    if force or not path.exists():
        return True

    if not is_interactive_tty():
        raise ConfigError(f"Refusing to overwrite existing file: {path} (use --force)")

    return prompt_yes_no(f"Output file already exists: {path}. Overwrite?", default_no=True)
