from __future__ import annotations

"""
Format detection action.

The `detect` subcommand reports the detected format and the validation verdict
for one or more transcript files without writing anything.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from transcript_normalizer.actions.base import add_limit_arguments, limits_from_args
from transcript_normalizer.config import ConfigError, NormalizerConfig
from transcript_normalizer.transcripts import detect_format, read_transcript_text, validate_transcript


@dataclass(frozen=True)
class DetectAction:
    """`detect` subcommand."""

    name: str = "detect"
    help: str = "Print the detected format of transcript files"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("files", nargs="+", metavar="FILE", help="Transcript files to inspect")
        add_limit_arguments(parser)

    def run(self, args: argparse.Namespace, config: NormalizerConfig | None) -> int:
        """
        Print one line per file: `path: format (verdict)`.

        Returns:
            `0` if every file could be read, `2` otherwise. Rejected
            transcripts do not change the exit code.
        """

        _ = config
        limits = limits_from_args(args)
        unreadable = 0

        for name in args.files:
            path = Path(name)
            try:
                content = read_transcript_text(path)
            except ConfigError as exc:
                print(f"{path}: error: {exc}", file=sys.stderr)
                unreadable += 1
                continue

            fmt = detect_format(content)
            result = validate_transcript(content, limits)
            if result.valid:
                verdict = "valid"
            else:
                verdict = f"rejected, {result.error.value}: {result.message}"
            print(f"{path}: {fmt.value} ({verdict})")

        return 2 if unreadable else 0
