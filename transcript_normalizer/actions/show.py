from __future__ import annotations

"""
Single-file normalization action.

The `show` subcommand validates one transcript and prints its normalized text
to stdout, e.g. for piping into another tool.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from transcript_normalizer.actions.base import add_limit_arguments, limits_from_args
from transcript_normalizer.config import NormalizerConfig
from transcript_normalizer.transcripts import normalize_transcript, read_transcript_text, validate_transcript


@dataclass(frozen=True)
class ShowAction:
    """`show` subcommand."""

    name: str = "show"
    help: str = "Print the normalized text of one transcript"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("file", metavar="FILE", help="Transcript file")
        parser.add_argument(
            "-p",
            "--participants",
            action="store_true",
            help="Also print the detected format and participant names",
        )
        add_limit_arguments(parser)

    def run(self, args: argparse.Namespace, config: NormalizerConfig | None) -> int:
        """
        Validate and normalize the transcript.

        Returns:
            `0` on success, `1` if the validator rejected the transcript.

        Raises:
            ConfigError:
                If the file cannot be read or the limits are invalid.
        """

        _ = config
        limits = limits_from_args(args)
        content = read_transcript_text(Path(args.file))

        result = validate_transcript(content, limits)
        if not result.valid:
            print(f"rejected ({result.error.value}): {result.message}", file=sys.stderr)
            return 1

        transcript = normalize_transcript(content)

        if bool(args.participants):
            print(f"Format: {transcript.format.value}")
            print(f"Participants: {', '.join(transcript.participants) or '-'}")
            print()

        print(transcript.raw_text)
        return 0
