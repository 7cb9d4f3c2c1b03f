from __future__ import annotations

"""
Shared action interface.

Actions implement a small protocol so the CLI can dynamically register arguments
and dispatch execution based on the selected subcommand.
"""

import argparse
from typing import Protocol

from transcript_normalizer.config import NormalizerConfig, ValidationLimits, parse_validation


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Implementations are expected to:
    - Provide a `name` used as the subcommand.
    - Provide a short `help` string for `--help`.
    - Declare whether they require a valid YAML config.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register action-specific CLI arguments on the action's subparser."""

    def run(self, args: argparse.Namespace, config: NormalizerConfig | None) -> int:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.

        Returns:
            Process exit code.
        """


def add_limit_arguments(parser: argparse.ArgumentParser) -> None:
    """Register validator limit overrides for actions that run without a config."""

    parser.add_argument(
        "--min-length",
        type=int,
        default=None,
        help="Minimum transcript length in characters (default: 50)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Maximum transcript length in characters (default: 10 MiB)",
    )


def limits_from_args(args: argparse.Namespace) -> ValidationLimits:
    """Build validator limits from `--min-length`/`--max-length` overrides.

    Raises:
        ConfigError:
            If the overrides are out of range.
    """

    overrides = {
        key: getattr(args, key, None)
        for key in ("min_length", "max_length")
        if getattr(args, key, None) is not None
    }
    return parse_validation(overrides)
