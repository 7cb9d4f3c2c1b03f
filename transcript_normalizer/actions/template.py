# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `transcripts.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from transcript_normalizer.cli_io import confirm_overwrite
from transcript_normalizer.config import CONFIG_FILENAME, NormalizerConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = f"Write a template {CONFIG_FILENAME} config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Glob patterns for transcript files to include/exclude, relative to this file.",
            "# Supported files: .txt, .md, .vtt, .srt, .odt",
            "# The transcript format (WebVTT, SRT, Teams copy/paste, plain text) is",
            "# detected from the content, not from the file extension.",
            "# 'include' and 'exclude' can be a string or a list of strings.",
            'include: ["transcripts/**/*.vtt", "transcripts/**/*.srt", "transcripts/**/*.txt"]',
            'exclude: "transcripts/private/**"',
            "",
            "# Directory for normalized transcripts and index.yaml",
            "outdir: ./normalized",
            "",
            "# Validation limits (optional; defaults shown)",
            "# validation:",
            "#   # Shorter transcripts are rejected. Some upload forms used 100.",
            "#   min_length: 50",
            "#   # Longer transcripts are rejected (10 MiB).",
            "#   max_length: 10485760",
            "#   # Share of characters outside printable ASCII and whitespace above",
            "#   # which a file is treated as binary.",
            "#   max_binary_ratio: 0.1",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "path",
            nargs="?",
            default=CONFIG_FILENAME,
            help=f"Destination path for the template (default: ./{CONFIG_FILENAME})",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: NormalizerConfig | None) -> int:
        """
        Write the template unless the user declines to overwrite.

        Raises:
            ConfigError:
                If the destination exists, `--force` is not set and no prompt
                can be shown.
        """

        _ = config
        dest = Path(args.path)
        if not confirm_overwrite(dest, force=bool(args.force)):
            print("Aborted.")
            return 0

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
        print(f"Wrote template config to: {dest}")
        return 0
