# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Batch normalization action.

This action normalizes every transcript matched by the configured glob
patterns. For each transcript it writes one text file into `outdir`, plus an
`index.yaml` summarizing the detected format, participants and status of all
documents.

Transcripts whose bytes, limits and parsing version are unchanged since the
last run are skipped.
"""

import argparse
import fnmatch
import glob
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from transcript_normalizer.config import ConfigError, NormalizerConfig
from transcript_normalizer.hash_utils import document_id, md5_file
from transcript_normalizer.transcripts import (
    TRANSCRIPT_PARSING_VERSION,
    normalize_transcript,
    read_transcript_text,
    validate_transcript,
)
from transcript_normalizer.yaml_io import read_yaml_mapping, write_yaml_mapping


logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.yaml"


@dataclass(frozen=True)
class NormalizeAction:
    """
    `normalize` subcommand.

    Normalizes all configured transcripts into the output directory.
    """

    name: str = "normalize"
    help: str = "Normalize all configured transcripts"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Re-process transcripts even if they are unchanged",
        )

    def run(self, args: argparse.Namespace, config: NormalizerConfig | None) -> int:
        """
        Execute batch normalization.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            Process exit code (always `0`; per-file problems are recorded in the
            index).

        Raises:
            ConfigError:
                If the output directory or index file cannot be used.
        """

        if config is None:
            raise RuntimeError("NormalizeAction requires a config, but none was provided")

        out_dir = config.outdir
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"Cannot create outdir '{out_dir}': {exc}") from exc

        input_files = self._discover_input_files(config)
        if not input_files:
            print("No input transcript files found.")
            return 0

        index_path = out_dir / INDEX_FILENAME
        previous = {} if bool(args.force) else self._previous_records(index_path, config)

        index: dict[str, Any] = {
            "schema_version": 1,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "config": {
                "path": self._rel_posix(config.base_dir, config.config_path),
            },
            "transcript_parsing_version": TRANSCRIPT_PARSING_VERSION,
            "validation": asdict(config.validation),
            "documents": [],
        }

        counts = {"normalized": 0, "unchanged": 0, "rejected": 0, "failed": 0}
        for input_path in input_files:
            record = self._normalize_one_file(
                config=config,
                input_path=input_path,
                out_dir=out_dir,
                previous=previous,
            )
            index["documents"].append(record)
            counts[record["status"]] += 1

        write_yaml_mapping(index_path, index)

        print(
            f"Processed {len(input_files)} transcript(s): normalized {counts['normalized']}, "
            f"unchanged {counts['unchanged']}, rejected {counts['rejected']}, "
            f"failed {counts['failed']}. Wrote index: {index_path}"
        )
        return 0

    def _discover_input_files(self, config: NormalizerConfig) -> list[Path]:
        """
        Find transcript files based on include/exclude patterns.

        Patterns are resolved relative to the directory containing the YAML
        configuration.

        Returns:
            Sorted list of paths to transcript files.
        """

        base_dir = config.base_dir

        paths: list[Path] = []
        for pattern in config.include:
            include_glob = str((base_dir / self._normalize_glob_pattern(pattern)).as_posix())
            paths.extend(Path(p) for p in glob.glob(include_glob, recursive=True))

        if config.exclude:
            exclude_norms = [self._normalize_glob_pattern(p) for p in config.exclude]
            paths = [
                p
                for p in paths
                if not any(fnmatch.fnmatch(self._rel_posix(base_dir, p), ex) for ex in exclude_norms)
            ]

        # Never pick up our own output when outdir lies below an include pattern.
        out_dir = config.outdir.resolve()
        paths = [p for p in paths if p.is_file() and out_dir not in p.resolve().parents]
        return sorted({p.resolve() for p in paths})

    def _previous_records(self, index_path: Path, config: NormalizerConfig) -> dict[str, dict[str, Any]]:
        """
        Load the records of the previous run, keyed by source path.

        An index written by another parsing version or with other validation
        limits yields no records, so everything is re-processed.
        """

        if not index_path.exists():
            return {}

        try:
            existing = read_yaml_mapping(index_path)
        except ConfigError as exc:
            print(f"WARNING: Ignoring unreadable index file: {exc}")
            return {}

        if int(existing.get("transcript_parsing_version") or 0) != TRANSCRIPT_PARSING_VERSION:
            return {}
        if existing.get("validation") != asdict(config.validation):
            return {}

        documents = existing.get("documents")
        if not isinstance(documents, list):
            return {}

        return {
            str(doc.get("source_path")): doc
            for doc in documents
            if isinstance(doc, dict) and doc.get("source_path")
        }

    def _normalize_one_file(
        self,
        *,
        config: NormalizerConfig,
        input_path: Path,
        out_dir: Path,
        previous: dict[str, dict[str, Any]],
    ) -> dict[str, Any]:
        """
        Normalize one transcript file and write its output text file.

        Args:
            config:
                Loaded configuration.
            input_path:
                Absolute transcript path.
            out_dir:
                Output directory.
            previous:
                Records of the previous run, keyed by source path.

        Returns:
            A document record for the index file.
        """

        rel_path = self._rel_posix(config.base_dir, input_path)
        doc_id = document_id(rel_path)
        out_path = out_dir / f"{doc_id}.txt"
        try:
            source_md5 = md5_file(input_path)
        except OSError as exc:
            print(f"WARNING: Skipping transcript due to read error: {rel_path}\n{exc}")
            return {
                "document_id": doc_id,
                "source_path": rel_path,
                "status": "failed",
                "error": str(exc),
            }

        old = previous.get(rel_path)
        if old and old.get("md5") == source_md5 and old.get("status") in {"normalized", "unchanged"}:
            if out_path.exists():
                print(f"Skipping unchanged transcript: {rel_path}")
                return {**old, "status": "unchanged"}

        record: dict[str, Any] = {
            "document_id": doc_id,
            "source_path": rel_path,
            "md5": source_md5,
        }

        try:
            content = read_transcript_text(input_path)
        except ConfigError as exc:
            print(f"WARNING: Skipping transcript due to read error: {rel_path}\n{exc}")
            return {**record, "status": "failed", "error": str(exc)}

        result = validate_transcript(content, config.validation)
        if not result.valid:
            print(f"WARNING: Rejected transcript: {rel_path}: {result.message}")
            return {
                **record,
                "status": "rejected",
                "error": result.error.value,
                "message": result.message,
            }

        transcript = normalize_transcript(content)
        out_path.write_text(transcript.raw_text + "\n", encoding="utf-8")
        logger.info("Normalized %s as %s into %s", rel_path, transcript.format.value, out_path.name)
        print(f"Normalized: {rel_path} ({transcript.format.value}, {len(transcript.entries)} entries)")

        return {
            **record,
            "status": "normalized",
            "output_file": self._rel_posix(config.base_dir, out_path),
            "format": transcript.format.value,
            "participants": list(transcript.participants),
            "entries_total": len(transcript.entries),
            "original_length": len(content.strip()),
            "processed_length": len(transcript.raw_text),
        }

    def _normalize_glob_pattern(self, pattern: str) -> str:
        """
        Normalize user-provided glob patterns to Python's recursive glob syntax.

        Patterns like `**.vtt` are not a standard recursive glob segment and are
        converted to `**/*.vtt`.
        """

        p = pattern.strip()
        if p.startswith("**.") and "/" not in p:
            return f"**/*.{p[3:]}"
        if p == "**" or p == "**/":
            return "**/*"
        return p

    def _rel_posix(self, base_dir: Path, path: Path) -> str:
        """Compute a stable POSIX-style path relative to `base_dir`."""

        try:
            rel = path.resolve().relative_to(base_dir.resolve())
        except ValueError:
            rel = path.resolve()
        return rel.as_posix()
