# Transcript Normalizer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `transcripts.yaml`, validating required keys, and
normalizing paths so that downstream actions can rely on a typed config object.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


CONFIG_FILENAME = "transcripts.yaml"
CONFIG_ENV_VAR = "TRANSCRIPT_NORMALIZER_CONFIG"

DEFAULT_MIN_LENGTH = 50
DEFAULT_MAX_LENGTH = 10 * 1024 * 1024
DEFAULT_MAX_BINARY_RATIO = 0.10


@dataclass(frozen=True)
class ValidationLimits:
    """
    Bounds applied by the transcript validator.

    Attributes:
        min_length:
            Minimum number of characters after trimming (inclusive).
        max_length:
            Maximum number of characters after trimming (inclusive).
        max_binary_ratio:
            Highest tolerated share of characters outside printable ASCII and
            whitespace.
    """

    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    max_binary_ratio: float = DEFAULT_MAX_BINARY_RATIO


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Parsed configuration for a batch normalization run.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths and glob patterns are resolved against.
        include:
            Glob patterns for transcript files to include.
        exclude:
            Glob patterns for transcript files to exclude.
        outdir:
            Directory receiving normalized transcripts and the index file.
        validation:
            Limits applied before normalizing each transcript.
    """

    config_path: Path
    base_dir: Path
    include: list[str]
    exclude: list[str]
    outdir: Path
    validation: ValidationLimits


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing). The command line
        wins over the `TRANSCRIPT_NORMALIZER_CONFIG` environment variable,
        which wins over `./transcripts.yaml`.
    """

    if cli_path:
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)

    return Path.cwd() / CONFIG_FILENAME


def _parse_patterns(value: Any, *, key: str, required: bool) -> list[str]:
    """
    Parse a glob pattern entry that may be a string or a list of strings.

    Args:
        value:
            Raw YAML value.
        key:
            Config key, used in error messages.
        required:
            Whether at least one pattern must be given.

    Returns:
        Stripped, non-empty patterns.

    Raises:
        ConfigError:
            If the value has the wrong type or is empty while required.
    """

    if value is None:
        if required:
            raise ConfigError(f"'{key}' must be a non-empty string or list of strings")
        return []

    items = [value] if isinstance(value, str) else value
    if not isinstance(items, list):
        raise ConfigError(f"'{key}' must be a string or a list of strings")

    patterns: list[str] = []
    for idx, item in enumerate(items, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"'{key}' entries must be non-empty strings (problem at index {idx})")
        patterns.append(item.strip())

    if required and not patterns:
        raise ConfigError(f"'{key}' must contain at least one pattern")

    return patterns


def parse_validation(value: Any) -> ValidationLimits:
    """
    Parse and validate the optional `validation` section.

    Args:
        value:
            Raw YAML value for the `validation` key.

    Returns:
        A ValidationLimits instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return ValidationLimits()

    if not isinstance(value, dict):
        raise ConfigError("'validation' must be a mapping if provided")

    min_length = value.get("min_length", DEFAULT_MIN_LENGTH)
    max_length = value.get("max_length", DEFAULT_MAX_LENGTH)
    max_binary_ratio = value.get("max_binary_ratio", DEFAULT_MAX_BINARY_RATIO)

    # bool is a subclass of int, but `min_length: true` is certainly a typo.
    if not isinstance(min_length, int) or isinstance(min_length, bool):
        raise ConfigError("validation.min_length must be an integer")
    if not isinstance(max_length, int) or isinstance(max_length, bool):
        raise ConfigError("validation.max_length must be an integer")
    if not isinstance(max_binary_ratio, (int, float)) or isinstance(max_binary_ratio, bool):
        raise ConfigError("validation.max_binary_ratio must be a number")

    if min_length < 0:
        raise ConfigError("validation.min_length must be >= 0")
    if max_length <= 0:
        raise ConfigError("validation.max_length must be > 0")
    if min_length > max_length:
        raise ConfigError("validation.min_length must be <= validation.max_length")
    if not 0 <= max_binary_ratio <= 1:
        raise ConfigError("validation.max_binary_ratio must be between 0 and 1")

    return ValidationLimits(
        min_length=min_length,
        max_length=max_length,
        max_binary_ratio=float(max_binary_ratio),
    )


def load_config(path: Path) -> NormalizerConfig:
    """
    Load and validate a `transcripts.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated NormalizerConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            f"No {CONFIG_FILENAME} found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    missing = [k for k in ("include", "outdir") if k not in raw]
    if missing:
        raise ConfigError(f"Config is missing required key(s): {', '.join(missing)}")

    include = _parse_patterns(raw.get("include"), key="include", required=True)
    exclude = _parse_patterns(raw.get("exclude"), key="exclude", required=False)

    outdir = raw.get("outdir")
    if not isinstance(outdir, str) or not outdir.strip():
        raise ConfigError("'outdir' must be a non-empty string")

    validation = parse_validation(raw.get("validation"))

    # Interpret outdir and glob patterns relative to config file location.
    base_dir = path.parent.resolve()

    return NormalizerConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        include=include,
        exclude=exclude,
        outdir=(base_dir / outdir.strip()).resolve(),
        validation=validation,
    )
