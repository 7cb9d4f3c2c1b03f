from __future__ import annotations

"""
CLI entrypoint for the transcript normalizer.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

import argparse
import logging
import sys
from dotenv import load_dotenv

from transcript_normalizer.actions.detect import DetectAction
from transcript_normalizer.actions.normalize import NormalizeAction
from transcript_normalizer.actions.show import ShowAction
from transcript_normalizer.actions.template import TemplateAction
from transcript_normalizer.config import CONFIG_ENV_VAR, CONFIG_FILENAME, ConfigError, find_config_path, load_config


def _action_repository():
	"""
	Construct the action registry.

	Returns:
		A mapping from subcommand name to an action instance.
	"""
	actions = [
		TemplateAction(),
		DetectAction(),
		ShowAction(),
		NormalizeAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the top-level argument parser.

	The parser uses subcommands (similar to `git`) where each action registers its
	own arguments.

	Returns:
		The configured ArgumentParser instance.
	"""
	parser = argparse.ArgumentParser(
		prog="transcript-normalizer",
		description=(
			"Detect the format of meeting transcripts (WebVTT, SRT, Teams copy/paste, plain text) "
			"and rewrite them as normalized 'Speaker: utterance' text."
		),
	)
	parser.add_argument(
		"-v",
		"--verbose",
		action="store_true",
		help="Enable debug logging",
	)

	actions = _action_repository()

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help=(
			f"Path to {CONFIG_FILENAME}. If omitted, ${CONFIG_ENV_VAR} or "
			f"./{CONFIG_FILENAME} in the current directory is used."
		),
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in actions.items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(_action_name=name)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Optional argument list (without program name). If omitted, argparse
			reads from sys.argv.

	Returns:
		Process exit code. `0` on success, `1` if a transcript was rejected,
		`2` on configuration/usage errors.
	"""
	load_dotenv()

	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)

	try:
		actions = _action_repository()
		action_name = getattr(args, "_action_name", None)
		if not action_name or action_name not in actions:
			parser.error("Unknown or missing command")
			return 2

		action = actions[action_name]

		config = None
		if action.requires_config:
			config_path = find_config_path(getattr(args, "config", None))
			config = load_config(config_path)

		return action.run(args, config)
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2


if __name__ == "__main__":
	raise SystemExit(main())
