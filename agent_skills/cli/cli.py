"""Agent Skills CLI.

Validate skills, print their properties, and generate the prompt block.
"""

import argparse
import json
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from agent_skills.conf import LogConfig
from agent_skills.constants import SKILL_FILE_NAME
from agent_skills.errors import SkillError
from agent_skills.parser import read_properties
from agent_skills.prompt import to_prompt_xml
from agent_skills.validator import validate


def resolve_skill_path(path: str) -> Path:
    """Return the skill directory for a path given on the command line.

    A path to the definition file itself is mapped to its directory.
    """
    skill_path = Path(os.path.abspath(path))  # noqa: PTH100
    if skill_path.is_file() and skill_path.name.lower() == SKILL_FILE_NAME.lower():
        return skill_path.parent
    return skill_path


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup the argument parser."""
    parser = argparse.ArgumentParser(
        prog="agent-skills",
        description=(
            "CLI tool for Agent Skills - validate, read properties, "
            "and generate prompt XML."
        ),
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level.",
        dest="log_level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a skill directory."
    )
    validate_parser.add_argument(
        "path", help="Path to the skill directory to validate."
    )

    props_parser = subparsers.add_parser(
        "read-properties", help="Read and print skill properties as JSON."
    )
    props_parser.add_argument("path", help="Path to the skill directory.")

    prompt_parser = subparsers.add_parser(
        "to-prompt", help="Generate <available_skills> XML for agent prompts."
    )
    prompt_parser.add_argument(
        "paths", nargs="+", help="Paths to skill directories."
    )
    return parser


def cmd_validate(path: str) -> int:
    """Validate a skill, diagnostics go to stderr."""
    skill_path = resolve_skill_path(path)
    diagnostics = validate(skill_path)
    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if not d.is_error]

    if errors:
        print(f"Validation failed for {skill_path}:", file=sys.stderr)
        for diagnostic in errors:
            print(f"  - {diagnostic.message}", file=sys.stderr)
    for diagnostic in warnings:
        print(f"  - warning: {diagnostic.message}", file=sys.stderr)

    if errors:
        return 1
    print(f"Valid skill: {skill_path}")
    return 0


def cmd_read_properties(path: str) -> int:
    """Print the properties of a skill as JSON."""
    try:
        props = read_properties(resolve_skill_path(path))
    except SkillError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    print(json.dumps(props.to_dict(), indent=2, ensure_ascii=False))
    return 0


def cmd_to_prompt(paths: Sequence[str]) -> int:
    """Print the ``<available_skills>`` block for the given skills."""
    try:
        output = to_prompt_xml(resolve_skill_path(p) for p in paths)
    except SkillError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    print(output)
    return 0


def run(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    args = setup_argument_parser().parse_args(argv)

    log_config = LogConfig(level=args.log_level) if args.log_level else LogConfig()
    log_config.configure()

    match args.command:
        case "validate":
            return cmd_validate(args.path)
        case "read-properties":
            return cmd_read_properties(args.path)
        case "to-prompt":
            return cmd_to_prompt(args.paths)
        case _:
            raise ValueError(f"unknown command: {args.command}")


def main() -> None:
    """agent-skills CLI entrypoint."""
    sys.exit(run())
