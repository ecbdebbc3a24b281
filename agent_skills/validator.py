"""Validate skills against the Agent Skills format.

Ref: https://agentskills.io/specification

Validation never raises for problems in the skill itself. Every finding is
returned as a ``Diagnostic`` so the caller decides what blocks a skill.
"""

from __future__ import annotations

import os
import unicodedata
from pathlib import Path
from typing import Any

from agent_skills.constants import (
    ALLOWED_FIELDS,
    MAX_COMPATIBILITY_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_SKILL_NAME_LENGTH,
    RESOURCE_DIRECTORIES,
    SKILL_FILE_NAME,
)
from agent_skills.errors import MalformedDocumentError
from agent_skills.models import Diagnostic
from agent_skills.parser import find_skill_md, parse_frontmatter
from agent_skills.resources import (
    extract_file_references,
    is_existing_file,
    is_within,
    resolve_relative_path,
)


def validate(skill_dir: Path | str) -> list[Diagnostic]:
    """Validate a skill directory.

    Returns:
        Diagnostics in rule order, empty when the skill is fully valid.
    """
    skill_dir = Path(skill_dir)
    if not skill_dir.exists():
        return [Diagnostic.error(f"Path does not exist: {skill_dir}")]
    if not skill_dir.is_dir():
        return [Diagnostic.error(f"Not a directory: {skill_dir}")]

    skill_md = find_skill_md(skill_dir)
    if skill_md is None:
        return [Diagnostic.error(f"Missing required file: {SKILL_FILE_NAME}")]

    try:
        content = skill_md.read_text(encoding="utf-8")
        metadata, body = parse_frontmatter(content)
    except MalformedDocumentError as e:
        return [Diagnostic.error(e.message)]
    except (OSError, UnicodeDecodeError) as e:
        return [Diagnostic.error(f"Cannot read {skill_md}: {e}")]

    return validate_metadata(metadata, skill_dir, body)


def validate_metadata(
    metadata: dict[str, Any],
    skill_dir: Path | str | None = None,
    body: str | None = None,
) -> list[Diagnostic]:
    """Validate parsed frontmatter, and the directory layout when given.

    Args:
        metadata: Frontmatter mapping from ``parse_frontmatter``.
        skill_dir: Skill directory. Enables the directory name, empty
            sub-directory and file reference checks.
        body: Markdown body. File references are only checked when both the
            body and the directory are given.
    """
    skill_dir = Path(skill_dir) if skill_dir is not None else None
    results: list[Diagnostic] = []

    results.extend(_validate_allowed_fields(metadata))

    if "name" not in metadata:
        results.append(Diagnostic.error("Missing required field in frontmatter: name"))
    else:
        results.extend(_validate_name(_as_text(metadata["name"]), skill_dir))

    if "description" not in metadata:
        results.append(
            Diagnostic.error("Missing required field in frontmatter: description")
        )
    else:
        results.extend(_validate_description(_as_text(metadata["description"])))

    if "compatibility" in metadata:
        results.extend(_validate_compatibility(_as_text(metadata["compatibility"])))

    if skill_dir is not None:
        results.extend(_validate_subdirectories(skill_dir))
        if body is not None:
            results.extend(_validate_file_references(body, skill_dir))

    return results


def _as_text(value: Any) -> str:  # noqa: ANN401
    return "" if value is None else str(value)


def _validate_allowed_fields(metadata: dict[str, Any]) -> list[Diagnostic]:
    extra = sorted(str(k) for k in metadata if k not in ALLOWED_FIELDS)
    if not extra:
        return []
    return [
        Diagnostic.error(
            f"Unexpected fields in frontmatter: {', '.join(extra)}. "
            f"Only [{', '.join(sorted(ALLOWED_FIELDS))}] are allowed."
        )
    ]


def _validate_name(name: str, skill_dir: Path | None) -> list[Diagnostic]:
    if not name.strip():
        return [Diagnostic.error("Field 'name' must be a non-empty string")]

    name = unicodedata.normalize("NFKC", name).strip()
    errors: list[Diagnostic] = []

    if len(name) > MAX_SKILL_NAME_LENGTH:
        errors.append(
            Diagnostic.error(
                f"Skill name '{name}' exceeds {MAX_SKILL_NAME_LENGTH} character "
                f"limit ({len(name)} chars)"
            )
        )

    if name != name.lower():
        errors.append(Diagnostic.error(f"Skill name '{name}' must be lowercase"))

    if name.startswith("-") or name.endswith("-"):
        errors.append(Diagnostic.error("Skill name cannot start or end with a hyphen"))

    if "--" in name:
        errors.append(Diagnostic.error("Skill name cannot contain consecutive hyphens"))

    if not all(c.isalpha() or c.isdecimal() or c == "-" for c in name):
        errors.append(
            Diagnostic.error(
                f"Skill name '{name}' contains invalid characters. "
                "Only letters, digits, and hyphens are allowed."
            )
        )

    if skill_dir is not None:
        # base name as given, symlinked skill directories keep their link name
        dir_name = Path(os.path.abspath(skill_dir)).name  # noqa: PTH100
        if unicodedata.normalize("NFKC", dir_name) != name:
            errors.append(
                Diagnostic.error(
                    f"Directory name '{dir_name}' must match "
                    f"skill name '{name}'"
                )
            )

    return errors


def _validate_description(description: str) -> list[Diagnostic]:
    if not description.strip():
        return [Diagnostic.error("Field 'description' must be a non-empty string")]

    if len(description) > MAX_DESCRIPTION_LENGTH:
        return [
            Diagnostic.error(
                f"Description exceeds {MAX_DESCRIPTION_LENGTH} character limit "
                f"({len(description)} chars)"
            )
        ]
    return []


def _validate_compatibility(compatibility: str) -> list[Diagnostic]:
    if len(compatibility) > MAX_COMPATIBILITY_LENGTH:
        return [
            Diagnostic.error(
                f"Compatibility exceeds {MAX_COMPATIBILITY_LENGTH} character limit "
                f"({len(compatibility)} chars)"
            )
        ]
    return []


def _validate_subdirectories(skill_dir: Path) -> list[Diagnostic]:
    warnings: list[Diagnostic] = []
    for subdirectory in RESOURCE_DIRECTORIES:
        path = skill_dir / subdirectory
        if path.is_dir() and not any(p.is_file() for p in path.iterdir()):
            warnings.append(
                Diagnostic.warning(
                    f"Directory '{subdirectory}/' exists but contains no files"
                )
            )
    return warnings


def _validate_file_references(body: str, skill_dir: Path) -> list[Diagnostic]:
    results: list[Diagnostic] = []
    for relative_path in extract_file_references(body):
        try:
            resolved = resolve_relative_path(skill_dir, relative_path)
        except (OSError, ValueError):
            resolved = None

        if resolved is not None and not is_within(skill_dir, resolved):
            results.append(
                Diagnostic.error(
                    f"File reference '{relative_path}' escapes the skill directory"
                )
            )
        elif resolved is None or not is_existing_file(resolved):
            results.append(
                Diagnostic.warning(
                    f"Referenced file '{relative_path}' does not exist"
                )
            )
    return results
