"""Parse SKILL.md files into skill properties."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from frontmatter import YAMLHandler

from agent_skills.constants import (
    ASSETS_DIRECTORY,
    FRONTMATTER_DELIMITER,
    REFERENCES_DIRECTORY,
    SCRIPTS_DIRECTORY,
    SKILL_FILE_NAME,
    SKILL_FILE_NAME_LOWER,
)
from agent_skills.errors import MalformedDocumentError, MissingRequiredFieldError
from agent_skills.models import SkillInfo, SkillProperties
from agent_skills.resources import scan_resources

logger = logging.getLogger(__name__)

_handler = YAMLHandler()

_OPTIONAL_FIELDS = {
    "license": "license",
    "compatibility": "compatibility",
    "allowed-tools": "allowed_tools",
}


def find_skill_md(skill_dir: Path | str) -> Path | None:
    """Find the definition file in a skill directory.

    ``SKILL.md`` is preferred, ``skill.md`` is accepted when the uppercase
    file is absent.
    """
    skill_dir = Path(skill_dir)
    for name in (SKILL_FILE_NAME, SKILL_FILE_NAME_LOWER):
        path = skill_dir / name
        if path.is_file():
            return path
    return None


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split SKILL.md content into frontmatter metadata and markdown body.

    No semantic checks are done here, see ``validate_metadata``.

    Returns:
        Tuple of (metadata, stripped body).

    Raises:
        MalformedDocumentError: The frontmatter is missing, unclosed or is
            not a YAML mapping.
    """
    if not content.startswith(FRONTMATTER_DELIMITER):
        raise MalformedDocumentError(
            "SKILL.md must start with YAML frontmatter (---)"
        )

    parts = _handler.FM_BOUNDARY.split(content, 2)
    if len(parts) < 3 or parts[0].strip():  # noqa: PLR2004
        raise MalformedDocumentError(
            "SKILL.md frontmatter not properly closed with ---"
        )
    _, raw_metadata, body = parts

    try:
        metadata = _handler.load(raw_metadata)
    except yaml.YAMLError as e:
        raise MalformedDocumentError(f"Invalid YAML in frontmatter: {e}") from e

    if not isinstance(metadata, dict):
        raise MalformedDocumentError("SKILL.md frontmatter must be a YAML mapping")

    nested = metadata.get("metadata")
    if isinstance(nested, dict):
        metadata["metadata"] = {str(k): str(v) for k, v in nested.items()}

    return metadata, body.strip()


def extract_properties(metadata: dict[str, Any]) -> SkillProperties:
    """Build ``SkillProperties`` from parsed frontmatter.

    Only checks that name and description are present and non-blank.

    Raises:
        MissingRequiredFieldError: name or description is absent or blank.
    """
    for field in ("name", "description"):
        if field not in metadata:
            raise MissingRequiredFieldError(field)

    optional = {
        attr: str(metadata[key])
        for key, attr in _OPTIONAL_FIELDS.items()
        if metadata.get(key) is not None
    }

    raw_meta = metadata.get("metadata")
    meta = (
        {str(k): "" if v is None else str(v) for k, v in raw_meta.items()}
        if isinstance(raw_meta, dict)
        else None
    )

    return SkillProperties(
        name=metadata["name"],
        description=metadata["description"],
        metadata=meta,
        **optional,
    )


def _read_document(skill_dir: Path) -> tuple[Path, dict[str, Any], str]:
    skill_md = find_skill_md(skill_dir)
    if skill_md is None:
        raise MalformedDocumentError(f"SKILL.md not found in {skill_dir}")

    logger.debug("read skill: %s", skill_md)
    metadata, body = parse_frontmatter(skill_md.read_text(encoding="utf-8"))
    return skill_md, metadata, body


def read_properties(skill_dir: Path | str) -> SkillProperties:
    """Read skill properties from a skill directory.

    Does not run full validation, use ``validate`` for that.
    """
    _, metadata, _ = _read_document(Path(skill_dir))
    return extract_properties(metadata)


def load_skill(skill_dir: Path | str) -> tuple[SkillInfo, dict[str, Any]]:
    """Read a full skill and return it together with its raw frontmatter.

    The raw frontmatter lets callers validate without reading the file twice.
    """
    skill_dir = Path(os.path.abspath(skill_dir))  # noqa: PTH100
    skill_md, metadata, body = _read_document(skill_dir)
    properties = extract_properties(metadata)

    info = SkillInfo(
        properties=properties,
        body=body,
        location=skill_md,
        scripts=tuple(scan_resources(skill_dir, SCRIPTS_DIRECTORY)),
        references=tuple(scan_resources(skill_dir, REFERENCES_DIRECTORY)),
        assets=tuple(scan_resources(skill_dir, ASSETS_DIRECTORY)),
    )
    return info, metadata


def read_skill(skill_dir: Path | str) -> SkillInfo:
    """Read a full skill including body, location and bundled resources."""
    info, _ = load_skill(skill_dir)
    return info
