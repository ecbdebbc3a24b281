"""Bundled resource discovery and access.

Resources live in the flat ``scripts/``, ``references/`` and ``assets/``
sub-directories of a skill. Their content is only read on demand.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path, PurePosixPath

from agent_skills.constants import (
    ASSETS_DIRECTORY,
    REFERENCES_DIRECTORY,
    RESOURCE_DIRECTORIES,
    SCRIPTS_DIRECTORY,
)
from agent_skills.errors import PathEscapeError, ResourceNotFoundError
from agent_skills.models import ResourceKind, SkillResource

logger = logging.getLogger(__name__)

RESOURCE_KINDS: dict[str, ResourceKind] = {
    SCRIPTS_DIRECTORY: ResourceKind.SCRIPT,
    REFERENCES_DIRECTORY: ResourceKind.REFERENCE,
    ASSETS_DIRECTORY: ResourceKind.ASSET,
}

# [label](path) or `path`, where path starts with a resource directory.
FILE_REFERENCE_PATTERN = re.compile(
    r"(?:\[[^\]]*\]\(|`)(?P<path>(?:scripts|references|assets)/[^)`]+)[`)]"
)


def _make_resource(
    kind: ResourceKind, relative_path: str, absolute_path: Path
) -> SkillResource:
    # name and suffix follow the listed entry, not a symlink target
    listed = PurePosixPath(relative_path.replace("\\", "/"))
    return SkillResource(
        kind=kind,
        relative_path=relative_path,
        absolute_path=absolute_path,
        file_name=listed.name,
        extension=listed.suffix,
    )


def scan_resources(skill_dir: Path | str, subdirectory: str) -> list[SkillResource]:
    """List the files directly inside one resource sub-directory.

    Args:
        skill_dir: The skill root directory.
        subdirectory: One of ``scripts``, ``references`` or ``assets``.

    Returns:
        Resources sorted by file name, empty if the sub-directory is missing.
    """
    if subdirectory not in RESOURCE_KINDS:
        raise ValueError(
            f"Unknown resource directory '{subdirectory}', "
            f"expected one of {', '.join(RESOURCE_DIRECTORIES)}"
        )

    dir_path = Path(skill_dir) / subdirectory
    if not dir_path.is_dir():
        return []

    kind = RESOURCE_KINDS[subdirectory]
    files = sorted(
        (entry for entry in dir_path.iterdir() if entry.is_file()),
        key=lambda p: p.name,
    )
    return [
        _make_resource(kind, f"{subdirectory}/{f.name}", f.absolute()) for f in files
    ]


def extract_file_references(body: str) -> list[str]:
    """Return the distinct resource paths referenced in a markdown body.

    Paths keep their order of first appearance.
    """
    seen: dict[str, None] = {}
    for match in FILE_REFERENCE_PATTERN.finditer(body):
        seen.setdefault(match.group("path").strip(), None)
    return list(seen)


def resolve_relative_path(skill_dir: Path | str, relative_path: str) -> Path:
    """Resolve a forward-slash relative path against the skill root.

    Raises:
        ValueError: The path holds a character the OS rejects, such as NUL.
    """
    return (Path(skill_dir) / relative_path.replace("\\", "/")).resolve()


def is_existing_file(path: Path) -> bool:
    """Whether ``path`` is a file. Names the OS cannot stat count as missing."""
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def is_within(skill_dir: Path | str, path: Path) -> bool:
    """Whether ``path`` is the skill root or lies inside it.

    The comparison ignores case so it holds on case-insensitive filesystems.
    """
    root = str(Path(skill_dir).resolve()).casefold()
    target = str(path).casefold()
    return target == root or target.startswith(root.rstrip(os.sep) + os.sep)


def resolve_file_references(body: str, skill_dir: Path | str) -> list[SkillResource]:
    """Resolve the resources referenced by a skill body.

    References to files that do not exist, or that point outside the skill
    directory, are dropped.
    """
    results: list[SkillResource] = []
    for relative_path in extract_file_references(body):
        try:
            abs_path = resolve_relative_path(skill_dir, relative_path)
        except (OSError, ValueError):
            logger.debug("skip unresolvable file reference: %r", relative_path)
            continue

        if not is_within(skill_dir, abs_path) or not is_existing_file(abs_path):
            logger.debug("skip unresolved file reference: %s", relative_path)
            continue

        kind = RESOURCE_KINDS[relative_path.split("/", 1)[0]]
        results.append(_make_resource(kind, relative_path, abs_path))
    return results


def read_resource(skill_dir: Path | str, relative_path: str) -> str:
    """Read a resource file of a skill.

    Args:
        skill_dir: The skill root directory.
        relative_path: Path from the skill root, e.g. ``scripts/extract.py``.

    Raises:
        PathEscapeError: The path resolves outside the skill directory.
        ResourceNotFoundError: The file does not exist.
    """
    try:
        resolved = resolve_relative_path(skill_dir, relative_path)
    except (OSError, ValueError) as e:
        raise ResourceNotFoundError(relative_path, str(skill_dir)) from e

    if not is_within(skill_dir, resolved):
        raise PathEscapeError(relative_path, str(skill_dir))

    if not is_existing_file(resolved):
        raise ResourceNotFoundError(relative_path, str(skill_dir))

    return resolved.read_text(encoding="utf-8")
