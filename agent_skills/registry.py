"""Registry of the valid skills found under the configured directories."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Protocol, TypeAlias

from agent_skills.conf import SkillsOptions, load_options
from agent_skills.errors import SkillError, SkillNotFoundError
from agent_skills.models import SkillInfo, SkillProperties
from agent_skills.parser import find_skill_md, load_skill
from agent_skills.prompt import to_prompt_xml
from agent_skills.resources import read_resource
from agent_skills.validator import validate_metadata

logger = logging.getLogger(__name__)

Snapshot: TypeAlias = Mapping[str, SkillInfo]


class SkillProvider(Protocol):
    """Read interface of a skill registry."""

    def list_metadata(self) -> list[SkillProperties]:
        """Return the properties of every available skill."""
        ...

    def get_skill(self, name: str) -> SkillInfo | None:
        """Return a skill by name."""
        ...

    def get_available_skills_prompt(self) -> str:
        """Return the ``<available_skills>`` block for the available skills."""
        ...

    def refresh(self) -> None:
        """Re-scan the configured directories."""
        ...


class SkillRegistry:
    """Discover skills from the filesystem and serve them from a snapshot.

    ``refresh`` builds a new mapping and publishes it with a single
    assignment. Readers grab the current mapping once per call, so they see
    either the old or the new set of skills, never a mix.
    """

    def __init__(self, options: SkillsOptions | None = None) -> None:
        """Initialize the registry.

        Args:
            options: Registry options, loaded from the config directory when
                omitted.
        """
        self._options = options or load_options()
        self._snapshot: Snapshot = MappingProxyType({})
        self._refresh_lock = threading.Lock()

        if self._options.auto_discover:
            self.refresh()

    @property
    def directories(self) -> list[Path]:
        """Return the configured skill directories."""
        return self._options.expanded_directories()

    @property
    def snapshot(self) -> Snapshot:
        """Return the current read-only name to skill mapping."""
        return self._snapshot

    def refresh(self) -> None:
        """Reload skills from all configured directories."""
        with self._refresh_lock:
            result: dict[str, SkillInfo] = {}
            for directory in self.directories:
                if not directory.is_dir():
                    logger.warning("skill dir not found: %s", directory)
                    continue

                for entry in sorted(directory.iterdir()):
                    if not entry.is_dir():
                        continue

                    skill = self._load_skill(entry)
                    if skill is None:
                        continue

                    if skill.name in result:
                        logger.debug(
                            "duplicate skill name %s, %s shadows %s",
                            skill.name,
                            entry,
                            result[skill.name].skill_dir,
                        )
                    result[skill.name] = skill

            self._snapshot = MappingProxyType(result)

        logger.info("discovered %s skills", len(result))

    def _load_skill(self, skill_dir: Path) -> SkillInfo | None:
        """Load and validate one candidate directory."""
        if find_skill_md(skill_dir) is None:
            logger.debug("no SKILL.md found in %s", skill_dir)
            return None

        try:
            skill, metadata = load_skill(skill_dir)
            diagnostics = validate_metadata(metadata, skill.skill_dir, skill.body)
        except (SkillError, OSError, UnicodeDecodeError, ValueError) as e:
            logger.warning("Failed to load skill from %s: %s", skill_dir, e)
            return None

        errors = [d.message for d in diagnostics if d.is_error]
        if errors:
            logger.warning(
                "Skill '%s' has validation errors: %s", skill_dir, "; ".join(errors)
            )
            return None

        for warning in diagnostics:
            logger.debug("skill %s: %s", skill.name, warning.message)

        logger.debug("discovered skill: %s", skill.name)
        return skill

    def list_metadata(self) -> list[SkillProperties]:
        """Return the properties of every available skill."""
        return [s.properties for s in self._snapshot.values()]

    def list_skills(self) -> list[SkillInfo]:
        """Return every available skill."""
        return list(self._snapshot.values())

    def get_skill(self, name: str) -> SkillInfo | None:
        """Return a skill by name."""
        return self._snapshot.get(name)

    def get_available_skills_prompt(self) -> str:
        """Return the ``<available_skills>`` block for the available skills."""
        snapshot = self._snapshot
        return to_prompt_xml(s.skill_dir for s in snapshot.values())

    def read_skill_resource(self, name: str, relative_path: str) -> str:
        """Read a bundled resource of an available skill.

        Raises:
            SkillNotFoundError: No skill with that name is available.
            PathEscapeError: The path resolves outside the skill directory.
            ResourceNotFoundError: The file does not exist.
        """
        skill = self._snapshot.get(name)
        if skill is None:
            raise SkillNotFoundError(name)
        return read_resource(skill.skill_dir, relative_path)
