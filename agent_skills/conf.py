"""Configuration models."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from agent_skills.env import (
    AGENT_SKILLS_CONFIG_DIR,
    AGENT_SKILLS_DIR,
    AGENT_SKILLS_LOG_LEVEL,
)

logger = logging.getLogger(__name__)


class SkillsOptions(BaseModel):
    """Options of the skill registry.

    Example ``skills_config.json``:
        {
            "skillDirectories": ["~/.agent/skills", "./skills"],
            "autoDiscover": true
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    skill_directories: list[Path] = Field(
        default_factory=lambda: [AGENT_SKILLS_DIR],
        alias="skillDirectories",
    )
    """Directories scanned for skill folders."""
    auto_discover: bool = Field(default=True, alias="autoDiscover")
    """Discover skills when the registry is created."""

    def expanded_directories(self) -> list[Path]:
        """Return the skill directories with ``~`` expanded."""
        return [d.expanduser() for d in self.skill_directories]


class LogConfig(BaseModel):
    """Logging configuration for the command line entrypoint."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default_factory=lambda: AGENT_SKILLS_LOG_LEVEL.upper()  # type: ignore[return-value]
    )
    format: str = "%(levelname)s %(name)s: %(message)s"

    def configure(self) -> None:
        """Apply the configuration to the root logger."""
        logging.basicConfig(level=self.level, format=self.format)


def load_options(config_path: Path | str | None = None) -> SkillsOptions:
    """Load ``SkillsOptions`` from a JSON file.

    Args:
        config_path: Path to the JSON file. Defaults to
            ``skills_config.json`` in the config directory, falling back to
            the default options when that file does not exist.
    """
    if config_path is None:
        path = AGENT_SKILLS_CONFIG_DIR / "skills_config.json"
        if not path.exists():
            logger.debug("no skills config at %s, use defaults", path)
            return SkillsOptions()
    else:
        path = Path(config_path)
    logger.debug("load skills options: %s", path)
    with path.open("r") as f:
        return SkillsOptions.model_validate_json(f.read())
