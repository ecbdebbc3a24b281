"""Skill data models.

Ref: https://agentskills.io/specification
"""

from enum import StrEnum
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from agent_skills.errors import MissingRequiredFieldError


class SkillProperties(BaseModel):
    """Properties parsed from the SKILL.md frontmatter."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    """Skill name in kebab-case."""
    description: str
    """What the skill does and when to use it."""
    license: str | None = None
    compatibility: str | None = None
    """Environment requirements."""
    allowed_tools: str | None = Field(default=None, alias="allowed-tools")
    """Space-delimited list of pre-approved tools, kept verbatim."""
    metadata: dict[str, str] | None = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def _require_text(cls, v: Any, info: ValidationInfo) -> str:  # noqa: ANN401
        if v is None or not str(v).strip():
            raise MissingRequiredFieldError(
                info.field_name,
                f"Field '{info.field_name}' must be a non-empty string",
            )
        return str(v).strip()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict keyed by frontmatter field, skipping empty values."""
        result: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
        }
        if self.license is not None:
            result["license"] = self.license
        if self.compatibility is not None:
            result["compatibility"] = self.compatibility
        if self.allowed_tools is not None:
            result["allowed-tools"] = self.allowed_tools
        if self.metadata:
            result["metadata"] = dict(self.metadata)
        return result


class ResourceKind(StrEnum):
    """Category of a bundled resource."""

    SCRIPT = "script"
    REFERENCE = "reference"
    ASSET = "asset"


class SkillResource(BaseModel):
    """Descriptor of a file bundled in scripts/, references/ or assets/.

    Content is never held here, use ``read_resource`` to load it.
    """

    model_config = ConfigDict(frozen=True)

    kind: ResourceKind
    relative_path: str
    """Forward-slash path from the skill root, e.g. ``scripts/run.sh``."""
    absolute_path: Path
    file_name: str
    extension: str
    """Extension including the leading dot, empty when there is none."""


class SkillInfo(BaseModel):
    """A fully parsed skill."""

    model_config = ConfigDict(frozen=True)

    properties: SkillProperties
    body: str
    location: Path
    """Absolute path to the definition file."""
    scripts: tuple[SkillResource, ...] = ()
    references: tuple[SkillResource, ...] = ()
    assets: tuple[SkillResource, ...] = ()

    @property
    def name(self) -> str:
        """Return the skill name."""
        return self.properties.name

    @property
    def skill_dir(self) -> Path:
        """Return the directory holding the definition file."""
        return self.location.parent


class Severity(StrEnum):
    """Severity of a validation finding."""

    ERROR = "error"
    WARNING = "warning"


class Diagnostic(BaseModel):
    """A single validation finding."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str

    @classmethod
    def error(cls, message: str) -> Self:
        """Create a blocking diagnostic."""
        return cls(severity=Severity.ERROR, message=message)

    @classmethod
    def warning(cls, message: str) -> Self:
        """Create an advisory diagnostic."""
        return cls(severity=Severity.WARNING, message=message)

    @property
    def is_error(self) -> bool:
        """Whether the finding blocks the skill from being used."""
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        return f"{self.severity}: {self.message}"


def has_errors(diagnostics: list[Diagnostic]) -> bool:
    """Return True if any diagnostic is blocking."""
    return any(d.is_error for d in diagnostics)


__all__ = [
    "Diagnostic",
    "ResourceKind",
    "Severity",
    "SkillInfo",
    "SkillProperties",
    "SkillResource",
    "has_errors",
]
