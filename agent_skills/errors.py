"""Errors raised while reading skills."""

from enum import StrEnum


class SkillErrorKind(StrEnum):
    """Kind of a skill error."""

    MALFORMED_DOCUMENT = "malformed_document"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    PATH_ESCAPE = "path_escape"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SKILL_NOT_FOUND = "skill_not_found"


class SkillError(Exception):
    """Base error for skill parsing and resource access.

    Every error carries a ``kind`` so callers can branch on it without
    inspecting the exception class.
    """

    kind: SkillErrorKind

    def __init__(self, message: str) -> None:
        """Initialize the error with a human readable message."""
        super().__init__(message)
        self.message = message


class MalformedDocumentError(SkillError):
    """SKILL.md is missing, has no frontmatter or the frontmatter is invalid."""

    kind = SkillErrorKind.MALFORMED_DOCUMENT


class MissingRequiredFieldError(SkillError):
    """A required frontmatter field is absent or blank."""

    kind = SkillErrorKind.MISSING_REQUIRED_FIELD

    def __init__(self, field: str, message: str | None = None) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending frontmatter field.
            message: Optional override for the default message.
        """
        super().__init__(
            message or f"Missing required field in frontmatter: {field}"
        )
        self.field = field


class PathEscapeError(SkillError):
    """A relative resource path resolves outside the skill directory."""

    kind = SkillErrorKind.PATH_ESCAPE

    def __init__(self, relative_path: str, skill_dir: str) -> None:
        """Initialize the error."""
        super().__init__(
            f"Resource path '{relative_path}' escapes the skill directory "
            f"'{skill_dir}'"
        )
        self.relative_path = relative_path


class ResourceNotFoundError(SkillError):
    """A resource file does not exist inside the skill directory."""

    kind = SkillErrorKind.RESOURCE_NOT_FOUND

    def __init__(self, relative_path: str, skill_dir: str) -> None:
        """Initialize the error."""
        super().__init__(
            f"Resource file not found: '{relative_path}' in skill directory "
            f"'{skill_dir}'"
        )
        self.relative_path = relative_path


class SkillNotFoundError(SkillError):
    """No skill with the given name is registered."""

    kind = SkillErrorKind.SKILL_NOT_FOUND

    def __init__(self, name: str) -> None:
        """Initialize the error."""
        super().__init__(f"Skill '{name}' not found")
        self.name = name


__all__ = [
    "MalformedDocumentError",
    "MissingRequiredFieldError",
    "PathEscapeError",
    "ResourceNotFoundError",
    "SkillError",
    "SkillErrorKind",
    "SkillNotFoundError",
]
