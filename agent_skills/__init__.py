"""Agent Skills: parse, validate and serve SKILL.md based skills."""

from agent_skills.conf import SkillsOptions
from agent_skills.errors import (
    MalformedDocumentError,
    MissingRequiredFieldError,
    PathEscapeError,
    ResourceNotFoundError,
    SkillError,
    SkillErrorKind,
    SkillNotFoundError,
)
from agent_skills.models import (
    Diagnostic,
    ResourceKind,
    Severity,
    SkillInfo,
    SkillProperties,
    SkillResource,
)
from agent_skills.parser import (
    extract_properties,
    find_skill_md,
    parse_frontmatter,
    read_properties,
    read_skill,
)
from agent_skills.prompt import to_prompt_xml
from agent_skills.registry import SkillProvider, SkillRegistry
from agent_skills.resources import (
    read_resource,
    resolve_file_references,
    scan_resources,
)
from agent_skills.validator import validate, validate_metadata

__all__ = [
    "Diagnostic",
    "MalformedDocumentError",
    "MissingRequiredFieldError",
    "PathEscapeError",
    "ResourceKind",
    "ResourceNotFoundError",
    "Severity",
    "SkillError",
    "SkillErrorKind",
    "SkillInfo",
    "SkillNotFoundError",
    "SkillProperties",
    "SkillProvider",
    "SkillRegistry",
    "SkillResource",
    "SkillsOptions",
    "extract_properties",
    "find_skill_md",
    "parse_frontmatter",
    "read_properties",
    "read_resource",
    "read_skill",
    "resolve_file_references",
    "scan_resources",
    "to_prompt_xml",
    "validate",
    "validate_metadata",
]
