"""Limits and names defined by the Agent Skills format.

Ref: https://agentskills.io/specification
"""

MAX_SKILL_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 1024
MAX_COMPATIBILITY_LENGTH = 500

SKILL_FILE_NAME = "SKILL.md"
SKILL_FILE_NAME_LOWER = "skill.md"

FRONTMATTER_DELIMITER = "---"

SCRIPTS_DIRECTORY = "scripts"
REFERENCES_DIRECTORY = "references"
ASSETS_DIRECTORY = "assets"

RESOURCE_DIRECTORIES = (SCRIPTS_DIRECTORY, REFERENCES_DIRECTORY, ASSETS_DIRECTORY)

ALLOWED_FIELDS = frozenset(
    {
        "name",
        "description",
        "license",
        "allowed-tools",
        "metadata",
        "compatibility",
    }
)
