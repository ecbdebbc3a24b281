"""Tests for SKILL.md parsing and property extraction."""

from pathlib import Path

import pytest

from agent_skills.errors import (
    MalformedDocumentError,
    MissingRequiredFieldError,
    SkillErrorKind,
)
from agent_skills.models import ResourceKind, SkillProperties
from agent_skills.parser import (
    extract_properties,
    find_skill_md,
    parse_frontmatter,
    read_properties,
    read_skill,
)
from tests.helper import (
    FULL_SKILL_TEMPLATE,
    PDF_SKILL,
    simple_skill,
    write_resource,
    write_skill,
)

SKILL_NO_FRONTMATTER = """\
## Instructions

Just some instructions without frontmatter.
"""

SKILL_UNCLOSED = """\
---
name: open-ended
description: Never closed
"""

SKILL_INVALID_YAML = """\
---
name: [invalid
description: : bad yaml {{
---

Body content.
"""


class TestParseFrontmatter:
    """Tests for parse_frontmatter."""

    def test_splits_metadata_and_body(self) -> None:
        """Test that metadata and a stripped body are returned."""
        metadata, body = parse_frontmatter(PDF_SKILL)

        assert metadata["name"] == "pdf-processing"
        assert metadata["description"] == "Extract text and tables from PDF files."
        assert metadata["license"] == "Apache-2.0"
        assert body.startswith("## Instructions")
        assert body.endswith("pull the text out of a PDF.")

    def test_missing_leading_delimiter(self) -> None:
        """Test that content without frontmatter is rejected."""
        with pytest.raises(MalformedDocumentError, match="must start with YAML"):
            parse_frontmatter(SKILL_NO_FRONTMATTER)

    def test_unclosed_frontmatter(self) -> None:
        """Test that an unclosed frontmatter block is rejected."""
        with pytest.raises(MalformedDocumentError, match="not properly closed"):
            parse_frontmatter(SKILL_UNCLOSED)

    @pytest.mark.parametrize(
        "content",
        ["---name: x\n---\nbody", "---name: x\n---\ndescription: y\n---\nbody"],
    )
    def test_delimiter_must_be_on_its_own_line(self, content: str) -> None:
        """Test that text after the opening --- on the same line is rejected."""
        with pytest.raises(MalformedDocumentError, match="not properly closed"):
            parse_frontmatter(content)

    def test_invalid_yaml(self) -> None:
        """Test that YAML errors surface as malformed documents."""
        with pytest.raises(MalformedDocumentError, match="Invalid YAML") as exc:
            parse_frontmatter(SKILL_INVALID_YAML)

        assert exc.value.kind is SkillErrorKind.MALFORMED_DOCUMENT

    def test_non_mapping_frontmatter(self) -> None:
        """Test that a YAML list is not accepted as frontmatter."""
        with pytest.raises(MalformedDocumentError, match="YAML mapping"):
            parse_frontmatter("---\n- a\n- b\n---\nBody")

    def test_metadata_values_become_strings(self) -> None:
        """Test that nested metadata keys and values are stringified."""
        metadata, _ = parse_frontmatter(FULL_SKILL_TEMPLATE.format(name="full"))

        assert metadata["metadata"] == {"author": "test", "version": "1.0"}

    def test_quoted_and_nested_values(self) -> None:
        """Test quoted strings keep their content."""
        content = (
            '---\nname: "quoted"\ndescription: \'Has: a colon\'\n'
            "metadata:\n  nested: yes\n---\n"
        )
        metadata, body = parse_frontmatter(content)

        assert metadata["name"] == "quoted"
        assert metadata["description"] == "Has: a colon"
        assert metadata["metadata"] == {"nested": "True"}
        assert body == ""

    def test_does_not_validate(self) -> None:
        """Test that semantic problems are left to the validator."""
        metadata, _ = parse_frontmatter("---\nName: Upper\n---\nBody")

        assert metadata == {"Name": "Upper"}


class TestExtractProperties:
    """Tests for extract_properties."""

    def test_required_fields_trimmed(self) -> None:
        """Test that required fields are trimmed."""
        props = extract_properties({"name": "  abc ", "description": " does x\n"})

        assert props.name == "abc"
        assert props.description == "does x"
        assert props.license is None
        assert props.allowed_tools is None
        assert props.metadata is None

    @pytest.mark.parametrize("field", ["name", "description"])
    def test_missing_field(self, field: str) -> None:
        """Test that missing required fields are reported by name."""
        metadata = {"name": "abc", "description": "does x"}
        del metadata[field]

        with pytest.raises(MissingRequiredFieldError) as exc:
            extract_properties(metadata)

        assert exc.value.field == field
        assert exc.value.kind is SkillErrorKind.MISSING_REQUIRED_FIELD
        assert field in str(exc.value)

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_field(self, value: str | None) -> None:
        """Test that blank required fields are rejected."""
        with pytest.raises(MissingRequiredFieldError) as exc:
            extract_properties({"name": "abc", "description": value})

        assert exc.value.field == "description"

    def test_optional_fields(self) -> None:
        """Test that optional fields are copied verbatim."""
        props = extract_properties(
            {
                "name": "abc",
                "description": "does x",
                "license": "MIT",
                "compatibility": "Requires git",
                "allowed-tools": "Bash(git:*) Read",
                "metadata": {"author": "me", "version": 2},
            }
        )

        assert props.license == "MIT"
        assert props.compatibility == "Requires git"
        assert props.allowed_tools == "Bash(git:*) Read"
        assert props.metadata == {"author": "me", "version": "2"}

    def test_non_mapping_metadata_is_ignored(self) -> None:
        """Test that metadata of another shape is treated as absent."""
        props = extract_properties(
            {"name": "abc", "description": "does x", "metadata": ["a", "b"]}
        )

        assert props.metadata is None

    def test_model_rejects_blank_name(self) -> None:
        """Test that SkillProperties itself refuses a blank name."""
        with pytest.raises(MissingRequiredFieldError):
            SkillProperties(name=" ", description="x")

    def test_to_dict_skips_empty_values(self) -> None:
        """Test the frontmatter-shaped dict representation."""
        props = SkillProperties(
            name="abc", description="does x", allowed_tools="Read", metadata={}
        )

        assert props.to_dict() == {
            "name": "abc",
            "description": "does x",
            "allowed-tools": "Read",
        }


class TestReadSkill:
    """Tests for reading skills from directories."""

    def test_find_skill_md_prefers_uppercase(self, skills_root: Path) -> None:
        """Test that SKILL.md wins over skill.md."""
        skill_dir = write_skill(skills_root, "abc", simple_skill("abc"))
        (skill_dir / "skill.md").write_text(simple_skill("lower"), encoding="utf-8")

        found = find_skill_md(skill_dir)

        assert found is not None
        assert found.name == "SKILL.md"

    def test_find_skill_md_accepts_lowercase(self, skills_root: Path) -> None:
        """Test that skill.md is used when SKILL.md is absent."""
        skill_dir = write_skill(
            skills_root, "abc", simple_skill("abc"), file_name="skill.md"
        )

        assert read_properties(skill_dir).name == "abc"

    def test_find_skill_md_missing(self, skills_root: Path) -> None:
        """Test that a directory without a definition file yields None."""
        assert find_skill_md(skills_root) is None

    def test_read_properties_missing_file(self, skills_root: Path) -> None:
        """Test that reading properties without SKILL.md fails."""
        with pytest.raises(MalformedDocumentError, match="SKILL.md not found"):
            read_properties(skills_root)

    def test_read_pdf_processing(self, skills_root: Path) -> None:
        """Test the pdf-processing example end to end."""
        skill_dir = write_skill(skills_root, "pdf-processing", PDF_SKILL)

        props = read_properties(skill_dir)

        assert props == SkillProperties(
            name="pdf-processing",
            description="Extract text and tables from PDF files.",
            license="Apache-2.0",
        )

    def test_read_skill_collects_resources(self, skills_root: Path) -> None:
        """Test that read_skill fills body, location and resources."""
        skill_dir = write_skill(skills_root, "pdf-processing", PDF_SKILL)
        write_resource(skill_dir, "scripts/extract.py", "print('x')")
        write_resource(skill_dir, "references/REFERENCE.md", "# Ref")
        write_resource(skill_dir, "assets/template.docx")

        skill = read_skill(skill_dir)

        assert skill.name == "pdf-processing"
        assert skill.location == skill_dir / "SKILL.md"
        assert skill.skill_dir == skill_dir
        assert skill.body.startswith("## Instructions")
        assert [r.relative_path for r in skill.scripts] == ["scripts/extract.py"]
        assert skill.scripts[0].kind is ResourceKind.SCRIPT
        assert [r.file_name for r in skill.references] == ["REFERENCE.md"]
        assert skill.assets[0].extension == ".docx"
