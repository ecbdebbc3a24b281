"""Tests for the <available_skills> prompt generator."""

from pathlib import Path

import pytest

from agent_skills.errors import MalformedDocumentError, MissingRequiredFieldError
from agent_skills.prompt import EMPTY_PROMPT, to_prompt_xml
from tests.helper import simple_skill, write_skill


class TestToPromptXml:
    """Tests for to_prompt_xml."""

    def test_empty(self) -> None:
        """Test the fixed empty wrapper."""
        assert to_prompt_xml([]) == "<available_skills>\n</available_skills>"
        assert to_prompt_xml([]) == EMPTY_PROMPT

    def test_single_skill(self, skills_root: Path) -> None:
        """Test the full rendering of one skill."""
        skill_dir = write_skill(
            skills_root,
            "pdf-reader",
            simple_skill("pdf-reader", "Read and extract text from PDF files"),
        )

        result = to_prompt_xml([skill_dir])

        assert result == "\n".join(
            [
                "<available_skills>",
                "<skill>",
                "<name>",
                "pdf-reader",
                "</name>",
                "<description>",
                "Read and extract text from PDF files",
                "</description>",
                "<location>",
                str(skill_dir / "SKILL.md"),
                "</location>",
                "</skill>",
                "</available_skills>",
            ]
        )

    def test_keeps_input_order(self, skills_root: Path) -> None:
        """Test that skills are rendered in input order, duplicates included."""
        skill_b = write_skill(skills_root, "skill-b", simple_skill("skill-b"))
        skill_a = write_skill(skills_root, "skill-a", simple_skill("skill-a"))

        result = to_prompt_xml([skill_b, skill_a, skill_b])

        assert result.count("<skill>") == 3
        assert result.index("skill-b") < result.index("skill-a")

    def test_escapes_markup(self, skills_root: Path) -> None:
        """Test that name and description are escaped."""
        skill_dir = write_skill(
            skills_root,
            "escape",
            simple_skill("escape", "'Use <b> & \"quotes\"'"),
        )

        result = to_prompt_xml([skill_dir])

        assert "Use &lt;b&gt; &amp; &quot;quotes&quot;" in result
        assert "<b>" not in result

    def test_apostrophe_uses_decimal_entity(self, skills_root: Path) -> None:
        """Test that apostrophes are rendered as &#39;."""
        skill_dir = write_skill(
            skills_root, "quotes", simple_skill("quotes", "It's \"fine\"")
        )

        result = to_prompt_xml([skill_dir])

        assert "It&#39;s &quot;fine&quot;" in result
        assert "&#x27;" not in result

    def test_relative_paths_are_made_absolute(
        self, skills_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the location is always absolute."""
        write_skill(skills_root, "rel", simple_skill("rel"))
        monkeypatch.chdir(skills_root)

        result = to_prompt_xml(["rel"])

        assert str(skills_root / "rel" / "SKILL.md") in result

    def test_reads_fresh_content(self, skills_root: Path) -> None:
        """Test that nothing is cached between calls."""
        skill_dir = write_skill(skills_root, "fresh", simple_skill("fresh", "old"))
        assert "old" in to_prompt_xml([skill_dir])

        write_skill(skills_root, "fresh", simple_skill("fresh", "new"))

        assert "new" in to_prompt_xml([skill_dir])

    def test_missing_skill_md(self, skills_root: Path) -> None:
        """Test that a directory without SKILL.md fails."""
        with pytest.raises(MalformedDocumentError):
            to_prompt_xml([skills_root])

    def test_missing_description(self, skills_root: Path) -> None:
        """Test that extraction errors propagate."""
        skill_dir = write_skill(skills_root, "nodesc", "---\nname: nodesc\n---\n")

        with pytest.raises(MissingRequiredFieldError):
            to_prompt_xml([skill_dir])
