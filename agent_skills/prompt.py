"""Render the ``<available_skills>`` block for agent system prompts."""

from __future__ import annotations

import html
import os
from collections.abc import Iterable
from pathlib import Path

from agent_skills.errors import MalformedDocumentError
from agent_skills.parser import find_skill_md, read_properties

EMPTY_PROMPT = "<available_skills>\n</available_skills>"


def _escape(text: str) -> str:
    return html.escape(text).replace("&#x27;", "&#39;")


def to_prompt_xml(skill_dirs: Iterable[Path | str]) -> str:
    """Generate the ``<available_skills>`` block for the given skills.

    Skills are rendered in the given order and re-read from disk on every
    call.

    Raises:
        SkillError: A skill directory could not be parsed.
    """
    dirs = [Path(os.path.abspath(d)) for d in skill_dirs]  # noqa: PTH100
    if not dirs:
        return EMPTY_PROMPT

    lines = ["<available_skills>"]
    for skill_dir in dirs:
        skill_md = find_skill_md(skill_dir)
        if skill_md is None:
            raise MalformedDocumentError(f"SKILL.md not found in {skill_dir}")
        props = read_properties(skill_dir)

        lines.extend(
            [
                "<skill>",
                "<name>",
                _escape(props.name),
                "</name>",
                "<description>",
                _escape(props.description),
                "</description>",
                "<location>",
                str(skill_md),
                "</location>",
                "</skill>",
            ]
        )
    lines.append("</available_skills>")
    return "\n".join(lines)
