"""Shared helpers for skill tests."""

from pathlib import Path

PDF_SKILL = """\
---
name: pdf-processing
description: Extract text and tables from PDF files.
license: Apache-2.0
---

## Instructions

Use `scripts/extract.py` to pull the text out of a PDF.
"""

FULL_SKILL_TEMPLATE = """\
---
name: {name}
description: A skill with all fields.
license: Apache-2.0
compatibility: Requires git
allowed-tools: Bash(git:*) Read
metadata:
  author: test
  version: 1.0
---
Body content
"""

# Paths the OS cannot stat: an over-long file name and an embedded NUL byte.
UNRESOLVABLE_REFERENCES = [
    "scripts/" + "x" * 300 + ".py",
    "scripts/a\x00b.py",
]


def simple_skill(
    name: str, description: str = "A test skill.", body: str = "Body"
) -> str:
    """Return SKILL.md content with only the required fields."""
    return f"---\nname: {name}\ndescription: {description}\n---\n{body}\n"


def write_skill(
    root: Path, dir_name: str, content: str, file_name: str = "SKILL.md"
) -> Path:
    """Write a definition file into ``root/dir_name`` and return the directory."""
    d = root / dir_name
    d.mkdir(parents=True, exist_ok=True)
    (d / file_name).write_text(content, encoding="utf-8")
    return d


def write_resource(skill_dir: Path, relative_path: str, content: str = "") -> Path:
    """Write a bundled resource file into a skill directory."""
    path = skill_dir / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
