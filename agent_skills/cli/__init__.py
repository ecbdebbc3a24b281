"""Agent Skills command line interface."""

from agent_skills.cli.cli import main

__all__ = ["main"]
