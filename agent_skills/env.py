from os import getenv
from pathlib import Path

AGENT_SKILLS_CONFIG_DIR = Path(getenv("AGENT_SKILLS_CONFIG_DIR", Path.cwd()))
AGENT_SKILLS_DIR = Path(getenv("AGENT_SKILLS_DIR", str(Path.cwd() / "skills")))
AGENT_SKILLS_LOG_LEVEL = getenv("AGENT_SKILLS_LOG_LEVEL", "INFO")
