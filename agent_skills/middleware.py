"""Inject the available skills into chat messages.

Example:
    ```python
    registry = SkillRegistry(SkillsOptions(skill_directories=[Path("skills")]))
    chain = SkillsPromptInjector(registry).as_runnable() | chat_model
    chain.invoke([HumanMessage(content="Extract the tables from report.pdf")])
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from langchain_core.messages import BaseMessage, SystemMessage
from langchain_core.runnables import RunnableLambda

from agent_skills.prompt import EMPTY_PROMPT

if TYPE_CHECKING:
    from agent_skills.registry import SkillProvider

logger = logging.getLogger(__name__)


def inject_skills_prompt(
    messages: Sequence[BaseMessage], provider: SkillProvider
) -> list[BaseMessage]:
    """Return a copy of ``messages`` with the skills prompt in the system message.

    The prompt is appended to the first system message, or a new system
    message is inserted at the front when there is none. The input messages
    are never mutated.
    """
    prompt = provider.get_available_skills_prompt()
    result = list(messages)
    if not prompt.strip() or prompt == EMPTY_PROMPT:
        return result

    for i, msg in enumerate(result):
        if isinstance(msg, SystemMessage):
            if isinstance(msg.content, str):
                content: str | list = f"{msg.content}\n\n{prompt}"
            else:
                content = [*msg.content, {"type": "text", "text": f"\n\n{prompt}"}]
            result[i] = msg.model_copy(update={"content": content})
            break
    else:
        logger.debug("no system message, insert skills prompt")
        result.insert(0, SystemMessage(content=prompt))

    return result


class SkillsPromptInjector:
    """Callable that injects the skills prompt of a provider."""

    def __init__(self, provider: SkillProvider) -> None:
        """Initialize the injector."""
        self._provider = provider

    def __call__(self, messages: Sequence[BaseMessage]) -> list[BaseMessage]:
        """Inject the skills prompt into ``messages``."""
        return inject_skills_prompt(messages, self._provider)

    def as_runnable(self) -> RunnableLambda[Sequence[BaseMessage], list[BaseMessage]]:
        """Wrap the injector so it can be piped into a chat model."""
        return RunnableLambda(self.__call__, name="inject_skills_prompt")
