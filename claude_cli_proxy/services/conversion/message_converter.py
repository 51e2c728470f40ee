"""
Message converter: splits OpenAI chat messages into the two strings the CLI takes.

System messages are pulled out of the conversation and concatenated into a
single system prompt, which the CLI receives via --system-prompt and which
replaces the tool's own default instructions. Everything else is flattened
into one prompt string, with earlier assistant turns wrapped in
<previous_response> tags.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

from ...models.api_models import MessageRole, OpenAIChatMessage

logger = logging.getLogger("ClaudeCliProxy.Conversion.Messages")

PROMPT_SEPARATOR = "\n"
SYSTEM_PROMPT_SEPARATOR = "\n\n"

_ROLES = {role.value: role for role in MessageRole}

MessageLike = Union[OpenAIChatMessage, Mapping[str, Any]]


@dataclass(frozen=True)
class ConvertedMessages:
    prompt: str
    system_prompt: Optional[str] = None


def format_previous_response(content: str) -> str:
    return f"<previous_response>\n{content}\n</previous_response>\n"


def _role_and_content(message: MessageLike):
    if isinstance(message, Mapping):
        return message.get("role"), message.get("content")
    return message.role, message.content


def convert_messages(messages: Iterable[MessageLike]) -> ConvertedMessages:
    """
    convert_messages(messages) -> ConvertedMessages
    Single ordered pass. Order is preserved inside each output; roles other
    than system/user/assistant contribute nothing.
    """
    system_parts: List[str] = []
    prompt_parts: List[str] = []

    for index, message in enumerate(messages or []):
        raw_role, content = _role_and_content(message)
        content = content if content is not None else ""
        role = _ROLES.get(raw_role) if isinstance(raw_role, str) else None

        if role is MessageRole.SYSTEM:
            system_parts.append(content)
        elif role is MessageRole.USER:
            prompt_parts.append(content)
        elif role is MessageRole.ASSISTANT:
            prompt_parts.append(format_previous_response(content))
        else:
            logger.debug(f"Skipping message #{index} with unsupported role {raw_role!r}")

    return ConvertedMessages(
        prompt=PROMPT_SEPARATOR.join(prompt_parts).strip(),
        system_prompt=SYSTEM_PROMPT_SEPARATOR.join(system_parts) if system_parts else None,
    )
