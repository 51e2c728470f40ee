"""
Request adapter: OpenAI chat request -> Claude CLI input.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from ...models.api_models import CliInput, OpenAIChatRequest
from .message_converter import convert_messages
from .model_resolver import extract_model


def openai_to_cli(request: Union[OpenAIChatRequest, Mapping[str, Any]]) -> CliInput:
    """
    openai_to_cli(request) -> CliInput
    A plain mapping is validated into OpenAIChatRequest first; pydantic's
    ValidationError propagates. The OpenAI `user` field is passed through
    unchanged as the CLI session id.
    """
    if not isinstance(request, OpenAIChatRequest):
        request = OpenAIChatRequest.model_validate(request)

    converted = convert_messages(request.messages)
    return CliInput(
        prompt=converted.prompt,
        model=extract_model(request.model),
        session_id=request.user,
        system_prompt=converted.system_prompt,
    )
