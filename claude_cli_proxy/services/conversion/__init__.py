"""
OpenAI chat request -> Claude CLI input conversion.

The three pieces are pure functions and safe to call from any thread or task:
  - model_resolver.extract_model: model string -> CLI model alias
  - message_converter.convert_messages: messages -> prompt + system prompt
  - cli_input.openai_to_cli: whole request -> CliInput
"""

from .model_resolver import (
    DEFAULT_MODEL,
    MODEL_MAP,
    PROVIDER_PREFIX,
    extract_model,
    list_model_ids,
)
from .message_converter import ConvertedMessages, convert_messages
from .cli_input import openai_to_cli

__all__ = [
    "DEFAULT_MODEL",
    "MODEL_MAP",
    "PROVIDER_PREFIX",
    "extract_model",
    "list_model_ids",
    "ConvertedMessages",
    "convert_messages",
    "openai_to_cli",
]
