from .api_models import (
    ClaudeModel,
    MessageRole,
    OpenAIChatMessage,
    OpenAIChatRequest,
    CliInput,
    ModelCard,
    ModelList,
)

__all__ = [
    "ClaudeModel",
    "MessageRole",
    "OpenAIChatMessage",
    "OpenAIChatRequest",
    "CliInput",
    "ModelCard",
    "ModelList",
]
