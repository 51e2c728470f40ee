from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

# --- Claude CLI side ---

ClaudeModel = Literal["opus", "sonnet", "haiku"]


class MessageRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


# --- OpenAI request side ---

class OpenAIChatMessage(BaseModel):
    # role is kept as a plain string; roles outside MessageRole are dropped during conversion
    role: str
    content: Optional[str] = ""
    model_config = {"populate_by_name": True, "frozen": True}


class OpenAIChatRequest(BaseModel):
    model: str
    messages: List[OpenAIChatMessage]
    user: Optional[str] = None
    model_config = {"populate_by_name": True, "frozen": True}


class CliInput(BaseModel):
    prompt: str
    model: ClaudeModel
    session_id: Optional[str] = Field(None, alias="sessionId")
    system_prompt: Optional[str] = Field(None, alias="systemPrompt")
    model_config = {"populate_by_name": True, "frozen": True}

    def to_payload(self) -> dict:
        """camelCase dict with absent optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- /v1/models ---

class ModelCard(BaseModel):
    id: str
    object: Literal["model"] = "model"
    owned_by: str = "anthropic"
    alias: ClaudeModel


class ModelList(BaseModel):
    object: Literal["list"] = "list"
    data: List[ModelCard]
