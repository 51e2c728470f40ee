"""
Model resolver: maps whatever model id an OpenAI client sends onto one of the
aliases the Claude CLI understands (opus / sonnet / haiku).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Tuple

from ...models.api_models import ClaudeModel

logger = logging.getLogger("ClaudeCliProxy.Conversion.ModelResolver")

PROVIDER_PREFIX = "claude-code-cli/"
DEFAULT_MODEL: ClaudeModel = "opus"

MODEL_MAP: Mapping[str, ClaudeModel] = MappingProxyType({
    # Direct model names
    "claude-opus-4": "opus",
    "claude-sonnet-4": "sonnet",
    "claude-haiku-4": "haiku",
    # With provider prefix
    PROVIDER_PREFIX + "claude-opus-4": "opus",
    PROVIDER_PREFIX + "claude-sonnet-4": "sonnet",
    PROVIDER_PREFIX + "claude-haiku-4": "haiku",
    # Aliases
    "opus": "opus",
    "sonnet": "sonnet",
    "haiku": "haiku",
})


def _match_exact(model: str) -> Optional[ClaudeModel]:
    return MODEL_MAP.get(model)


def _match_without_prefix(model: str) -> Optional[ClaudeModel]:
    if not model.startswith(PROVIDER_PREFIX):
        return None
    return MODEL_MAP.get(model[len(PROVIDER_PREFIX):])


# Tried in order; the first non-None result wins.
MATCH_STRATEGIES: Tuple[Callable[[str], Optional[ClaudeModel]], ...] = (
    _match_exact,
    _match_without_prefix,
)


def extract_model(model: Optional[str]) -> ClaudeModel:
    """
    extract_model(model: str) -> ClaudeModel
    Resolve a requested model id to a CLI alias. Never raises: anything that
    cannot be matched falls back to DEFAULT_MODEL.
    """
    model = model or ""
    for strategy in MATCH_STRATEGIES:
        alias = strategy(model)
        if alias is not None:
            return alias

    logger.debug(f"Unknown model '{model}', falling back to '{DEFAULT_MODEL}'")
    return DEFAULT_MODEL


def list_model_ids() -> List[str]:
    """All model ids accepted verbatim, in table order."""
    return list(MODEL_MAP.keys())
