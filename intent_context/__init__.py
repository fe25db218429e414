"""Collect developer intent from AI coding assistant sessions."""

from intent_context.config import IntentConfig
from intent_context.prompt import build_context_prompt
from intent_context.providers import (
    BaseProvider,
    IntentBundle,
    ProviderRegistry,
    AntigravityProvider,
    ClaudeCodeProvider,
    CursorProvider,
    AiderProvider,
)
from intent_context.service import get_intent_context, build_registry
from intent_context.utils.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    "IntentConfig",
    "IntentBundle",
    "BaseProvider",
    "ProviderRegistry",
    "AntigravityProvider",
    "ClaudeCodeProvider",
    "CursorProvider",
    "AiderProvider",
    "build_context_prompt",
    "build_registry",
    "get_intent_context",
    "setup_logging",
]
