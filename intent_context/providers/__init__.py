"""Intent providers and the registry that arbitrates among them."""

from intent_context.providers.base import BaseProvider, IntentBundle
from intent_context.providers.registry import ProviderRegistry
from intent_context.providers.antigravity import AntigravityProvider
from intent_context.providers.claude_code import ClaudeCodeProvider
from intent_context.providers.cursor import CursorProvider
from intent_context.providers.aider import AiderProvider

__all__ = [
    "BaseProvider",
    "IntentBundle",
    "ProviderRegistry",
    "AntigravityProvider",
    "ClaudeCodeProvider",
    "CursorProvider",
    "AiderProvider",
]
