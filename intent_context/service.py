"""Entry point for collecting intent context."""

import logging
from typing import Optional
from intent_context.config import IntentConfig
from intent_context.providers.base import IntentBundle
from intent_context.providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def build_registry(config: IntentConfig) -> ProviderRegistry:
    registry = ProviderRegistry(explicit_provider=config.explicit_provider)
    registry.auto_discover(config)
    return registry


async def get_intent_context(config: Optional[IntentConfig] = None) -> Optional[IntentBundle]:
    """
    Collect intent from whichever AI coding assistant left artifacts.

    Args:
        config: Provider configuration (defaults to IntentConfig.from_env())

    Returns:
        IntentBundle, or None if no provider detected
    """
    if config is None:
        config = IntentConfig.from_env()

    return await build_registry(config).detect_and_collect()
