"""Provider registry for detecting and collecting intent."""

from typing import Any, Dict, List, Optional, TYPE_CHECKING
from intent_context.providers.base import BaseProvider, IntentBundle
import logging

if TYPE_CHECKING:
    from intent_context.config import IntentConfig

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Ordered registry of intent providers.

    Registration order is trial order. In auto mode the first provider
    that detects its artifacts and returns a bundle wins; when an
    explicit provider is set only that provider is consulted.
    """

    def __init__(self, explicit_provider: Optional[str] = None):
        """
        Initialize registry.

        Args:
            explicit_provider: Provider name to use exclusively, if any
        """
        self._providers: List[BaseProvider] = []
        self.explicit_provider = explicit_provider

    def register(self, provider: BaseProvider) -> None:
        """
        Append a provider to the trial order.

        Args:
            provider: Provider instance to register
        """
        if self.get_provider(provider.name) is not None:
            logger.warning(f"Provider {provider.name} already registered, earlier one takes precedence")

        self._providers.append(provider)
        logger.info(f"[Registry] Registered provider: {provider.name}")

    def get_provider(self, name: str) -> Optional[BaseProvider]:
        """Get the first provider registered under name."""
        for provider in self._providers:
            if provider.name == name:
                return provider
        return None

    def get_all_providers(self) -> List[BaseProvider]:
        """Get all registered providers in trial order."""
        return list(self._providers)

    async def detect_and_collect(self) -> Optional[IntentBundle]:
        """
        Detect and collect intent from registered providers.

        Returns:
            IntentBundle from the selected provider, or None if none found
        """
        if self.explicit_provider:
            logger.info(f"[Registry] Using explicit provider: {self.explicit_provider}")
            return await self._collect_from(self.explicit_provider)

        logger.info("[Registry] Auto-detecting intent providers...")

        for provider in self._providers:
            try:
                if not await provider.detect():
                    continue

                logger.info(f"[Registry] Detected: {provider.name}")
                bundle = await provider.collect()

                if bundle is not None:
                    return bundle

                logger.warning(f"[Registry] {provider.name} detected but collection failed")
            except Exception as e:
                logger.error(f"[Registry] Error with provider {provider.name}: {e}")

        logger.info("[Registry] No intent providers detected")
        return None

    async def _collect_from(self, name: str) -> Optional[IntentBundle]:
        provider = self.get_provider(name)

        if provider is None:
            logger.error(f"[Registry] Provider not found: {name}")
            return None

        try:
            if not await provider.detect():
                logger.warning(f"[Registry] Provider {name} not detected")
                return None

            return await provider.collect()
        except Exception as e:
            logger.error(f"[Registry] Error collecting from {name}: {e}")
            return None

    def auto_discover(self, config: "IntentConfig") -> None:
        """
        Register the built-in providers in their canonical order.

        Args:
            config: Artifact locations for each provider
        """
        from intent_context.providers.antigravity import AntigravityProvider
        from intent_context.providers.claude_code import ClaudeCodeProvider
        from intent_context.providers.cursor import CursorProvider
        from intent_context.providers.aider import AiderProvider

        providers = [
            AntigravityProvider(config.antigravity_brain_dir),
            ClaudeCodeProvider(config.claude_dir),
            CursorProvider(),
            AiderProvider(config.working_dir),
        ]

        for provider in providers:
            self.register(provider)

        logger.info(f"Auto-discovered {len(providers)} providers")

    async def generate_manifest(self) -> Dict[str, Any]:
        """
        Describe registered providers and whether their artifacts exist.

        Returns:
            Dictionary with provider details in trial order
        """
        manifest = {
            "explicit_provider": self.explicit_provider,
            "providers": [],
            "detected": 0,
        }

        for provider in self._providers:
            try:
                detected = await provider.detect()
            except Exception as e:
                logger.error(f"[Registry] Error detecting {provider.name}: {e}")
                detected = False

            manifest["providers"].append({
                "name": provider.name,
                "description": provider.description,
                "detected": detected,
            })
            if detected:
                manifest["detected"] += 1

        return manifest
