"""Aider provider: detects aider dotfiles, collection not implemented."""

import logging
from pathlib import Path
from typing import Optional
from intent_context.providers.base import BaseProvider, IntentBundle
from intent_context.utils.files import path_exists

logger = logging.getLogger(__name__)

AIDER_FILES = [
    ".aider.chat.history.md",
    ".aider.input.history",
    ".aider",
]


class AiderProvider(BaseProvider):
    """Provider for Aider sessions in the working directory."""

    def __init__(self, working_dir: Path):
        self.working_dir = Path(working_dir)

    @property
    def name(self) -> str:
        return "aider"

    @property
    def description(self) -> str:
        return "Aider chat history dotfiles (detection only)"

    async def detect(self) -> bool:
        try:
            for filename in AIDER_FILES:
                if await path_exists(self.working_dir / filename):
                    return True
            return False
        except Exception as e:
            logger.debug(f"Aider detection failed: {e}")
            return False

    async def collect(self) -> Optional[IntentBundle]:
        # TODO: parse .aider.chat.history.md into goals and decisions
        return None
