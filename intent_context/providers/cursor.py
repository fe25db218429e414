"""Cursor provider placeholder."""

from typing import Optional
from intent_context.providers.base import BaseProvider, IntentBundle


class CursorProvider(BaseProvider):
    """
    Provider for Cursor IDE sessions.

    Not implemented yet: never detects and never collects. Candidate
    sources are the workspace `.cursorrules` file and Cursor's chat
    history database.
    """

    @property
    def name(self) -> str:
        return "cursor"

    @property
    def description(self) -> str:
        return "Cursor rules and chat history (not implemented)"

    async def detect(self) -> bool:
        return False

    async def collect(self) -> Optional[IntentBundle]:
        return None
