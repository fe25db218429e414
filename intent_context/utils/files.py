"""Async filesystem helpers used by providers."""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


def is_hidden(path: Path, root: Path) -> bool:
    """Check if any component of path below root starts with a dot."""
    return any(part.startswith(".") for part in path.relative_to(root).parts)


async def path_exists(path: Path) -> bool:
    return await asyncio.to_thread(path.exists)


async def read_text_if_exists(path: Path) -> Optional[str]:
    """
    Read a UTF-8 text file.

    Returns:
        File content, or None if the file does not exist or cannot be read
    """
    def _read() -> Optional[str]:
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Skipping unreadable file {path}: {e}")
            return None

    return await asyncio.to_thread(_read)


async def list_subdirectories(root: Path) -> List[Path]:
    """List visible subdirectories of root."""
    def _list() -> List[Path]:
        if not root.is_dir():
            return []
        return [
            p for p in root.iterdir()
            if p.is_dir() and not is_hidden(p, root)
        ]

    return await asyncio.to_thread(_list)


async def find_files(root: Path, pattern: str) -> List[Path]:
    """Recursively glob for files under root, skipping dot-files and dot-directories."""
    def _find() -> List[Path]:
        if not root.is_dir():
            return []
        return [
            p for p in root.rglob(pattern)
            if p.is_file() and not is_hidden(p, root)
        ]

    return await asyncio.to_thread(_find)


def newest_by_mtime(paths: List[Path]) -> Optional[Path]:
    """Pick the most recently modified path (first listed wins ties)."""
    newest = None
    newest_mtime = None

    for path in paths:
        try:
            mtime = path.stat().st_mtime
        except OSError:
            # Vanished between listing and stat
            continue
        if newest_mtime is None or mtime > newest_mtime:
            newest = path
            newest_mtime = mtime

    return newest
