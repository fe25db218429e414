"""Utility modules for intent collection."""

from intent_context.utils.logging import setup_logging
from intent_context.utils.markdown import (
    dedupe,
    extract_checklist,
    extract_section,
    find_checklist_lines,
)

__all__ = [
    "setup_logging",
    "dedupe",
    "extract_checklist",
    "extract_section",
    "find_checklist_lines",
]
