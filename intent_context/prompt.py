"""Render an intent bundle into a prompt section."""

from typing import List, Optional
from intent_context.providers.base import IntentBundle

NO_CONTEXT_MESSAGE = "No active AI session context found. Rely solely on the diff."


def _bullets(title: str, items: List[str]) -> str:
    lines = "\n".join(f"- {item}" for item in items)
    return f"{title}:\n{lines}\n\n"


def build_context_prompt(bundle: Optional[IntentBundle]) -> str:
    """
    Format intent for an LLM prompt.

    Raw notes are only included when no structured category has content.
    """
    if bundle is None:
        return NO_CONTEXT_MESSAGE

    prompt = f"AI CONTEXT (Source: {bundle.source}, Confidence: {bundle.confidence:.2f}):\n\n"

    sections = [
        ("Goals", bundle.goals),
        ("Tasks", bundle.tasks),
        ("Decisions", bundle.decisions),
        ("Trade-offs", bundle.tradeoffs),
        ("Constraints", bundle.constraints),
    ]
    for title, items in sections:
        if items:
            prompt += _bullets(title, items)

    if not bundle.has_structured_data() and bundle.raw_notes:
        prompt += "Additional Context:\n"
        prompt += bundle.raw_notes
        prompt += "\n"

    return prompt.strip()
