"""Claude Code provider reading JSONL conversation logs."""

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from intent_context.providers.base import BaseProvider, IntentBundle
from intent_context.utils.files import (
    find_files,
    newest_by_mtime,
    path_exists,
    read_text_if_exists,
)
from intent_context.utils.markdown import dedupe, find_checklist_lines

logger = logging.getLogger(__name__)

MAX_GOALS = 5
MAX_PHRASES = 10
MAX_GOAL_MESSAGE_LENGTH = 500
MAX_SUMMARY_LENGTH = 1000
SUMMARY_TRUNCATE = 500
RAW_NOTES_MESSAGES = 20
RAW_NOTES_TRUNCATE = 500

DECISION_PATTERNS = [
    re.compile(r"I(?:'ll| will) use\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"decided to\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"choosing\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"going with\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"approach[:\s]+(.+?)(?:\.|$)", re.IGNORECASE),
]

TRADEOFF_PATTERNS = [
    re.compile(r"trade-?off[:\s]+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"caveat[:\s]+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"note that\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"however[,:\s]+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"downside[:\s]+(.+?)(?:\.|$)", re.IGNORECASE),
]

CONSTRAINT_PATTERNS = [
    re.compile(r"must\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"should\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"need to\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"require[ds]?\s+(.+?)(?:\.|$)", re.IGNORECASE),
    re.compile(r"constraint[:\s]+(.+?)(?:\.|$)", re.IGNORECASE),
]


def extract_text_content(content: Any) -> str:
    """
    Normalize message content to plain text.

    Content may be a string, a list of typed blocks (only `text` blocks
    are kept, joined by newlines), or an object with a `text` field.
    Anything else yields an empty string.
    """
    if isinstance(content, str):
        return content

    if isinstance(content, list):
        return "\n".join(
            block["text"]
            for block in content
            if isinstance(block, dict)
            and block.get("type") == "text"
            and isinstance(block.get("text"), str)
        )

    if isinstance(content, dict) and isinstance(content.get("text"), str):
        return content["text"]

    return ""


def parse_jsonl(content: str) -> List[Dict[str, Any]]:
    """Parse JSON Lines, skipping blank, invalid and non-object lines."""
    messages = []

    for line_number, line in enumerate(content.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            parsed = json.loads(line)
        except (ValueError, RecursionError):
            logger.debug(f"Skipping invalid JSON on line {line_number}")
            continue
        if isinstance(parsed, dict):
            messages.append(parsed)

    return messages


def message_text(message: Dict[str, Any]) -> str:
    """Text of a user/assistant record's `message.content`."""
    body = message.get("message")
    if not isinstance(body, dict) or not body.get("content"):
        return ""
    return extract_text_content(body["content"])


def match_phrases(texts: Iterable[str], patterns: List[re.Pattern]) -> List[str]:
    """Run every pattern over every text and keep captures of 11-199 chars."""
    found = []

    for text in texts:
        for pattern in patterns:
            for match in pattern.finditer(text):
                phrase = (match.group(1) or "").strip()
                if 10 < len(phrase) < 200:
                    found.append(phrase)

    return dedupe(found, limit=MAX_PHRASES)


class ClaudeCodeProvider(BaseProvider):
    """
    Provider for Claude Code sessions.

    Layout: <claude_dir>/projects/<project>/<session>.jsonl
    The most recently modified session log is used.
    """

    def __init__(self, claude_dir: Path):
        """
        Initialize Claude Code provider.

        Args:
            claude_dir: Claude Code home directory (usually ~/.claude)
        """
        self.claude_dir = Path(claude_dir)
        self.projects_dir = self.claude_dir / "projects"

    @property
    def name(self) -> str:
        return "claude-code"

    @property
    def description(self) -> str:
        return "Claude Code conversation logs and todo lists"

    async def detect(self) -> bool:
        try:
            if not await path_exists(self.projects_dir):
                return False
            session_files = await find_files(self.projects_dir, "*.jsonl")
            return len(session_files) > 0
        except Exception as e:
            logger.debug(f"Claude Code detection failed: {e}")
            return False

    async def collect(self) -> Optional[IntentBundle]:
        try:
            session_files = await find_files(self.projects_dir, "*.jsonl")
            latest = await asyncio.to_thread(newest_by_mtime, session_files)
            if latest is None:
                return None

            logger.info(f"[Claude Code] Using session: {latest.stem}")

            content = await read_text_if_exists(latest)
            bundle = self.build_bundle(parse_jsonl(content or ""))
            logger.info(f"[Claude Code] Collected intent (confidence: {bundle.confidence:.2f})")
            return bundle

        except Exception as e:
            logger.error(f"[Claude Code] Error collecting intent: {e}")
            return None

    def build_bundle(self, messages: List[Dict[str, Any]]) -> IntentBundle:
        """Parse already-loaded session records into a bundle."""
        return IntentBundle(
            goals=self.extract_goals(messages),
            tasks=self.extract_tasks(messages),
            decisions=self.extract_decisions(messages),
            tradeoffs=self.extract_tradeoffs(messages),
            constraints=self.extract_constraints(messages),
            raw_notes=self.build_raw_notes(messages),
            confidence=self.calculate_confidence(messages),
            source=self.name,
        )

    def extract_goals(self, messages: List[Dict[str, Any]]) -> List[str]:
        """
        Extract goals from the opening user request and session summaries.

        The first short user message is usually the goal; summary records
        restate it after context compaction.
        """
        goals = []

        for msg in messages:
            msg_type = msg.get("type")

            if msg_type == "user":
                content = message_text(msg)
                if content and not goals and len(content) < MAX_GOAL_MESSAGE_LENGTH:
                    goals.append(content)

            elif msg_type == "summary" and msg.get("summary"):
                summary = msg["summary"]
                if not isinstance(summary, str):
                    summary = json.dumps(summary, separators=(",", ":"), ensure_ascii=False)
                if len(summary) < MAX_SUMMARY_LENGTH:
                    goals.append(summary[:SUMMARY_TRUNCATE])

        return goals[:MAX_GOALS]

    def extract_tasks(self, messages: List[Dict[str, Any]]) -> List[str]:
        """Extract tasks from todo lists and checklists in tool results."""
        tasks = []
        seen = set()

        for msg in messages:
            todos = msg.get("todos")
            if isinstance(todos, list):
                for todo in todos:
                    if not isinstance(todo, dict):
                        continue
                    text = todo.get("content") or todo.get("task") or todo.get("description")
                    if not text or not isinstance(text, str) or text in seen:
                        continue
                    prefix = "[x]" if todo.get("status") == "completed" else "[ ]"
                    tasks.append(f"{prefix} {text}")
                    seen.add(text)

            if msg.get("type") == "tool_result" and msg.get("content"):
                raw = msg["content"]
                text = extract_text_content(raw) or json.dumps(raw, ensure_ascii=False)
                for line in find_checklist_lines(text):
                    if line not in seen:
                        tasks.append(line)
                        seen.add(line)

        return tasks

    def extract_decisions(self, messages: List[Dict[str, Any]]) -> List[str]:
        return match_phrases(self._texts_of(messages, "assistant"), DECISION_PATTERNS)

    def extract_tradeoffs(self, messages: List[Dict[str, Any]]) -> List[str]:
        return match_phrases(self._texts_of(messages, "assistant"), TRADEOFF_PATTERNS)

    def extract_constraints(self, messages: List[Dict[str, Any]]) -> List[str]:
        return match_phrases(self._texts_of(messages, "user"), CONSTRAINT_PATTERNS)

    def build_raw_notes(self, messages: List[Dict[str, Any]]) -> str:
        """Render the tail of the conversation as User/Assistant lines."""
        notes = ["=== Claude Code Session ===\n"]

        for msg in messages[-RAW_NOTES_MESSAGES:]:
            msg_type = msg.get("type")
            if msg_type == "user":
                label = "User"
            elif msg_type == "assistant":
                label = "Assistant"
            else:
                continue
            content = message_text(msg)
            if content:
                notes.append(f"{label}: {content[:RAW_NOTES_TRUNCATE]}")

        return "\n\n".join(notes)

    def calculate_confidence(self, messages: List[Dict[str, Any]]) -> float:
        if not messages:
            return 0.0

        confidence = 0.3

        if len(messages) > 5:
            confidence += 0.2
        if len(messages) > 20:
            confidence += 0.1

        if any(isinstance(m.get("todos"), list) and m["todos"] for m in messages):
            confidence += 0.2
        if any(m.get("type") == "user" for m in messages):
            confidence += 0.1
        if any(m.get("type") == "assistant" for m in messages):
            confidence += 0.1

        return min(1.0, confidence)

    @staticmethod
    def _texts_of(messages: List[Dict[str, Any]], msg_type: str) -> List[str]:
        return [message_text(m) for m in messages if m.get("type") == msg_type]
