"""Antigravity provider reading task and plan markdown from the brain directory."""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional
from intent_context.providers.base import BaseProvider, IntentBundle
from intent_context.utils.files import (
    list_subdirectories,
    newest_by_mtime,
    path_exists,
    read_text_if_exists,
)
from intent_context.utils.markdown import (
    extract_alerts,
    extract_checklist,
    extract_section,
    first_heading,
    heading_pattern,
)

logger = logging.getLogger(__name__)

TASK_FILE = "task.md"
PLAN_FILE = "implementation_plan.md"

SUMMARY_HEADING = heading_pattern("Summary")
DECISIONS_HEADING = heading_pattern("User Review Required", "Decisions")
TRADEOFFS_HEADING = heading_pattern("Trade-?offs")
CONSTRAINTS_HEADING = heading_pattern("Requirements", "Constraints")


class AntigravityProvider(BaseProvider):
    """
    Provider for Antigravity agent sessions.

    Layout: <brain_dir>/<session_id>/{task.md, implementation_plan.md}
    The most recently modified session directory is used.
    """

    def __init__(self, brain_dir: Path):
        """
        Initialize Antigravity provider.

        Args:
            brain_dir: Directory holding one subdirectory per session
        """
        self.brain_dir = Path(brain_dir)

    @property
    def name(self) -> str:
        return "antigravity"

    @property
    def description(self) -> str:
        return "Antigravity task checklists and implementation plans"

    async def detect(self) -> bool:
        try:
            if not await path_exists(self.brain_dir):
                return False
            sessions = await list_subdirectories(self.brain_dir)
            return len(sessions) > 0
        except Exception as e:
            logger.debug(f"Antigravity detection failed: {e}")
            return False

    async def collect(self) -> Optional[IntentBundle]:
        try:
            sessions = await list_subdirectories(self.brain_dir)
            latest = await asyncio.to_thread(newest_by_mtime, sessions)
            if latest is None:
                return None

            logger.info(f"[Antigravity] Using session: {latest.name}")

            task_content = await read_text_if_exists(latest / TASK_FILE)
            plan_content = await read_text_if_exists(latest / PLAN_FILE)

            # Existence counts, not content: an empty task.md is still an artifact
            artifact_count = sum(
                1 for content in (task_content, plan_content) if content is not None
            )
            task_content = task_content or ""
            plan_content = plan_content or ""

            bundle = self.build_bundle(task_content, plan_content, artifact_count)
            logger.info(f"[Antigravity] Collected intent (confidence: {bundle.confidence:.2f})")
            return bundle

        except Exception as e:
            logger.error(f"[Antigravity] Error collecting intent: {e}")
            return None

    def build_bundle(
        self,
        task_content: str,
        plan_content: str,
        artifact_count: int
    ) -> IntentBundle:
        """Parse already-loaded artifacts into a bundle."""
        return IntentBundle(
            goals=self.extract_goals(plan_content),
            tasks=self.extract_tasks(task_content),
            decisions=self.extract_decisions(plan_content),
            tradeoffs=self.extract_tradeoffs(plan_content),
            constraints=self.extract_constraints(plan_content),
            raw_notes=self.build_raw_notes(task_content, plan_content),
            confidence=self.calculate_confidence(artifact_count, task_content, plan_content),
            source=self.name,
        )

    def extract_goals(self, plan_content: str) -> List[str]:
        """First `# ` heading plus the lines of the `## Summary` section."""
        if not plan_content:
            return []

        goals = []
        heading = first_heading(plan_content)
        if heading:
            goals.append(heading)
        goals.extend(extract_section(plan_content, SUMMARY_HEADING))
        return [goal for goal in goals if goal]

    def extract_tasks(self, task_content: str) -> List[str]:
        if not task_content:
            return []
        return extract_checklist(task_content)

    def extract_decisions(self, plan_content: str) -> List[str]:
        if not plan_content:
            return []
        return extract_section(plan_content, DECISIONS_HEADING, skip_blockquotes=True)

    def extract_tradeoffs(self, plan_content: str) -> List[str]:
        """Trade-offs section lines, then the body of each alert callout."""
        if not plan_content:
            return []
        tradeoffs = extract_section(plan_content, TRADEOFFS_HEADING)
        tradeoffs.extend(extract_alerts(plan_content))
        return tradeoffs

    def extract_constraints(self, plan_content: str) -> List[str]:
        if not plan_content:
            return []
        return extract_section(plan_content, CONSTRAINTS_HEADING)

    def build_raw_notes(self, task_content: str, plan_content: str) -> str:
        notes = []

        if task_content:
            notes.append("=== Task Status ===")
            notes.append(task_content)

        if plan_content:
            notes.append("\n=== Implementation Plan ===")
            notes.append(plan_content)

        return "\n".join(notes)

    def calculate_confidence(
        self,
        artifact_count: int,
        task_content: str,
        plan_content: str
    ) -> float:
        """
        Score artifact availability and size.

        Args:
            artifact_count: Number of artifact files found (0-2)
            task_content: Content of task.md
            plan_content: Content of implementation_plan.md

        Returns:
            Confidence between 0 and 1
        """
        if artifact_count == 0:
            return 0.0

        confidence = artifact_count / 2

        total_length = len(task_content) + len(plan_content)
        if total_length > 1000:
            confidence = min(1.0, confidence + 0.1)

        if total_length < 100:
            confidence *= 0.5

        return confidence
