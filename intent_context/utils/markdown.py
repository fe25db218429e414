"""Markdown parsing helpers shared by intent providers."""

import re
from typing import Iterable, List, Optional

# - [ ] pending, - [x] done, - [/] in progress
CHECKLIST_PATTERN = re.compile(r"^[\s-]*\[[\sx/]\]\s+(.+)$")
CHECKLIST_LINE_PATTERN = re.compile(r"^[\s-]*\[[\sx/]\]\s+.+$", re.MULTILINE)

ALERT_PATTERN = re.compile(r">\s*\[!(IMPORTANT|WARNING|CAUTION)\]")


def heading_pattern(*titles: str) -> re.Pattern:
    """Build a case-insensitive matcher for a `## <title>` heading."""
    alternatives = "|".join(titles)
    return re.compile(rf"^##\s+({alternatives})", re.IGNORECASE)


def first_heading(content: str) -> Optional[str]:
    """Return the text of the first top-level `# ` heading."""
    for line in content.split("\n"):
        if line.startswith("# "):
            return re.sub(r"^#\s+", "", line).strip()
    return None


def extract_section(
    content: str,
    heading: re.Pattern,
    skip_blockquotes: bool = False
) -> List[str]:
    """
    Collect the body lines of the first section whose heading matches.

    The section opens on a matching heading and closes on the next line
    starting with `##`. Empty lines and heading lines are skipped; the
    rest are returned trimmed.

    Args:
        content: Markdown document
        heading: Compiled heading matcher (see heading_pattern)
        skip_blockquotes: Also skip lines starting with `>`

    Returns:
        Trimmed section lines in document order
    """
    collected = []
    inside = False

    for line in content.split("\n"):
        if heading.match(line):
            inside = True
            continue
        if not inside:
            continue
        if line.startswith("##"):
            break
        if not line.strip() or line.startswith("#"):
            continue
        if skip_blockquotes and line.startswith(">"):
            continue
        collected.append(line.strip())

    return collected


def extract_alerts(content: str) -> List[str]:
    """Return the line following each IMPORTANT/WARNING/CAUTION alert."""
    lines = content.split("\n")
    alerts = []

    for index, line in enumerate(lines):
        if not ALERT_PATTERN.search(line):
            continue
        if index + 1 < len(lines):
            body = re.sub(r"^>\s*", "", lines[index + 1]).strip()
            if body:
                alerts.append(body)

    return alerts


def extract_checklist(content: str) -> List[str]:
    """Return checklist item texts with their completion markers dropped."""
    tasks = []
    for line in content.split("\n"):
        match = CHECKLIST_PATTERN.match(line)
        if match:
            tasks.append(match.group(1).strip())
    return tasks


def find_checklist_lines(text: str) -> List[str]:
    """Return whole checklist lines (marker included) found anywhere in text."""
    return [match.strip() for match in CHECKLIST_LINE_PATTERN.findall(text)]


def dedupe(items: Iterable[str], limit: Optional[int] = None) -> List[str]:
    """Exact-text, order-preserving dedup with an optional cap."""
    seen = set()
    unique = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    if limit is not None:
        return unique[:limit]
    return unique
