"""Configuration for intent providers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Mapping

ENV_ANTIGRAVITY_BRAIN_DIR = "ANTIGRAVITY_BRAIN_DIR"
ENV_CLAUDE_CODE_DIR = "CLAUDE_CODE_DIR"
ENV_INTENT_PROVIDER = "INTENT_PROVIDER"


def default_brain_dir() -> Path:
    return Path.home() / ".gemini" / "antigravity" / "brain"


def default_claude_dir() -> Path:
    return Path.home() / ".claude"


@dataclass
class IntentConfig:
    """
    Artifact locations and provider selection.

    Each provider gets its root directory from here at construction
    time; providers never read the environment themselves.
    """

    antigravity_brain_dir: Path = field(default_factory=default_brain_dir)
    claude_dir: Path = field(default_factory=default_claude_dir)
    working_dir: Path = field(default_factory=Path.cwd)
    explicit_provider: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "IntentConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            IntentConfig with overrides applied
        """
        if environ is None:
            environ = os.environ

        brain_dir = environ.get(ENV_ANTIGRAVITY_BRAIN_DIR)
        claude_dir = environ.get(ENV_CLAUDE_CODE_DIR)
        explicit = (environ.get(ENV_INTENT_PROVIDER) or "").strip()

        return cls(
            antigravity_brain_dir=Path(brain_dir) if brain_dir else default_brain_dir(),
            claude_dir=Path(claude_dir) if claude_dir else default_claude_dir(),
            explicit_provider=explicit or None,
        )
