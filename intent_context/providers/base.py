"""Base provider contract and the shared intent bundle."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from typing import List, Optional, Any, Dict


@dataclass
class IntentBundle:
    """Normalized intent collected from one AI assistant session."""
    goals: List[str] = field(default_factory=list)
    tasks: List[str] = field(default_factory=list)
    decisions: List[str] = field(default_factory=list)
    tradeoffs: List[str] = field(default_factory=list)
    constraints: List[str] = field(default_factory=list)
    raw_notes: str = ""
    confidence: float = 0.0  # 0..1, heuristic
    source: str = ""

    def has_structured_data(self) -> bool:
        """Check if any structured category was populated."""
        return any([
            self.goals,
            self.tasks,
            self.decisions,
            self.tradeoffs,
            self.constraints,
        ])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class BaseProvider(ABC):
    """
    Abstract base class for all intent providers.

    A provider knows where one AI coding assistant keeps its session
    artifacts. It can cheaply detect them and collect them into an
    IntentBundle. Neither method raises: failures become False or None.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique provider name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable provider description."""
        pass

    @abstractmethod
    async def detect(self) -> bool:
        """
        Check whether this provider's artifacts are present.

        Returns:
            True if artifacts were found, False otherwise (including on error)
        """
        pass

    @abstractmethod
    async def collect(self) -> Optional[IntentBundle]:
        """
        Collect and normalize intent from the most recent session.

        Returns:
            IntentBundle with normalized intent data, or None if collection fails
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
