"""In-memory list of parts that need manual review."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProblemPart:
    """A part flagged for review.

    Attributes:
        part: Part identifier, e.g. a file path.
        reason: Why the part was flagged.
        configuration: CAD configuration name, if any.
    """

    part: str
    reason: str
    configuration: str = ""

    def display_text(self) -> str:
        name = f"{self.part} [{self.configuration}]" if self.configuration else self.part
        return f"{name}: {self.reason}"


class ProblemPartTracker:
    """Thread-safe collection of problem parts."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._problems: list[ProblemPart] = []

    def add(self, part: str, reason: str, configuration: str = "") -> bool:
        """Record a problem part.

        Returns:
            False when the part identifier or reason is blank.
        """
        if not part.strip() or not reason.strip():
            logger.warning("Problem part ignored: part and reason are required")
            return False
        with self._lock:
            self._problems.append(ProblemPart(part, reason, configuration))
        logger.info(f"Flagged for review: {part}: {reason}")
        return True

    def remove(self, item: ProblemPart) -> bool:
        with self._lock:
            before = len(self._problems)
            self._problems = [p for p in self._problems if p != item]
            return len(self._problems) != before

    def all(self) -> list[ProblemPart]:
        """Return a snapshot of the recorded problems."""
        with self._lock:
            return list(self._problems)

    def clear(self) -> None:
        with self._lock:
            self._problems.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._problems)

    def summary(self) -> str:
        """Multi-line summary sorted by part and configuration."""
        problems = sorted(
            self.all(), key=lambda p: (p.part.lower(), p.configuration.lower())
        )
        if not problems:
            return "No problems found."
        return "\n".join(p.display_text() for p in problems)
