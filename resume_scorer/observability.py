"""Observability for scoring requests - logging and per-evaluation events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install a stream handler on the ``resume_scorer`` logger once."""
    logger = logging.getLogger("resume_scorer")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


@dataclass
class ScoringEvent:
    """A single evaluation performed by an outer layer."""

    timestamp: datetime
    kind: str  # "score", "skills_gap", "salary", "error"
    duration_ms: float
    headline: Optional[float] = None
    data: Optional[Dict[str, Any]] = None


class ScoringObserver:
    """
    Collects scoring events and logs one line per evaluation.

    The domain never logs; the web, tool and CLI layers report through this.
    """

    def __init__(self, source: str = "api"):
        self.source = source
        self.events: List[ScoringEvent] = []
        self.logger = logging.getLogger(f"resume_scorer.{source}")

    def log_evaluation(self, kind: str, duration_ms: float, headline: Optional[float] = None, **data: Any) -> None:
        """
        Record a completed evaluation.

        Args:
            kind: Which report was produced ("score", "skills_gap", "salary")
            duration_ms: Computation time in milliseconds
            headline: The report's headline number (overall score, match %, mid salary)
        """
        self.events.append(
            ScoringEvent(
                timestamp=datetime.now(),
                kind=kind,
                duration_ms=duration_ms,
                headline=headline,
                data=data or None,
            )
        )
        self.logger.info("evaluation kind=%s headline=%s duration_ms=%.2f", kind, headline, duration_ms)

    def log_error(self, kind: str, error: Exception) -> None:
        self.events.append(
            ScoringEvent(
                timestamp=datetime.now(),
                kind="error",
                duration_ms=0.0,
                data={"operation": kind, "error": str(error), "error_type": type(error).__name__},
            )
        )
        self.logger.warning("evaluation kind=%s rejected: %s", kind, error)

    def get_summary(self) -> Dict[str, Any]:
        """Counts and mean duration per evaluation kind."""
        summary: Dict[str, Any] = {"total_events": len(self.events), "errors": 0, "by_kind": {}}
        for event in self.events:
            if event.kind == "error":
                summary["errors"] += 1
                continue
            bucket = summary["by_kind"].setdefault(event.kind, {"count": 0, "total_duration_ms": 0.0})
            bucket["count"] += 1
            bucket["total_duration_ms"] += event.duration_ms
        for bucket in summary["by_kind"].values():
            bucket["avg_duration_ms"] = bucket["total_duration_ms"] / bucket["count"]
        return summary
