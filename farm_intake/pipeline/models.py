"""
Data models for a single pipeline run.

Request is the immutable input; ProcessContext accumulates the flags set by
annotating stages and derives the decorated names recorded by the finalizer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class StageResult(str, Enum):
    """Signal returned by every stage."""
    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True)
class Request:
    """Incoming farm-supply request."""
    article_name: str
    farmer_name: str
    date: str
    quantity: int

    @property
    def request_id(self) -> str:
        return f"{self.article_name}/{self.farmer_name}/{self.date}"


@dataclass
class ProcessContext:
    """Mutable annotation state for one run. Flags only ever go from False to True."""

    request: Request
    high_priority: bool = False
    weekend: bool = False
    non_regular: bool = False
    non_active: bool = False

    def mark_high_priority(self) -> None:
        self.high_priority = True

    def mark_weekend(self) -> None:
        self.weekend = True

    def mark_non_regular(self) -> None:
        self.non_regular = True

    def mark_non_active(self) -> None:
        self.non_active = True

    def article_name(self) -> str:
        name = self.request.article_name
        if self.non_regular:
            name += "-NR"
        if self.high_priority:
            name += "-HP"
        if self.weekend:
            name += "-weekend"
        return name

    def farmer_name(self) -> str:
        name = self.request.farmer_name
        if self.non_regular:
            name += "-NR"
        if self.non_active:
            name += "-NA"
        if self.weekend:
            name += "-weekend"
        return name

    def date(self) -> str:
        d = self.request.date
        if self.non_regular:
            d += "-NR"
        return d

    def quantity(self) -> int:
        return self.request.quantity

    def flags(self) -> dict[str, bool]:
        return {
            "non_regular": self.non_regular,
            "high_priority": self.high_priority,
            "weekend": self.weekend,
            "non_active": self.non_active,
        }


@dataclass
class PipelineRun:
    """Outcome of running the stage chain once."""
    executed: list[str] = field(default_factory=list)
    stopped_by: Optional[str] = None
    completed: bool = False
