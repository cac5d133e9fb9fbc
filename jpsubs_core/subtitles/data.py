# jpsubs_core/subtitles/data.py
"""
Shared subtitle types for the normalization passes.

Events are ``pysubs2.SSAEvent`` objects held in any mutable sequence
(normally a ``pysubs2.SSAFile``). All timing is INTEGER MILLISECONDS, as
pysubs2 stores it.

Passes mutate the sequence in place and return how many events they touched;
the orchestrator turns those counts into OperationRecords and a final
OperationResult.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import pysubs2

# Any indexable, mutable sequence of events: pysubs2.SSAFile or a plain list
EventList = MutableSequence[pysubs2.SSAEvent]


def is_dialogue(event: pysubs2.SSAEvent) -> bool:
    """Only dialogue events take part in normalization; comments pass through."""
    return not event.is_comment


def dialogue_count(events: EventList) -> int:
    return sum(1 for e in events if is_dialogue(e))


# =============================================================================
# Operation Tracking
# =============================================================================


@dataclass
class OperationRecord:
    """Record of one normalization pass."""

    operation: str
    timestamp: datetime
    parameters: dict[str, Any] = field(default_factory=dict)
    events_affected: int = 0
    events_before: int = 0
    events_after: int = 0
    summary: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "timestamp": self.timestamp.isoformat(),
            "parameters": self.parameters,
            "events_affected": self.events_affected,
            "events_before": self.events_before,
            "events_after": self.events_after,
            "summary": self.summary,
        }


@dataclass
class OperationResult:
    """Result of running the normalizer over one event collection."""

    success: bool
    operation: str
    events_affected: int = 0
    summary: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
