"""
Event Model for the Banker's Safety Checker.

Defines trace events recorded while the safety search runs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class EventType(Enum):
    """Types of events in a safety evaluation."""
    PASS_START = "pass_start"
    PROCESS_FINISHED = "process_finished"
    VERDICT = "verdict"


@dataclass
class EvaluationEvent:
    """
    Represents a single event in a safety evaluation.

    Attributes:
        pass_number: Scan pass in which the event occurred (1-based)
        event_type: Type of event
        process_id: Process index involved (PROCESS_FINISHED only)
        work_before: Work vector before the event
        work_after: Work vector after the process released its allocation
        message: Human-readable description
    """
    pass_number: int
    event_type: EventType
    process_id: Optional[int] = None
    work_before: Optional[List[int]] = None
    work_after: Optional[List[int]] = None
    message: str = ""

    def __str__(self) -> str:
        """Format event for logging."""
        base = f"Pass {self.pass_number}"

        if self.event_type == EventType.PASS_START:
            return f"{base}: scan start (work={self.work_before})"
        elif self.event_type == EventType.PROCESS_FINISHED:
            return (
                f"{base}: P{self.process_id} can finish "
                f"(work {self.work_before} -> {self.work_after})"
            )
        elif self.event_type == EventType.VERDICT:
            return f"{base}: {self.message}"
        else:
            return f"{base} - {self.event_type.value}: {self.message}"


@dataclass
class EvaluationTrace:
    """Collection of evaluation events."""
    events: list = None

    def __post_init__(self):
        if self.events is None:
            self.events = []

    def add(self, event: EvaluationEvent) -> None:
        """Add an event to the trace."""
        self.events.append(event)

    def get_events_by_type(self, event_type: EventType) -> list:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]

    def get_events_by_pass(self, pass_number: int) -> list:
        """Get all events from a specific pass."""
        return [e for e in self.events if e.pass_number == pass_number]

    def finished_order(self) -> List[int]:
        """Process indices in the order they were judged completable."""
        return [e.process_id for e in self.get_events_by_type(EventType.PROCESS_FINISHED)]

    def work_history(self) -> List[List[int]]:
        """
        Every value the work vector took, starting from the initial availability.

        Returns:
            List of work vectors; empty if nothing was recorded
        """
        starts = self.get_events_by_type(EventType.PASS_START)
        if not starts:
            return []
        history = [starts[0].work_before]
        history.extend(e.work_after for e in self.get_events_by_type(EventType.PROCESS_FINISHED))
        return history

    def display(self) -> str:
        """Format all events for display."""
        return "\n".join(str(event) for event in self.events)
