"""
Data models for calendar widget events.

Raw widget input uses a TypedDict; the resolved event is a frozen dataclass
so both encoders work from one immutable representation.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TypedDict


class WidgetAttributes(TypedDict, total=False):
    """Raw data attributes read from a calendar widget."""
    title: str
    start: str
    end: str
    location: str
    description: str


@dataclass(frozen=True)
class ResolvedEvent:
    """
    Canonical event with explicit absolute bounds.

    start/end are timezone-aware instants. There is no all-day flag: all-day
    input is resolved to 00:00 on the first day through 23:59 on the last.
    """

    title: str
    start: datetime
    end: datetime
    location: str = ""
    description: str = ""

    def __post_init__(self):
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("ResolvedEvent requires timezone-aware instants")
        if self.end < self.start:
            raise ValueError(f"Event end {self.end} is before start {self.start}")

    @property
    def duration(self) -> timedelta:
        return self.end - self.start
