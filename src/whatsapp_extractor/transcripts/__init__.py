"""Data model for parsed WhatsApp chat exports."""

from __future__ import annotations

from dataclasses import dataclass

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class Message:
    """A single chat message recovered from an export."""

    timestamp: str  # "{date}, {time}" as displayed
    date: str  # raw date token, e.g. "12/5/23"
    time: str  # raw time token, e.g. "9:04:01 PM" or "21:04"
    sender: str
    message: str  # body, continuation lines joined with "\n"


@dataclass(frozen=True)
class DateRange:
    start: str = NOT_AVAILABLE
    end: str = NOT_AVAILABLE

    @property
    def available(self) -> bool:
        return self.start != NOT_AVAILABLE


@dataclass(frozen=True)
class ParsedTranscript:
    """Result of parsing one chat export.

    ``participants`` is sorted; ``messages`` keeps source order.
    """

    messages: tuple[Message, ...]
    participants: tuple[str, ...]
    date_range: DateRange

    @property
    def message_count(self) -> int:
        return len(self.messages)
