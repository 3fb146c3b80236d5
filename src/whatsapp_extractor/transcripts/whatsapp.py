"""Parse WhatsApp "Export chat" text files into messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

from . import NOT_AVAILABLE, DateRange, Message, ParsedTranscript
from .patterns import HeaderMatch, match_header

_LOGGER = logging.getLogger(__name__)

# Dates are read day/month/year; %y for two-digit years, %Y for four.
_DATE_FORMATS = ("%d/%m/%y", "%d/%m/%Y")


@dataclass
class _PendingMessage:
    """The message currently being accumulated."""

    header: HeaderMatch
    lines: list[str] = field(default_factory=list)

    def finish(self) -> Message:
        header = self.header
        return Message(
            timestamp=f"{header.date}, {header.time}",
            date=header.date,
            time=header.time,
            sender=header.sender,
            message="\n".join([header.body, *self.lines]),
        )


def parse_transcript(text: str) -> ParsedTranscript | None:
    """Parse the full text of a chat export.

    Lines matching a header format start a new message; any other non-blank
    line is appended to the message in progress. Blank lines are skipped, so a
    blank line inside a multi-line message is not preserved.

    Returns:
        The parsed transcript, or None if no header line was recognized.
    """
    messages: list[Message] = []
    participants: set[str] = set()
    pending: _PendingMessage | None = None
    dropped = 0

    if text.startswith("\ufeff"):
        text = text[1:]

    for line in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        # U+FEFF counts as blank, same as whitespace
        if not line.replace("\ufeff", "").strip():
            continue

        header = match_header(line)
        if header is not None:
            if pending is not None:
                messages.append(pending.finish())
            pending = _PendingMessage(header)
            participants.add(header.sender)
        elif pending is not None:
            pending.lines.append(line)
        else:
            dropped += 1

    if pending is not None:
        messages.append(pending.finish())

    if dropped:
        _LOGGER.debug("Dropped %d line(s) before the first message header", dropped)

    if not messages:
        return None

    _LOGGER.debug("Parsed %d message(s) from %d participant(s)", len(messages), len(participants))
    return ParsedTranscript(
        messages=tuple(messages),
        participants=tuple(sorted(participants)),
        date_range=_date_range(messages),
    )


def parse_file(path: Path, encoding: str = "utf-8-sig") -> ParsedTranscript | None:
    """Read a chat export from disk and parse it."""
    return parse_transcript(Path(path).read_text(encoding=encoding))


def parse_calendar_date(token: str) -> date | None:
    """Interpret a raw date token as day/month/year, or None if it isn't one."""
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(token, fmt).date()
        except ValueError:
            continue
    return None


def _date_range(messages: list[Message]) -> DateRange:
    # Validity only decides whether a range is reported; the reported values
    # are always the raw tokens of the first and last message.
    if not any(parse_calendar_date(m.date) is not None for m in messages):
        return DateRange(NOT_AVAILABLE, NOT_AVAILABLE)
    return DateRange(start=messages[0].date, end=messages[-1].date)
