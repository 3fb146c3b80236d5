"""Serialize parsed transcripts to JSON and CSV."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .transcripts import ParsedTranscript

_LOGGER = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "csv")
CSV_COLUMNS = ("Date", "Time", "Sender", "Message")
_CSV_SPECIAL = (",", "\"", "\n", "\r")


def to_record(transcript: ParsedTranscript, group_name: str | None = None) -> dict[str, Any]:
    """Build the structured record downstream consumers expect."""
    record: dict[str, Any] = {}
    if group_name:
        record["groupName"] = group_name
    record["messages"] = [
        {
            "timestamp": m.timestamp,
            "sender": m.sender,
            "message": m.message,
            "date": m.date,
            "time": m.time,
        }
        for m in transcript.messages
    ]
    record["participants"] = list(transcript.participants)
    record["messageCount"] = transcript.message_count
    record["dateRange"] = {
        "start": transcript.date_range.start,
        "end": transcript.date_range.end,
    }
    return record


def to_json(transcript: ParsedTranscript, group_name: str | None = None, indent: int = 2) -> str:
    return json.dumps(to_record(transcript, group_name), indent=indent, ensure_ascii=False)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _field(value: str) -> str:
    # Quote only when the value would otherwise break the row
    if any(c in value for c in _CSV_SPECIAL):
        return _quote(value)
    return value


def to_csv(transcript: ParsedTranscript) -> str:
    """Render one row per message under a ``Date,Time,Sender,Message`` header.

    The message body is always quoted, with embedded quotes doubled. Date, time
    and sender are quoted only when they contain a comma, quote or line break,
    so a sender like ``Smith, Bob`` still reads back as one field.
    """
    rows = [",".join(CSV_COLUMNS)]
    for m in transcript.messages:
        rows.append(",".join([_field(m.date), _field(m.time), _field(m.sender), _quote(m.message)]))
    return "\n".join(rows)


def write_export(
    transcript: ParsedTranscript,
    path: Path,
    fmt: str,
    group_name: str | None = None,
    indent: int = 2,
) -> Path:
    """Write ``transcript`` to ``path`` as JSON or CSV. Returns the path written."""
    if fmt == "json":
        content = to_json(transcript, group_name, indent)
    elif fmt == "csv":
        content = to_csv(transcript)
    else:
        raise ValueError(f"Unknown export format: {fmt!r}. Use 'json' or 'csv'.")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    _LOGGER.debug("Wrote %d message(s) to %s", transcript.message_count, path)
    return path
