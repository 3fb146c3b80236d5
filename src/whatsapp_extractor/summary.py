"""Per-conversation statistics derived from a parsed transcript."""

from __future__ import annotations

from collections import Counter

from .transcripts import ParsedTranscript


def participant_counts(transcript: ParsedTranscript) -> dict[str, int]:
    """Number of messages sent by each participant, in participant order."""
    counts = Counter(m.sender for m in transcript.messages)
    return {name: counts[name] for name in transcript.participants}


def format_summary(transcript: ParsedTranscript, group_name: str | None = None) -> list[str]:
    lines = []
    if group_name:
        lines.append(f"Group: {group_name}")
    lines.append(f"Total messages: {transcript.message_count}")
    lines.append(f"Participants: {len(transcript.participants)}")
    lines.append(f"Start date: {transcript.date_range.start}")
    lines.append(f"End date: {transcript.date_range.end}")
    return lines
