"""Tests for transcript summaries."""

from whatsapp_extractor.summary import format_summary, participant_counts
from whatsapp_extractor.transcripts.whatsapp import parse_transcript

CHAT = """\
[1/1/23, 10:00] Zed: one
[1/1/23, 10:01] Amy: two
[1/1/23, 10:02] Zed: three
[2/1/23, 10:03] Zed: four
"""


class TestParticipantCounts:
    def test_counts_per_sender(self):
        assert participant_counts(parse_transcript(CHAT)) == {"Amy": 1, "Zed": 3}

    def test_follows_participant_order(self):
        assert list(participant_counts(parse_transcript(CHAT))) == ["Amy", "Zed"]


class TestFormatSummary:
    def test_lines(self):
        assert format_summary(parse_transcript(CHAT)) == [
            "Total messages: 4",
            "Participants: 2",
            "Start date: 1/1/23",
            "End date: 2/1/23",
        ]

    def test_group_name_first(self):
        lines = format_summary(parse_transcript(CHAT), group_name="Zero to One")
        assert lines[0] == "Group: Zero to One"
