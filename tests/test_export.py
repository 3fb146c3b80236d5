"""Tests for JSON and CSV export."""

import csv
import io
import json

import pytest

from whatsapp_extractor.export import to_csv, to_json, to_record, write_export
from whatsapp_extractor.transcripts.whatsapp import parse_transcript

CHAT = """\
[1/1/23, 10:00] Amy: say "hi"
to everyone
[2/1/23, 11:30 PM] Smith, Bob: ok
"""


@pytest.fixture
def transcript():
    return parse_transcript(CHAT)


class TestToRecord:
    def test_shape(self, transcript):
        record = to_record(transcript)
        assert list(record) == ["messages", "participants", "messageCount", "dateRange"]
        assert record["messageCount"] == 2
        assert record["participants"] == ["Amy", "Smith, Bob"]
        assert record["dateRange"] == {"start": "1/1/23", "end": "2/1/23"}

    def test_message_fields(self, transcript):
        first = to_record(transcript)["messages"][0]
        assert first == {
            "timestamp": "1/1/23, 10:00",
            "sender": "Amy",
            "message": 'say "hi"\nto everyone',
            "date": "1/1/23",
            "time": "10:00",
        }

    def test_group_name_included_when_given(self, transcript):
        record = to_record(transcript, group_name="Zero to One")
        assert list(record)[0] == "groupName"
        assert record["groupName"] == "Zero to One"

    def test_not_available_range(self):
        parsed = parse_transcript("5/13/23, 9:04 PM - Amy: hi\n")
        assert to_record(parsed)["dateRange"] == {"start": "N/A", "end": "N/A"}


class TestToJson:
    def test_loads_back_to_record(self, transcript):
        assert json.loads(to_json(transcript)) == to_record(transcript)

    def test_keeps_non_ascii(self):
        parsed = parse_transcript("[1/1/23, 10:00] Zoë: 👋\n")
        assert "Zoë" in to_json(parsed)

    def test_indent(self, transcript):
        assert "\n    " in to_json(transcript, indent=4)


class TestToCsv:
    def test_header_and_rows(self, transcript):
        lines = to_csv(transcript).split("\n")
        assert lines[0] == "Date,Time,Sender,Message"
        assert lines[1] == '1/1/23,10:00,Amy,"say ""hi""'
        assert lines[2] == 'to everyone"'
        assert lines[3] == '2/1/23,11:30 PM,"Smith, Bob","ok"'

    def test_message_always_quoted(self):
        parsed = parse_transcript("[1/1/23, 10:00] Amy: plain\n")
        assert to_csv(parsed).split("\n")[1] == '1/1/23,10:00,Amy,"plain"'

    def test_sender_with_quote_is_quoted(self):
        parsed = parse_transcript('[1/1/23, 10:00] "Al" Smith: hi\n')
        assert to_csv(parsed).split("\n")[1] == '1/1/23,10:00,"""Al"" Smith","hi"'

    def test_no_trailing_newline(self, transcript):
        assert not to_csv(transcript).endswith("\n")

    def test_readable_by_csv_reader(self, transcript):
        rows = list(csv.reader(io.StringIO(to_csv(transcript))))
        assert rows[0] == ["Date", "Time", "Sender", "Message"]
        assert rows[1] == ["1/1/23", "10:00", "Amy", 'say "hi"\nto everyone']
        assert rows[2][2] == "Smith, Bob"


class TestWriteExport:
    def test_json(self, transcript, tmp_path):
        path = write_export(transcript, tmp_path / "out" / "chat.json", "json")
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8"))["messageCount"] == 2

    def test_csv(self, transcript, tmp_path):
        path = write_export(transcript, tmp_path / "chat.csv", "csv")
        assert path.read_text(encoding="utf-8") == to_csv(transcript)

    def test_unknown_format(self, transcript, tmp_path):
        with pytest.raises(ValueError, match="Unknown export format"):
            write_export(transcript, tmp_path / "chat.xml", "xml")
        assert not (tmp_path / "chat.xml").exists()
