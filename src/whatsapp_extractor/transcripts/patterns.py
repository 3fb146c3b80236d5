"""Header line formats found in WhatsApp chat exports."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple

# [0-9] rather than \d: exports are ASCII digits, and \d would also accept
# other Unicode digit scripts. \s stays Unicode-aware so the narrow no-break
# space WhatsApp puts before AM/PM still matches.
_DATE = r"[0-9]{1,2}/[0-9]{1,2}/[0-9]{2,4}"
_DATE_SHORT_YEAR = r"[0-9]{1,2}/[0-9]{1,2}/[0-9]{2}"
_CLOCK = r"[0-9]{1,2}:[0-9]{2}"
_SENDER_AND_BODY = r"([^:]+):\s*(.*)"


class HeaderMatch(NamedTuple):
    date: str
    time: str
    sender: str
    body: str


@dataclass(frozen=True)
class HeaderPattern:
    """A named, compiled header format."""

    name: str
    regex: re.Pattern[str]

    def match(self, line: str) -> HeaderMatch | None:
        m = self.regex.match(line)
        if m is None:
            return None
        date, time, sender, body = m.groups()
        return HeaderMatch(date=date, time=time, sender=sender.strip(), body=body.strip())


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


# Checked in this order, first match wins. Several formats overlap, so the
# order is part of the parser's behaviour and must not change.
HEADER_PATTERNS: tuple[HeaderPattern, ...] = (
    # [12/5/23, 9:04:01 PM] Alice: Hello
    HeaderPattern(
        "bracketed",
        _compile(rf"^\[({_DATE}),\s*({_CLOCK}(?::[0-9]{{2}})?(?:\s*[AP]M)?)\]\s*{_SENDER_AND_BODY}"),
    ),
    # 12/05/2023, 21:04 - Alice: Hello
    HeaderPattern(
        "dashed",
        _compile(rf"^({_DATE}),\s*({_CLOCK}(?:\s*[AP]M)?)\s*-\s*{_SENDER_AND_BODY}"),
    ),
    # 12/05/23, 21:04 - Alice: Hello
    HeaderPattern(
        "dashed_short_year",
        _compile(rf"^({_DATE_SHORT_YEAR}),\s*({_CLOCK}(?:\s*[AP]M)?)\s*-\s*{_SENDER_AND_BODY}"),
    ),
    # 5/12/23, 9:04 PM - Alice: Hello
    HeaderPattern(
        "dashed_meridiem",
        _compile(rf"^({_DATE_SHORT_YEAR}),\s*({_CLOCK}\s*[AP]M)\s*-\s*{_SENDER_AND_BODY}"),
    ),
)


def match_header(line: str) -> HeaderMatch | None:
    """Return the fields of the first header format matching ``line``."""
    for pattern in HEADER_PATTERNS:
        header = pattern.match(line)
        if header is not None:
            return header
    return None
