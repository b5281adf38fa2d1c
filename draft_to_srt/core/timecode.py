"""Microsecond → SRT timestamp conversion.

WHY: Drafts store timing as integer microseconds; SubRip wants
``HH:MM:SS,mmm``. Every cue goes through this function twice.

RULES:
- Truncate to whole milliseconds (integer division, no rounding)
- Negative values clamp to 00:00:00,000
- Hours are not capped; 100+ hours render with their natural width
"""

from __future__ import annotations

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


def format_srt_time(microseconds: int) -> str:
    """Format a microsecond offset as an SRT timestamp.

    >>> format_srt_time(3_723_001_000)
    '01:02:03,001'
    """
    total_ms = max(int(microseconds) // 1000, 0)
    hours, rest = divmod(total_ms, _MS_PER_HOUR)
    minutes, rest = divmod(rest, _MS_PER_MINUTE)
    seconds, millis = divmod(rest, _MS_PER_SECOND)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, seconds, millis)
