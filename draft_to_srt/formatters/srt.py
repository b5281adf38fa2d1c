"""SubRip (SRT) serializer.

WHY: SRT is the lowest common denominator for subtitles: every player
and editing tool reads it. The assembler already did the hard work, so
this module only lays the cues out.

HOW: Each cue becomes four lines: index, ``start --> end``, text, and a
blank separator. Timestamps come from format_srt_time().

RULES:
- Index printed as plain decimal, no padding
- Every cue, including the last, ends with a blank line ("\\n\\n")
- No cues → empty string
- No reordering, filtering, or validation; the assembler's invariants
  are trusted
- Line endings are "\\n"; the caller writes bytes verbatim
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, TextIO

from draft_to_srt.config import SRT_SUFFIX
from draft_to_srt.core.ir import Cue
from draft_to_srt.core.timecode import format_srt_time
from draft_to_srt.formatters.base import BaseFormatter, FormatterOutput


def format_cue(cue: Cue) -> str:
    """Render a single cue block, trailing blank line included."""
    return "{}\n{} --> {}\n{}\n\n".format(
        cue.index,
        format_srt_time(cue.start_us),
        format_srt_time(cue.end_us),
        cue.text,
    )


def serialize_cues(cues: Iterable[Cue]) -> str:
    """Render cues as a complete SRT document."""
    return "".join(format_cue(cue) for cue in cues)


def write_srt(cues: Iterable[Cue], sink: TextIO) -> int:
    """Write cues to an open text sink, returning the number written.

    The sink should be opened with ``newline=""`` (or be an in-memory
    buffer) so "\\n" reaches the file unchanged.
    """
    count = 0
    for cue in cues:
        sink.write(format_cue(cue))
        count += 1
    return count


class SRTFormatter(BaseFormatter):
    """Formatter that produces one SubRip file from the cue list."""

    @property
    def name(self) -> str:
        return "SubRip"

    def format(self, cues: Sequence[Cue]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=SRT_SUFFIX,
                content=serialize_cues(cues),
            )
        ]
