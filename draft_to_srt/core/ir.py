"""Intermediate representation dataclasses for project drafts and cues.

WHY: A draft_content.json file is a deep, loosely-typed JSON tree with
dozens of fields the subtitle exporter never looks at. The IR keeps only
what cue assembly needs, in a well-typed form, decoupling JSON decoding
from subtitle generation.

HOW: Dataclasses mirror the parts of the draft that matter:
  Word          — one timed word inside a text material
  TextMaterial  — a reusable text block, optionally with word timing
  Segment       — placement of a material on a track
  Track         — an ordered list of segments with a type
  DraftContent  — the decoded draft (text materials + tracks)
  Cue           — one numbered subtitle entry produced by the assembler
  MissingMaterial — diagnostic record for an unresolvable segment

RULES:
- All times are integer microseconds, as stored in the draft
- begin <= end is expected but never enforced here
- Only tracks whose type is "text" produce cues
- Cue.index starts at 1 and is contiguous in emission order
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Word:
    """A single word with its own timing inside a text material.

    RULES:
    - begin / end: microseconds on the project timeline
    - text: raw text, may contain markup and HTML entities
    - style / text_id: carried through from the draft, unused by assembly
    """

    begin: int
    end: int
    text: str
    style: int = 0
    text_id: str = ""


@dataclass
class TextMaterial:
    """A text block referenced by one or more segments.

    WHY: Drafts store text once in ``materials.texts`` and reference it
    from track segments by id, so the same caption can be placed twice.

    RULES:
    - id: unique within a draft (last one wins when duplicated)
    - content: raw text, may contain markup and HTML entities
    - words: empty when the editor has no word-level timing
    """

    id: str
    content: str
    words: List[Word] = field(default_factory=list)
    type: str = ""


@dataclass
class Segment:
    """A placement of a material on a track's timeline."""

    material_id: str
    start: int
    duration: int

    @property
    def end(self) -> int:
        return self.start + self.duration


@dataclass
class Track:
    type: str
    segments: List[Segment] = field(default_factory=list)


@dataclass
class DraftContent:
    """The decoded parts of a project draft.

    RULES:
    - texts: materials in file order (order matters for duplicate ids)
    - tracks: in file order; cue numbering follows this order
    """

    texts: List[TextMaterial] = field(default_factory=list)
    tracks: List[Track] = field(default_factory=list)


@dataclass
class Cue:
    """One numbered subtitle entry.

    RULES:
    - index: 1-based position in the emitted sequence
    - start_us / end_us: microseconds, formatted only at serialization
    - text: already sanitized
    """

    index: int
    start_us: int
    end_us: int
    text: str


@dataclass
class MissingMaterial:
    """A segment whose material id was not found in the index.

    source is the human-readable origin of the draft (usually its file
    name), or None when the caller did not supply one.
    """

    material_id: str
    source: Optional[str] = None
