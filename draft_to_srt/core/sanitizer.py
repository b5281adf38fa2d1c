"""Caption text cleanup: markup stripping and HTML entity decoding.

WHY: Text materials in a draft carry editor markup: rich-text tags such
as ``<font color=...>``, square-bracket annotation delimiters, and HTML
entities. SRT players show all of that literally, so it must be removed
before the text lands in a cue.

HOW: One left-to-right pass over the characters with a single piece of
state (inside a tag or not). Decoded entities are appended to the output
and never re-scanned, so ``&lt;b&gt;`` becomes the visible text ``<b>``
instead of being stripped as a tag.

RULES:
- ``<`` opens a tag; everything up to and including the next ``>`` is dropped
- A tag with no closing ``>`` swallows the rest of the input
- ``[`` and ``]`` are dropped; the text between them is kept
- Only the entities in ENTITIES are decoded, case-sensitively
- Unknown ``&...;`` sequences and all other characters pass through
"""

from __future__ import annotations

from typing import Dict, List

ENTITIES: Dict[str, str] = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&#39;": "'",
    "&nbsp;": " ",
}

# Longest entity name, bounds the lookahead after "&".
_MAX_ENTITY_LEN = max(len(name) for name in ENTITIES)

_BRACKETS = frozenset("[]")


def _match_entity(text: str, pos: int) -> str:
    """Return the known entity starting at ``text[pos]``, or ``""``."""
    end = text.find(";", pos, pos + _MAX_ENTITY_LEN)
    if end < 0:
        return ""
    candidate = text[pos:end + 1]
    return candidate if candidate in ENTITIES else ""


def sanitize_text(raw: str) -> str:
    """Strip tags and bracket characters and decode known HTML entities.

    Args:
        raw: Text exactly as stored in the draft. May be empty.

    Returns:
        Plain text suitable for an SRT cue. May be empty when the input
        consisted only of markup.
    """
    parts: List[str] = []
    in_tag = False
    pos = 0
    length = len(raw)

    while pos < length:
        char = raw[pos]

        if in_tag:
            if char == ">":
                in_tag = False
            pos += 1
            continue

        if char == "<":
            in_tag = True
            pos += 1
            continue

        if char in _BRACKETS:
            pos += 1
            continue

        if char == "&":
            entity = _match_entity(raw, pos)
            if entity:
                parts.append(ENTITIES[entity])
                pos += len(entity)
                continue

        parts.append(char)
        pos += 1

    return "".join(parts)
