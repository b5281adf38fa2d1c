"""Draft loading: draft_content.json → DraftContent IR.

WHY: The subtitle engine works on typed IR objects, but drafts arrive as
JSON written by the video editor. This module is the only place where
input is checked and rejected; everything downstream trusts the IR.

HOW: The decoded document is validated with jsonschema against the
bundled draft_content.schema.json (only the fields subtitle export
reads), then mapped onto the IR dataclasses.

RULES:
- Unknown keys are allowed and ignored
- Missing lists → empty, missing strings → "", missing integers → 0
- ``null`` lists and objects (e.g. ``"words": null``, ``"materials": null``)
  are treated as empty
- Unreadable file, invalid JSON, or schema violation → DraftLoadError
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from draft_to_srt.core.ir import DraftContent, Segment, TextMaterial, Track, Word

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "draft_content.schema.json"


class DraftLoadError(ValueError):
    """Raised when a draft cannot be read, decoded, or fails validation."""


def _load_schema() -> Dict[str, Any]:
    """Load the draft JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _parse_word(data: Dict[str, Any]) -> Word:
    return Word(
        begin=int(data.get("begin", 0)),
        end=int(data.get("end", 0)),
        text=data.get("text", ""),
        style=int(data.get("style", 0)),
        text_id=data.get("text_id", ""),
    )


def _parse_text_material(data: Dict[str, Any]) -> TextMaterial:
    return TextMaterial(
        id=data.get("id", ""),
        content=data.get("content", ""),
        words=[_parse_word(w) for w in _as_list(data.get("words"))],
        type=data.get("type", ""),
    )


def _parse_track(data: Dict[str, Any]) -> Track:
    segments = []
    for seg in _as_list(data.get("segments")):
        timerange = seg.get("target_timerange") or {}
        segments.append(Segment(
            material_id=seg.get("material_id", ""),
            start=int(timerange.get("start", 0)),
            duration=int(timerange.get("duration", 0)),
        ))
    return Track(type=data.get("type", ""), segments=segments)


def parse_draft(data: Any, source: Optional[str] = None) -> DraftContent:
    """Validate a decoded draft document and map it onto the IR.

    Args:
        data: The JSON-decoded draft (normally a dict).
        source: Description of the draft's origin for error messages.

    Returns:
        DraftContent with text materials and tracks in document order.

    Raises:
        DraftLoadError: If the document does not match the draft schema.
    """
    try:
        jsonschema.validate(instance=data, schema=_get_schema())
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise DraftLoadError(
            "Invalid draft structure in '{}' at {}: {}".format(
                source or "<draft>", location, e.message
            )
        ) from e

    materials = data.get("materials") or {}
    texts = [_parse_text_material(t) for t in _as_list(materials.get("texts"))]
    tracks = [_parse_track(t) for t in _as_list(data.get("tracks"))]

    logger.debug(
        "Parsed draft %s: %d text materials, %d tracks",
        source or "<draft>", len(texts), len(tracks),
    )
    return DraftContent(texts=texts, tracks=tracks)


def load_draft(path: Union[str, Path]) -> DraftContent:
    """Read, decode and parse a draft_content.json file.

    Raises:
        DraftLoadError: If the file cannot be read, is not valid JSON,
            or fails schema validation.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DraftLoadError("failed to read file '{}': {}".format(path, e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DraftLoadError("failed to unmarshal JSON in '{}': {}".format(path, e)) from e

    return parse_draft(data, source=path.name)
