"""Cue assembly: text tracks and materials → numbered subtitle cues.

WHY: A draft describes captions as segments on text tracks that point at
text materials. Subtitle formats need a flat, numbered, time-ordered list
of cues. This module is the bridge between the two.

HOW: Walk tracks in file order, keep only text tracks, resolve each
segment's material through the index, then emit either one cue per word
(when the material has word timing) or one cue for the whole segment.
Numbering is a single counter over everything emitted.

RULES:
- Non-text tracks are ignored entirely, even if they reference text materials
- Unknown material id → warning + on_missing callback, segment skipped
- Non-empty word list → one cue per word, using the word's own begin/end
- Empty word list → one cue spanning segment.start .. segment.end
- Granularity is per segment and all-or-nothing
- Cue indices are 1, 2, 3, ... in emission order (track, segment, word)
- Every cue's text goes through sanitize_text()
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from draft_to_srt.config import TEXT_TRACK_TYPE
from draft_to_srt.core.ir import Cue, MissingMaterial, Track
from draft_to_srt.core.materials import MaterialIndex
from draft_to_srt.core.sanitizer import sanitize_text

logger = logging.getLogger(__name__)


def assemble_cues(
    tracks: Iterable[Track],
    index: MaterialIndex,
    source: Optional[str] = None,
    on_missing: Optional[Callable[[MissingMaterial], None]] = None,
) -> List[Cue]:
    """Assemble the ordered cue list for a draft.

    Args:
        tracks: Tracks in draft order. Only ``type == "text"`` tracks are used.
        index: Material lookup built by build_material_index().
        source: Description of where the draft came from (e.g. its file
                name), included in missing-material diagnostics.
        on_missing: Optional callback invoked once per skipped segment.

    Returns:
        Cues numbered from 1 in emission order. Empty if nothing resolves.
    """
    cues: List[Cue] = []

    def _emit(start_us: int, end_us: int, raw_text: str) -> None:
        cues.append(Cue(
            index=len(cues) + 1,
            start_us=start_us,
            end_us=end_us,
            text=sanitize_text(raw_text),
        ))

    for track in tracks:
        if track.type != TEXT_TRACK_TYPE:
            continue

        for segment in track.segments:
            material = index.get(segment.material_id)
            if material is None:
                logger.warning(
                    "Text material with ID %s not found in '%s'",
                    segment.material_id,
                    source if source is not None else "<unknown source>",
                )
                if on_missing is not None:
                    on_missing(MissingMaterial(segment.material_id, source))
                continue

            if material.words:
                for word in material.words:
                    _emit(word.begin, word.end, word.text)
            else:
                _emit(segment.start, segment.end, material.content)

    logger.debug("Assembled %d cues", len(cues))
    return cues
