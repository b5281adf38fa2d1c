"""Material index: text material lookup by id.

WHY: Segments reference materials by id. Resolving each segment with a
linear scan of ``materials.texts`` would be quadratic on long drafts.

HOW: One pass over the materials into a dict, wrapped in a read-only
mapping proxy so the assembler cannot mutate it.

RULES:
- Duplicate ids: the later material wins, no error
- Empty input gives an empty (not None) mapping
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from draft_to_srt.core.ir import TextMaterial

MaterialIndex = Mapping[str, TextMaterial]


def build_material_index(materials: Iterable[TextMaterial]) -> MaterialIndex:
    """Build a read-only id → TextMaterial mapping (last write wins)."""
    index: Dict[str, TextMaterial] = {}
    for material in materials:
        index[material.id] = material
    return MappingProxyType(index)
