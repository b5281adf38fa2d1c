"""Abstract base formatter and output container.

WHY: The CLI works with "a formatter" and "an output file", not with
SRT specifics. This base class keeps that seam explicit.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``suffix`` includes the dot, e.g. ``".srt"``
- The caller is responsible for prepending the output filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from draft_to_srt.core.ir import Cue


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the output stem, e.g. ``".srt"``.
        content: The file content, written as UTF-8.
    """

    suffix: str
    content: str


class BaseFormatter(ABC):
    """Abstract base for cue formatters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SubRip'."""

    @abstractmethod
    def format(self, cues: Sequence[Cue]) -> List[FormatterOutput]:
        """Convert the assembled cues into one or more output files.

        Args:
            cues: Cues in emission order, already numbered and sanitized.

        Returns:
            List of FormatterOutput objects.
        """
