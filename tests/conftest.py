"""Shared test fixtures for the draft_to_srt test suite.

WHY: Loader, assembler, serializer and CLI tests all need the same small
draft (a text track with a word-timed material and a plain one)
in both raw JSON form and as IR objects.

HOW: Pytest fixtures return fresh copies so tests can mutate freely.

RULES:
- Timing values are microseconds, as in a real draft_content.json.
- The raw draft mirrors the editor's key names (material_id,
  target_timerange, ...), including a few keys the loader must ignore.
"""

import copy
import json
from typing import Any, Dict

import pytest

from draft_to_srt.core.ir import Segment, TextMaterial, Track, Word


# ---------------------------------------------------------------------------
# Raw draft JSON
# ---------------------------------------------------------------------------

SAMPLE_DRAFT: Dict[str, Any] = {
    "canvas_config": {"width": 1080, "height": 1920},
    "materials": {
        "texts": [
            {
                "id": "mat-words",
                "content": "<font color=\"#FFFFFF\">[Hello world]</font>",
                "type": "subtitle",
                "words": [
                    {"begin": 1_000_000, "end": 1_500_000, "text": "Hello", "style": 0, "text_id": "t1"},
                    {"begin": 1_500_000, "end": 3_000_000, "text": "world", "style": 0, "text_id": "t1"},
                ],
            },
            {
                "id": "mat-plain",
                "content": "Tom &amp; Jerry",
                "type": "text",
                "words": [],
            },
        ],
        "videos": [{"id": "vid-1", "path": "/media/clip.mp4"}],
    },
    "tracks": [
        {
            "type": "video",
            "segments": [
                {"material_id": "mat-plain", "target_timerange": {"start": 0, "duration": 9_000_000}},
            ],
        },
        {
            "type": "text",
            "segments": [
                {"material_id": "mat-words", "target_timerange": {"start": 1_000_000, "duration": 2_000_000}},
                {"material_id": "mat-plain", "target_timerange": {"start": 4_000_000, "duration": 1_250_000}},
            ],
        },
    ],
}


@pytest.fixture
def sample_draft_dict():
    """The raw sample draft as a JSON-decoded dict."""
    return copy.deepcopy(SAMPLE_DRAFT)


@pytest.fixture
def sample_draft_file(tmp_path, sample_draft_dict):
    """The sample draft written to tmp_path/draft_content.json."""
    path = tmp_path / "draft_content.json"
    path.write_text(json.dumps(sample_draft_dict), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# IR objects
# ---------------------------------------------------------------------------


@pytest.fixture
def two_word_material():
    """Material with word-level timing: 'Hello' then 'world'."""
    return TextMaterial(
        id="m1",
        content="Hello world",
        words=[
            Word(begin=1_000_000, end=1_500_000, text="Hello"),
            Word(begin=1_500_000, end=3_000_000, text="world"),
        ],
    )


@pytest.fixture
def plain_material():
    """Material without word timing."""
    return TextMaterial(id="m1", content="Hello world", words=[])


@pytest.fixture
def single_segment_track():
    """One text track with one segment at 1s lasting 2s, pointing at m1."""
    return Track(
        type="text",
        segments=[Segment(material_id="m1", start=1_000_000, duration=2_000_000)],
    )
