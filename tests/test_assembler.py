"""Unit tests for cue assembly.

WHY: The assembler decides cue granularity and numbering. A wrong
decision here silently produces subtitles that drift, duplicate, or skip
lines. The SRT still parses, so nothing downstream would notice.

HOW: Small hand-built tracks and material indexes exercise each branch:
word-level, segment-level, missing material, non-text tracks, ordering.
"""

import logging

from draft_to_srt.core.assembler import assemble_cues
from draft_to_srt.core.ir import Cue, MissingMaterial, Segment, TextMaterial, Track, Word
from draft_to_srt.core.materials import build_material_index


def _seg(material_id, start=0, duration=1_000_000):
    return Segment(material_id=material_id, start=start, duration=duration)


class TestGranularity:

    def test_word_level_cues(self, two_word_material, single_segment_track):
        index = build_material_index([two_word_material])
        cues = assemble_cues([single_segment_track], index)

        assert cues == [
            Cue(index=1, start_us=1_000_000, end_us=1_500_000, text="Hello"),
            Cue(index=2, start_us=1_500_000, end_us=3_000_000, text="world"),
        ]

    def test_segment_level_cue(self, plain_material, single_segment_track):
        index = build_material_index([plain_material])
        cues = assemble_cues([single_segment_track], index)

        assert cues == [
            Cue(index=1, start_us=1_000_000, end_us=3_000_000, text="Hello world"),
        ]

    def test_word_timing_ignores_segment_span(self):
        """Word cues use the words' own times even outside the segment."""
        material = TextMaterial(id="m", content="ignored", words=[
            Word(begin=10_000_000, end=11_000_000, text="late"),
        ])
        track = Track(type="text", segments=[_seg("m", start=0, duration=1)])
        cues = assemble_cues([track], build_material_index([material]))

        assert [(c.start_us, c.end_us, c.text) for c in cues] == [
            (10_000_000, 11_000_000, "late"),
        ]

    def test_content_not_used_when_words_present(self):
        material = TextMaterial(id="m", content="whole line", words=[
            Word(begin=0, end=1, text="only"),
        ])
        track = Track(type="text", segments=[_seg("m")])
        cues = assemble_cues([track], build_material_index([material]))
        assert [c.text for c in cues] == ["only"]

    def test_text_is_sanitized(self):
        materials = [
            TextMaterial(id="w", content="", words=[
                Word(begin=0, end=1, text="<b>[Hi]</b>"),
            ]),
            TextMaterial(id="p", content="Tom &amp; Jerry"),
        ]
        track = Track(type="text", segments=[_seg("w"), _seg("p")])
        cues = assemble_cues([track], build_material_index(materials))
        assert [c.text for c in cues] == ["Hi", "Tom & Jerry"]

    def test_malformed_word_timing_passed_through(self):
        material = TextMaterial(id="m", content="", words=[
            Word(begin=2_000_000, end=1_000_000, text="backwards"),
        ])
        track = Track(type="text", segments=[_seg("m")])
        cues = assemble_cues([track], build_material_index([material]))
        assert (cues[0].start_us, cues[0].end_us) == (2_000_000, 1_000_000)


class TestNumbering:

    def test_indices_contiguous_from_one(self):
        materials = [
            TextMaterial(id="a", content="", words=[
                Word(begin=i, end=i + 1, text="w{}".format(i)) for i in range(3)
            ]),
            TextMaterial(id="b", content="plain"),
        ]
        tracks = [
            Track(type="text", segments=[_seg("a"), _seg("b")]),
            Track(type="text", segments=[_seg("b"), _seg("a")]),
        ]
        cues = assemble_cues(tracks, build_material_index(materials))

        assert len(cues) == 8
        for i, cue in enumerate(cues):
            assert cue.index == i + 1

    def test_emission_order_track_segment_word(self):
        materials = [
            TextMaterial(id="a", content="", words=[
                Word(begin=0, end=1, text="a1"),
                Word(begin=1, end=2, text="a2"),
            ]),
            TextMaterial(id="b", content="b"),
            TextMaterial(id="c", content="c"),
        ]
        tracks = [
            Track(type="text", segments=[_seg("b"), _seg("a")]),
            Track(type="text", segments=[_seg("c")]),
        ]
        cues = assemble_cues(tracks, build_material_index(materials))
        assert [c.text for c in cues] == ["b", "a1", "a2", "c"]

    def test_no_tracks_gives_no_cues(self):
        assert assemble_cues([], build_material_index([])) == []


class TestMissingMaterial:

    def test_missing_segment_skipped_indices_stay_contiguous(self, caplog):
        materials = [TextMaterial(id="ok", content="fine")]
        track = Track(type="text", segments=[
            _seg("ok", start=0),
            _seg("ghost", start=1_000_000),
            _seg("ok", start=2_000_000),
        ])

        with caplog.at_level(logging.WARNING, logger="draft_to_srt.core.assembler"):
            cues = assemble_cues([track], build_material_index(materials), source="draft.json")

        assert [c.index for c in cues] == [1, 2]
        assert [c.start_us for c in cues] == [0, 2_000_000]
        assert "ghost" in caplog.text
        assert "draft.json" in caplog.text

    def test_on_missing_callback(self):
        reported = []
        track = Track(type="text", segments=[_seg("ghost-1"), _seg("ghost-2")])

        cues = assemble_cues(
            [track],
            build_material_index([]),
            source="draft.json",
            on_missing=reported.append,
        )

        assert cues == []
        assert reported == [
            MissingMaterial("ghost-1", "draft.json"),
            MissingMaterial("ghost-2", "draft.json"),
        ]

    def test_missing_without_source(self, caplog):
        track = Track(type="text", segments=[_seg("ghost")])
        with caplog.at_level(logging.WARNING):
            assemble_cues([track], build_material_index([]))
        assert "ghost" in caplog.text


class TestTrackFiltering:

    def test_non_text_track_ignored(self, plain_material):
        index = build_material_index([plain_material])
        tracks = [
            Track(type="video", segments=[_seg("m1")]),
            Track(type="audio", segments=[_seg("m1")]),
        ]
        assert assemble_cues(tracks, index) == []

    def test_non_text_track_does_not_consume_indices(self, plain_material, single_segment_track):
        index = build_material_index([plain_material])
        tracks = [
            Track(type="video", segments=[_seg("m1")]),
            single_segment_track,
        ]
        cues = assemble_cues(tracks, index)
        assert [c.index for c in cues] == [1]

    def test_non_text_track_missing_material_not_reported(self):
        reported = []
        tracks = [Track(type="effect", segments=[_seg("ghost")])]
        assemble_cues(tracks, build_material_index([]), on_missing=reported.append)
        assert reported == []
