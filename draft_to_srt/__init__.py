"""Draft-to-SRT — subtitle export for video-editor project drafts.

WHY: Video editors such as CapCut/JianYing keep on-screen text inside a
project draft (``draft_content.json``) as text materials placed on text
tracks, often with word-level timing. Nothing outside the editor can use
those captions directly. This package turns a draft into a SubRip file.

HOW: Three-stage pipeline — load (draft JSON → IR), assemble (IR → numbered
cues), format (cues → SRT text). Each stage is independently testable.

RULES:
- The core never rejects input; only the loader validates structure
- Missing materials are reported, never fatal
- Timing in the IR is integer microseconds, exactly as the draft stores it
"""

__version__ = "0.1.0"
