"""Core IR, loading and cue assembly modules.

WHY: The core package contains the stable heart of the converter:
the IR dataclasses, the draft loader, and the subtitle-generation
engine (timecodes, text cleanup, material lookup, cue assembly).

HOW: ir.py defines the data structures, loader.py builds them from
draft JSON, timecode.py and sanitizer.py are pure helpers, and
assembler.py walks the tracks to produce numbered cues.

RULES:
- IR dataclasses are the contract — change with care
- Assembly logic is format-agnostic — no SRT layout here
- Only the loader raises on bad input
"""
