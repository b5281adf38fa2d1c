"""Output formatters for assembled cues.

WHY: The CLI needs to turn the cue list into file content without
knowing the details of the subtitle layout.

HOW: base.py defines the formatter interface and output container,
srt.py implements SubRip serialization.
"""
