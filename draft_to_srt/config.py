"""Configuration constants, environment overrides, and .env loading.

WHY: Centralizes the few configurable values (the path-file indirection,
output naming, and log level) so they are easy to find and override
without touching logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values with environment variable overrides. The
read_path_file() helper gives a clear error when the path file is
missing or empty.

RULES:
- DRAFT_TO_SRT_PATH_FILE names the file that holds the draft path
  (used when no input file is given on the command line)
- Output files are named {OUTPUT_PREFIX}{suffix}.srt
- TEXT_TRACK_TYPE is fixed by the draft format, not a setting
- LOG_LEVEL is checked by resolve_log_level() when the CLI starts
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

# Load .env from the directory the tool is run from
load_dotenv()

# ---------------------------------------------------------------------------
# Draft format
# ---------------------------------------------------------------------------

TEXT_TRACK_TYPE = "text"
"""Track type whose segments carry captions."""

# ---------------------------------------------------------------------------
# Runtime settings
# ---------------------------------------------------------------------------

PATH_FILE = os.getenv("DRAFT_TO_SRT_PATH_FILE", "file-path.txt")
OUTPUT_PREFIX = os.getenv("DRAFT_TO_SRT_OUTPUT_PREFIX", "subtitles-")
LOG_LEVEL = os.getenv("DRAFT_TO_SRT_LOG_LEVEL", "INFO").upper()

SRT_SUFFIX = ".srt"


def read_path_file(path: Union[str, Path]) -> str:
    """Read the draft path stored in the path file.

    WHY: The usual workflow drops a small text file next to the tool
    that names the draft to convert, so the tool can be double-clicked
    without arguments.

    RULES:
    - Surrounding whitespace is stripped
    - Raises ValueError if the file is missing, unreadable, or blank
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise ValueError(
            "Could not read configuration file '{}': {}. "
            "Please ensure it exists and contains the name of the JSON file "
            "to process.".format(path, e)
        ) from e
    if not content:
        raise ValueError(
            "'{}' is empty or contains only whitespace. "
            "Please ensure it contains the name of the JSON file to "
            "process.".format(path)
        )
    return content


def resolve_log_level(name: str) -> int:
    """Map a log level name such as "INFO" to its numeric value.

    RULES:
    - Case-insensitive
    - Raises ValueError for names the logging module does not know
    """
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(
            "Unknown log level '{}' in DRAFT_TO_SRT_LOG_LEVEL. "
            "Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL.".format(name)
        )
    return level
