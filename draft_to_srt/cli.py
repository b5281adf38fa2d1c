"""Command-line interface for the draft → SRT converter.

WHY: Editors export captions by pointing the tool at a project draft
(or dropping the draft's path into file-path.txt) and getting a .srt
file back. The CLI wires loading, cue assembly and SRT output together
behind a single command.

HOW: Uses argparse to accept an optional input file, output location,
path-file override and verbosity. Status messages go to stderr; the SRT
file is saved to --output, or under a generated name in --output-dir.
``--output -`` streams the SRT to stdout instead.

RULES:
- Positional input_file is optional; without it the path file is read
- Generated output name: {OUTPUT_PREFIX}{time_ns % 10_000_000_000}.srt
- Generated names never overwrite: numeric suffix on conflict (-2, -3, ...)
- Status output goes to stderr (not stdout)
- Missing materials are warnings; they never change the exit status
- Exit status 1 on configuration, load or write errors
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from draft_to_srt import __version__
from draft_to_srt.config import (
    LOG_LEVEL,
    OUTPUT_PREFIX,
    PATH_FILE,
    read_path_file,
    resolve_log_level,
)
from draft_to_srt.core.assembler import assemble_cues
from draft_to_srt.core.ir import MissingMaterial
from draft_to_srt.core.loader import load_draft
from draft_to_srt.core.materials import build_material_index
from draft_to_srt.formatters.base import FormatterOutput
from draft_to_srt.formatters.srt import SRTFormatter, write_srt

logger = logging.getLogger(__name__)

STDOUT_MARKER = "-"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so ``--output -`` can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _generate_stem() -> str:
    """Build the default output stem from the prefix and a time-based suffix."""
    return "{}{}".format(OUTPUT_PREFIX, time.time_ns() % 10_000_000_000)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. subtitles-123.srt)
    - Conflict: insert counter before the extension (subtitles-123-2.srt)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, suffix)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, path: Path) -> Path:
    """Write one formatter output to disk verbatim."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(output.content)
    return path


def _prepare_stdout() -> None:
    """Switch stdout to UTF-8 with untranslated "\\n" line endings.

    Text-mode stdout follows the locale and, on Windows, writes "\\r\\n".
    Streams without reconfigure() (e.g. replaced by a test harness) are
    left alone.
    """
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8", newline="")


def _resolve_input(args: argparse.Namespace) -> Path:
    """Pick the draft to convert: explicit argument, else the path file."""
    if args.input_file:
        return Path(args.input_file)
    return Path(read_path_file(args.path_file))


def run(args: argparse.Namespace) -> int:
    """Execute the conversion for parsed arguments.

    Raises:
        ValueError: Configuration or draft loading errors.
        OSError: Output cannot be written.
    """
    input_path = _resolve_input(args)
    logger.debug("Resolved draft path: %s", input_path)
    _status("Converting {}...".format(input_path))

    draft = load_draft(input_path)
    index = build_material_index(draft.texts)

    missing: List[MissingMaterial] = []
    cues = assemble_cues(
        draft.tracks,
        index,
        source=input_path.name,
        on_missing=missing.append,
    )

    if args.output == STDOUT_MARKER:
        _prepare_stdout()
        write_srt(cues, sys.stdout)
        sys.stdout.flush()
        _status("Wrote {} cue(s) to stdout".format(len(cues)))
    else:
        formatter = SRTFormatter()
        output = formatter.format(cues)[0]
        if args.output:
            out_path = Path(args.output)
        else:
            output_dir = Path(args.output_dir) if args.output_dir else Path.cwd()
            if not output_dir.is_dir():
                raise ValueError("Output directory does not exist: {}".format(output_dir))
            out_path = _resolve_output_path(_generate_stem(), output.suffix, output_dir)
        _save_output(output, out_path)
        logger.debug("Wrote %d bytes to %s", out_path.stat().st_size, out_path)
        _status("Successfully converted subtitles from '{}' to {}".format(
            input_path, out_path
        ))
        _status("  {} cue(s) written".format(len(cues)))

    if missing:
        _status("  {} segment(s) skipped: material not found".format(len(missing)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="draft-to-srt",
        description="Convert a video-editor project draft (draft_content.json) "
                    "into a SubRip (.srt) subtitle file.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Path to the draft JSON file. If omitted, the path is read "
             "from the path file (default: %s)." % PATH_FILE,
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output .srt path, or '-' for stdout "
             "(default: generated name in --output-dir).",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the generated output file (default: current directory).",
    )

    parser.add_argument(
        "--path-file",
        default=PATH_FILE,
        help="File containing the draft path, used when input_file is omitted "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else resolve_log_level(LOG_LEVEL),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

        _status("App version: {}".format(__version__))
        return run(args)
    except ValueError as e:
        # Config and draft errors (missing path file, bad JSON, schema)
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    except OSError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
