"""Package entry point for ``python -m draft_to_srt``.

WHY: Users run the converter as ``python -m draft_to_srt draft_content.json``
without installing the console script.

HOW: Delegates straight to the CLI's main() function.
"""

import sys

from draft_to_srt.cli import main

if __name__ == "__main__":
    sys.exit(main())
