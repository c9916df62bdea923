"""Generate a PDF sheet of QR codes for printing labels.

Usage examples:
  barcodegen -p ITEM- -o items.pdf
  barcodegen -p SHELF-A -f NONE --pages 2

Notes:
- Every cell encodes prefix + filler + suffix + "}".
- With the default UUID filler each cell gets its own identifier.
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from .document import write_document
from .models import FillerKind, RunConfig
from .settings import get_settings

HELP_TEXT = """\
Welcome to barcode generator help section!

This barcode generator will take the following inputs:

    -p [prefix] The text to be added before the generated filler, use this for a static barcode {defaults to empty}
    -s [suffix] The text to be added after the generated filler {defaults to none}
    -o [outputFile] Name of output file {defaults to "barcode.pdf"}
    -f [UUID, NONE] Type of filler to use {defaults to UUID}
    --pages [number] Number of pages to generate {defaults to one}

Happy trails!
"""


def parse_args(argv: Sequence[str]) -> RunConfig:
    """Turn ``flag value`` pairs into a RunConfig, exiting with 1 on bad input.

    Unknown flags are skipped together with their value. A flag given twice
    keeps its last value. A non-numeric ``--pages`` raises ValueError.
    """
    if len(argv) % 2 != 0:
        print(HELP_TEXT)
        raise SystemExit(1)

    prefix = ""
    suffix: str | None = None
    file_name = get_settings().default_file_name
    filler = FillerKind.UUID
    pages = 1

    i = 0
    try:
        while i < len(argv):
            flag = argv[i]
            if flag == "-p":
                prefix = argv[i + 1]
            elif flag == "-s":
                suffix = argv[i + 1]
            elif flag == "-o":
                file_name = argv[i + 1]
            elif flag == "-f":
                filler = FillerKind.from_flag(argv[i + 1])
            elif flag == "--pages":
                pages = int(argv[i + 1])
            i += 2
    except IndexError as exc:
        print("Something went horribly wrong")
        print(exc)
        raise SystemExit(1)

    return RunConfig(prefix=prefix, suffix=suffix, file_name=file_name, filler=filler, pages=pages)


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    config = parse_args(sys.argv[1:] if argv is None else argv)
    out = write_document(config)
    print(f"Saved: {out}")
