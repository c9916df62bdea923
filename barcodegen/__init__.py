"""Printable PDF sheets of QR codes.

This package exposes the pieces used by the ``barcodegen`` command.
"""

from .codes import build_code_text
from .document import write_document
from .models import FillerKind, RunConfig

__all__ = ["FillerKind", "RunConfig", "build_code_text", "write_document"]
