"""Text storage primitives: the per-line zipper and the page buffer."""

from __future__ import annotations

from .page import Page, read_document, write_document
from .zipper import LineZipper

__all__ = [
    "LineZipper",
    "Page",
    "read_document",
    "write_document",
]
