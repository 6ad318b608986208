"""Load and save contracts between the row store and the filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import FileLoadError
from .rows import RowStore
from .state import Document

logger = logging.getLogger(__name__)


def split_lines(data: bytes) -> list[bytes]:
    """Split file bytes into lines with trailing ``\\n``/``\\r`` removed."""
    if not data:
        return []
    lines = data.split(b"\n")
    if data.endswith(b"\n"):
        lines.pop()
    return [line.rstrip(b"\r") for line in lines]


def load_lines(path: Path) -> list[bytes]:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FileLoadError(f"{path}: {exc.strerror or exc}") from exc
    return split_lines(data)


def open_document(document: Document, path: Path) -> None:
    """Replace the document contents with ``path`` and mark it clean."""
    lines = load_lines(path)
    document.rows = RowStore(lines)
    document.filename = path
    document.cx = document.cy = 0
    document.row_offset = document.col_offset = 0
    logger.info("Loaded %d lines from %s", len(lines), path)


def save_document(document: Document) -> bool:
    """Write the whole document to ``document.filename``.

    Success clears the dirty counter. Failure keeps the document untouched;
    both outcomes are reported through the status message.
    """
    if document.filename is None:
        raise ValueError("document has no filename")
    data = document.rows.to_bytes()
    try:
        with open(document.filename, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        logger.warning("Save to %s failed: %s", document.filename, exc)
        document.set_status(f"Can't save! I/O error: {exc.strerror or exc}")
        return False
    document.rows.mark_clean()
    document.set_status(f"{len(data)} bytes written to disk")
    logger.info("Wrote %d bytes to %s", len(data), document.filename)
    return True
