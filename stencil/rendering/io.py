"""File I/O operations for writing scaffold output."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from pathlib import Path

DEFAULT_FILE_MODE = 0o644


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def exclusive_write(path: Path, data: bytes) -> None:
    """Create ``path`` with ``data``, failing if it already exists.

    Raises:
        FileExistsError: The destination is already present; it is left untouched
    """
    ensure_parent(path)
    with path.open("xb") as handle:
        handle.write(data)


def exclusive_copy(source: Path, path: Path) -> None:
    """Copy ``source`` to ``path``, failing if ``path`` already exists.

    Raises:
        FileExistsError: The destination is already present; it is left untouched
    """
    ensure_parent(path)
    # Source is opened first so a missing source never creates the destination
    with source.open("rb") as src, path.open("xb") as dst:
        shutil.copyfileobj(src, dst)
    shutil.copymode(source, path)


def copy_replace(source: Path, path: Path) -> None:
    """Copy ``source`` over ``path``, replacing any existing file."""
    ensure_parent(path)
    shutil.copyfile(source, path)


def atomic_write_bytes(path: Path, data: bytes, mode: int | None = None) -> None:
    """Write bytes to a file atomically using a temporary file.

    An existing destination keeps its permissions unless ``mode`` is given.

    Args:
        path: Destination file path
        data: Content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)
    if mode is None:
        try:
            mode = stat.S_IMODE(path.stat().st_mode)
        except FileNotFoundError:
            mode = DEFAULT_FILE_MODE

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


def atomic_write_text(path: Path, text: str, mode: int | None = None) -> None:
    """Write UTF-8 text to a file atomically, truncating any previous content."""
    atomic_write_bytes(path, text.encode("utf-8"), mode=mode)


def read_text(path: Path) -> str:
    """Read UTF-8 text from ``path`` with line endings left as they are."""
    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


def read_text_if_exists(path: Path) -> str | None:
    """Read UTF-8 text from ``path``; return None if it does not exist."""
    try:
        return read_text(path)
    except FileNotFoundError:
        return None
