"""Filesystem and string helpers used by the editor scripts."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def _extension(path: Path) -> str | None:
    """Return the extension of a file name, or None if it has none.

    A leading dot alone (as in ``.hidden``) does not start an extension.
    """
    stem, dot, ext = path.name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def walk_dir(folder_path: str | os.PathLike, ext: str) -> list[str]:
    """Collect the paths of all files below ``folder_path`` with extension ``ext``.

    ``ext`` is given without its leading dot. A path that is not a directory
    yields an empty list. Entries are visited in name order.
    """
    root = Path(folder_path)
    if not root.is_dir():
        return []

    found: list[str] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            found.extend(walk_dir(entry, ext))
        elif entry.is_file() and _extension(entry) == ext:
            found.append(str(entry))
    return found


def copy_dir_recursive(src_dir: str | os.PathLike, dst_dir: str | os.PathLike) -> None:
    """Copy every file and folder from ``src_dir`` into ``dst_dir``.

    The destination is created if it does not exist; existing files are
    overwritten. Raises ``OSError`` if the source cannot be read.
    """
    src = Path(src_dir)
    dst = Path(dst_dir)
    dst.mkdir(parents=True, exist_ok=True)

    for entry in src.iterdir():
        target = dst / entry.name
        if entry.is_dir():
            copy_dir_recursive(entry, target)
        elif entry.is_file():
            shutil.copy(entry, target)

    logger.info("copying from %s to %s", src, dst)


def ensure_ends_with(text: str, suffix: str) -> str:
    """Return ``text`` with ``suffix`` appended unless it already ends with it."""
    return text if text.endswith(suffix) else f"{text}{suffix}"