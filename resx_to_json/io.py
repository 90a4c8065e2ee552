"""File I/O helpers for writing converted resources."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .logger import ConverterLogger
from .models import OverwriteMode


def is_read_only(path: Path) -> bool:
    return not path.stat().st_mode & stat.S_IWRITE


def clear_read_only(path: Path) -> None:
    os.chmod(path, path.stat().st_mode | stat.S_IWRITE)


def write_output(
    output_path: Path,
    content: str,
    overwrite: OverwriteMode,
    logger: ConverterLogger,
) -> bool:
    """Write ``content`` to ``output_path`` as UTF-8.

    Existing files are replaced, except read-only files under
    ``OverwriteMode.SKIP``, which are left untouched.

    Returns:
        True if the file was written.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.exists() and is_read_only(output_path):
        if overwrite == OverwriteMode.SKIP:
            logger.error(f"Cannot overwrite {output_path} file, skipping")
            return False
        clear_read_only(output_path)

    output_path.write_text(content, encoding="utf-8")
    logger.info(f"Created {output_path} file")
    return True
