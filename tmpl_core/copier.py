"""
Recursive directory copy that keeps reserved files out of the result
"""

import logging
import os
import shutil
from pathlib import Path
from typing import AbstractSet, Callable, Iterable, List

from tmpl_core.constants import RESERVED_NAMES

logger = logging.getLogger(__name__)


def is_reserved(name: str) -> bool:
    """Return True if an entry with this name is store metadata, not content."""
    return name in RESERVED_NAMES


def _make_ignore(exclude: AbstractSet[str]) -> Callable[[str, List[str]], List[str]]:
    """Build a copytree ignore callback that skips excluded names at every depth."""
    def ignore(directory: str, names: List[str]) -> List[str]:
        skipped = [name for name in names if name in exclude]
        for name in skipped:
            logger.debug("Skipping reserved entry %s", os.path.join(directory, name))
        return skipped

    return ignore


def copy_tree(src: Path, dst: Path, exclude: Iterable[str] = RESERVED_NAMES) -> int:
    """
    Recursively copy ``src`` into ``dst``.

    ``dst`` and any missing parents are created. Files already present at
    the destination are overwritten. Symlinks are followed and their
    targets copied.

    Args:
        src: Directory to copy
        dst: Directory to copy into
        exclude: Entry names skipped at any depth

    Returns:
        Number of files copied

    Raises:
        OSError: If the copy fails (shutil.Error is an OSError)
    """
    src = Path(src)
    dst = Path(dst)
    copied = 0

    def copy_file(source: str, target: str) -> str:
        nonlocal copied
        copied += 1
        return shutil.copy2(source, target)

    shutil.copytree(
        src,
        dst,
        ignore=_make_ignore(frozenset(exclude)),
        copy_function=copy_file,
        dirs_exist_ok=True,
    )

    logger.debug("Copied %d file(s) from %s to %s", copied, src, dst)
    return copied
