from __future__ import annotations
import logging
import os
import stat
import tempfile
from typing import List

"""
File enumeration, read and write for the search/replace driver.

list_files: every regular file under a root, recursing into subdirectories.
read_file:  strict UTF-8 decode; raises UnicodeDecodeError on binary content.
write_file: replace a file's content atomically from the caller's view.
"""

logger = logging.getLogger(__name__)


def list_files(root: str) -> List[str]:
    if not os.path.isdir(root):
        logger.debug("Not a directory: %s", root)
        return []

    paths: List[str] = []
    stack = [root]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.warning("Cannot list %s: %s", current, e)
            continue
        subdirs = []
        for entry in entries:
            try:
                # symlinked directories are not followed, so cycles are impossible
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                elif entry.is_file():
                    paths.append(entry.path)
            except OSError as e:
                logger.debug("Skipping %s: %s", entry.path, e)
        # reversed so the first subdirectory is popped first
        stack.extend(reversed(subdirs))
    return paths


def read_file(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_file(path: str, content: str) -> None:
    # write through symlinks so the link survives and its target changes
    path = os.path.realpath(path)
    directory = os.path.dirname(path)
    mode = stat.S_IMODE(os.stat(path).st_mode) if os.path.exists(path) else None
    fd, tmp = tempfile.mkstemp(prefix=".replacio-", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if mode is not None:
            os.chmod(tmp, mode)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise
