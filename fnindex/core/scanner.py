"""
Project traversal with script-file filtering.
"""

import os
from typing import Iterator

from .paths import get_absolute_path

EXCLUDED_DIRECTORY = "node_modules"
SCRIPT_EXTENSION = ".js"
TEST_MARKER = "test"


def is_excluded(name: str, is_file: bool) -> bool:
    """
    Check whether a directory entry is left out of the index.

    Any entry whose name contains ``node_modules`` is excluded, which prunes
    directories. Files must also be non-hidden ``.js`` files without ``test``
    in the name. Directories are never filtered by the file rule.
    """
    if EXCLUDED_DIRECTORY in name:
        return True
    if not is_file:
        return False
    return not name.endswith(SCRIPT_EXTENSION) or name.startswith(".") or TEST_MARKER in name


def iter_project_files(root: str) -> Iterator[str]:
    """
    Walk a project directory and yield canonical paths of eligible files.

    Entries are visited in sorted order. Symbolic links are not followed,
    only regular files are yielded and unreadable directories are skipped.

    Args:
        root: Directory to walk

    Yields:
        Absolute canonical file paths
    """
    root_name = os.path.basename(os.path.normpath(root))
    if is_excluded(root_name, is_file=False):
        return

    for current, dirs, files in os.walk(root):
        # Prune in place so excluded subtrees are never entered
        dirs[:] = sorted(d for d in dirs if not is_excluded(d, is_file=False))
        for name in sorted(files):
            path = os.path.join(current, name)
            if os.path.islink(path) or not os.path.isfile(path) or is_excluded(name, is_file=True):
                continue
            yield get_absolute_path(path)
