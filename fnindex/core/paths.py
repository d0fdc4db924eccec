"""
Path helpers shared by the scanner, parser and indexer.
"""

import os


def get_absolute_path(path: str) -> str:
    """
    Canonicalize a path.

    Symlinks are resolved and relative segments collapsed. The path does not
    need to exist, so import targets that point nowhere still get a stable key.
    """
    return os.path.realpath(os.path.abspath(path))


def path_exists(path: str) -> bool:
    """Check whether anything exists at ``path``."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True

