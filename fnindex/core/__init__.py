"""
Core indexing logic for the function index.
"""

from .errors import (
    ConfigurationError,
    EmptyProjectError,
    FileReadError,
    IndexerError,
    IndexIntegrityError,
    ProjectNotFoundError,
    UndefinedImportError,
    UnindexedFileError,
)
from .indexer import Indexer
from .parser import JavaScriptParser

__all__ = [
    "ConfigurationError",
    "EmptyProjectError",
    "FileReadError",
    "IndexerError",
    "IndexIntegrityError",
    "Indexer",
    "JavaScriptParser",
    "ProjectNotFoundError",
    "UndefinedImportError",
    "UnindexedFileError",
]
