"""
Data models for the function index.
"""

from .file_index import FileIndex, FunctionInfo, FunctionLocation, ImportInfo, IndexStats

__all__ = [
    "FileIndex",
    "FunctionInfo",
    "FunctionLocation",
    "ImportInfo",
    "IndexStats",
]
