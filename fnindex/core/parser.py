"""
Line-oriented JavaScript scanner for function definitions and require() imports.
"""

import logging
import os
import re
from typing import List

from ..models.file_index import FileIndex, FunctionInfo, ImportInfo
from .paths import get_absolute_path

logger = logging.getLogger(__name__)

FUNCTION_PATTERN = r"^\s*function\s+(\w*)\s*\("
ASSIGNMENT_PATTERN = r"^\s*(const|let|var)\s+(\w*)\s+=\s+\("
IMPORT_PATTERN = r"""(const|let|var)\s*\{?([\s\w,]+)\}?\s*=\s*require\(['"]([\w\./]+)['"]\)"""

MODULE_EXTENSION = ".js"


def split_lines(text: str) -> List[str]:
    """Split source text into stripped lines; a terminal newline adds no line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.strip() for line in lines]


def resolve_import_path(file_path: str, source: str) -> str:
    """
    Resolve a require() path against the importing file's directory.

    Only the ``.js`` suffix is tried: bare package names and directory
    ``index.js`` modules resolve to paths that usually do not exist.
    """
    parent = os.path.dirname(file_path)
    return get_absolute_path(os.path.join(parent, f"{source}{MODULE_EXTENSION}"))


class JavaScriptParser:
    """Extracts function offsets and imports from trimmed source lines."""

    def __init__(self):
        self.function_re = re.compile(FUNCTION_PATTERN)
        self.assignment_re = re.compile(ASSIGNMENT_PATTERN)
        self.import_re = re.compile(IMPORT_PATTERN)

    def find_functions(self, content: List[str]) -> List[FunctionInfo]:
        """
        Find function definitions, one per line at most.

        The declaration form is tried before the assignment form.

        Args:
            content: Trimmed source lines

        Returns:
            Definitions in line order, duplicates included
        """
        functions = []
        for line_number, line in enumerate(content):
            match = self.function_re.match(line)
            if match:
                functions.append(FunctionInfo(name=match.group(1), lineNumber=line_number, kind="function"))
                continue
            match = self.assignment_re.match(line)
            if match:
                functions.append(FunctionInfo(name=match.group(2), lineNumber=line_number, kind="assignment"))
        return functions

    def find_imports(self, content: List[str]) -> List[ImportInfo]:
        """
        Find require() bindings in the joined file text.

        Each destructured name becomes its own ImportInfo sharing the source.
        """
        imports = []
        for match in self.import_re.finditer("\n".join(content)):
            source = match.group(3)
            for name in match.group(2).split(","):
                name = name.strip()
                if name:
                    imports.append(ImportInfo(name=name, source=source))
        return imports

    def parse(self, file_path: str, text: str) -> FileIndex:
        """
        Build the FileIndex for one file.

        Later definitions and imports of the same name overwrite earlier ones.

        Args:
            file_path: Absolute canonical path of the file
            text: Raw file content

        Returns:
            FileIndex for the file
        """
        content = split_lines(text)

        local_functions = {}
        for function in self.find_functions(content):
            local_functions[function.name] = function.lineNumber

        imported_symbols = {}
        for imported in self.find_imports(content):
            imported_symbols[imported.name] = resolve_import_path(file_path, imported.source)

        logger.debug(
            f"Parsed {file_path}: {len(local_functions)} functions, {len(imported_symbols)} imports"
        )
        return FileIndex(
            filePath=file_path,
            content=tuple(content),
            localFunctions=local_functions,
            importedSymbols=imported_symbols,
        )
