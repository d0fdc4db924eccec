"""
Cross-file function indexer.

Builds one FileIndex per script file under a project directory and answers
"where is this function defined" queries, following require() imports into
the defining file.
"""

import itertools
import logging
from typing import Dict, Iterator, List, Optional

from ..models.file_index import FileIndex, FunctionLocation, IndexStats
from .errors import (
    EmptyProjectError,
    FileReadError,
    ProjectNotFoundError,
    UndefinedImportError,
    UnindexedFileError,
)
from .parser import JavaScriptParser
from .paths import get_absolute_path, path_exists
from .scanner import iter_project_files

logger = logging.getLogger(__name__)


class Indexer:
    """
    In-memory function index for one project directory.

    The catalog maps absolute canonical file paths to FileIndex records. It is
    filled by index() and only read afterwards, so queries are safe from
    several threads once indexing has returned.
    """

    def __init__(self, project_dir: str):
        """
        Initialize the indexer. No I/O happens here.

        Args:
            project_dir: Directory to scan
        """
        self.project_dir = project_dir
        self.catalog: Dict[str, FileIndex] = {}
        self.parser = JavaScriptParser()

    def index(self) -> None:
        """
        Walk the project directory and index every eligible file.

        A failure leaves the catalog as it was before the call. A repeated
        successful call overwrites entries for paths seen again.

        Raises:
            ProjectNotFoundError: The project directory does not exist
            FileReadError: A matched file could not be read
            EmptyProjectError: No eligible files were found
        """
        if not path_exists(self.project_dir):
            raise ProjectNotFoundError(self.project_dir)

        logger.info(f"Indexing project {self.project_dir}")

        indexed: Dict[str, FileIndex] = {}
        for file_path in iter_project_files(self.project_dir):
            indexed[file_path] = self._index_file(file_path)

        if not indexed:
            raise EmptyProjectError(self.project_dir)

        self.catalog.update(indexed)
        logger.info(f"Indexed {len(indexed)} files in {self.project_dir}")

    def _index_file(self, file_path: str) -> FileIndex:
        """Read and parse one file."""
        try:
            # newline="" keeps lone carriage returns inside their line
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {file_path}: {e}")
            raise FileReadError(file_path, str(e)) from e

        return self.parser.parse(file_path, text)

    def get_file_index(self, file_path: str) -> FileIndex:
        """
        Get the FileIndex for an indexed file.

        Args:
            file_path: Path of a file that was part of the indexed tree

        Raises:
            UnindexedFileError: The file is not in the catalog
        """
        file_index = self.catalog.get(get_absolute_path(file_path))
        if file_index is None:
            logger.error(f"Failed to find {file_path} index record")
            raise UnindexedFileError(file_path)
        return file_index

    @property
    def files(self) -> List[str]:
        """Indexed file paths in sorted order."""
        return sorted(self.catalog)

    def locate_function(
        self,
        file_path: str,
        function_name: str,
        qualifier: Optional[str] = None
    ) -> Optional[FunctionLocation]:
        """
        Resolve a function reference made from ``file_path``.

        Without a qualifier the file's own definitions win. Otherwise the
        import map is consulted, keyed by the qualifier when one is given and
        by the function name when not, and ``function_name`` is looked up in
        the file the import points to.

        Args:
            file_path: File the reference is made from
            function_name: Name of the function
            qualifier: Object the function is accessed through, e.g. ``obj`` in ``obj.method``

        Returns:
            FunctionLocation, or None when the import key is unknown

        Raises:
            UnindexedFileError: The file or the import target is not in the catalog
            UndefinedImportError: The import target does not define the function
        """
        file_index = self.get_file_index(file_path)

        if qualifier is None:
            offset = file_index.find_local_fn_offset(function_name)
            if offset is not None:
                return FunctionLocation(filePath=file_index.filePath, lineNumber=offset)

        import_key = qualifier if qualifier is not None else function_name
        import_path = file_index.importedSymbols.get(import_key)
        if import_path is None:
            logger.warning(f"Unable to find function reference for {function_name} in {file_path}")
            return None

        target_index = self.get_file_index(import_path)
        offset = target_index.find_local_fn_offset(function_name)
        if offset is None:
            logger.error(f"Imported function {function_name} is not defined in {import_path}")
            raise UndefinedImportError(function_name, import_path)

        return FunctionLocation(filePath=target_index.filePath, lineNumber=offset, viaImport=True)

    def iter_fn_content(
        self,
        file_path: str,
        function_name: str,
        qualifier: Optional[str] = None
    ) -> Iterator[str]:
        """
        Iterate over source lines starting at a function's definition.

        The iterator runs to the end of the defining file; callers bound the
        function body themselves. An unresolved import key yields nothing.

        Args:
            file_path: File the reference is made from
            function_name: Name of the function
            qualifier: Optional member-access prefix used as the import key

        Returns:
            Lazy iterator of trimmed lines
        """
        location = self.locate_function(file_path, function_name, qualifier)
        if location is None:
            return iter(())

        content = self.catalog[location.filePath].content
        return itertools.islice(content, location.lineNumber, None)

    def stats(self) -> IndexStats:
        """Count indexed files, local functions and imports."""
        return IndexStats(
            files=len(self.catalog),
            functions=sum(len(f.localFunctions) for f in self.catalog.values()),
            imports=sum(len(f.importedSymbols) for f in self.catalog.values()),
        )
