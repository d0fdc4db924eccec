"""
Exception hierarchy for the function index.
"""


class IndexerError(Exception):
    """Base class for all indexer errors."""


class ConfigurationError(IndexerError):
    """The project directory cannot be indexed as configured."""

    def __init__(self, project_dir: str, message: str):
        super().__init__(message)
        self.project_dir = project_dir


class ProjectNotFoundError(ConfigurationError):
    """Project directory does not exist."""

    def __init__(self, project_dir: str):
        super().__init__(project_dir, f"no such file or directory exists for {project_dir}")


class EmptyProjectError(ConfigurationError):
    """Traversal finished without a single eligible file."""

    def __init__(self, project_dir: str):
        super().__init__(project_dir, f"no files were found in {project_dir}")


class FileReadError(IndexerError):
    """A matched file could not be read; the indexing pass is aborted."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(f"failed to parse file {file_path}: {reason}")
        self.file_path = file_path


class IndexIntegrityError(IndexerError):
    """
    The caller and the catalog disagree about what was indexed.

    Raised for conditions that correct calling code never triggers.
    """


class UnindexedFileError(IndexIntegrityError):
    """A file expected to be in the catalog is missing from it."""

    def __init__(self, file_path: str):
        super().__init__(f"Failed to find {file_path} index record")
        self.file_path = file_path


class UndefinedImportError(IndexIntegrityError):
    """An imported symbol's target file does not define the function locally."""

    def __init__(self, function_name: str, target_path: str):
        super().__init__(f"{target_path} does not define function {function_name}")
        self.function_name = function_name
        self.target_path = target_path
