"""
Files API endpoints for browsing the index.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from ..core.errors import UnindexedFileError
from ..core.indexer import Indexer
from .deps import get_indexer, resolve_request_path

router = APIRouter()


class FileSummary(BaseModel):
    """Summary of one indexed file."""
    file_path: str
    line_count: int
    function_count: int
    import_count: int


class FileFunctionsResponse(BaseModel):
    """Functions and imports of one indexed file."""
    file_path: str
    functions: Dict[str, int]
    imports: Dict[str, str]


@router.get("/", response_model=List[FileSummary])
async def list_files(indexer: Indexer = Depends(get_indexer)) -> List[FileSummary]:
    """List indexed files with their function and import counts."""
    summaries = []
    for file_path in indexer.files:
        file_index = indexer.catalog[file_path]
        summaries.append(FileSummary(
            file_path=file_path,
            line_count=len(file_index.content),
            function_count=len(file_index.localFunctions),
            import_count=len(file_index.importedSymbols)
        ))
    return summaries


@router.get("/functions", response_model=FileFunctionsResponse)
async def get_file_functions(
    file_path: str = Query(..., description="Indexed file, absolute or relative to the project"),
    indexer: Indexer = Depends(get_indexer)
) -> FileFunctionsResponse:
    """Get local function offsets and resolved imports of a file."""
    try:
        file_index = indexer.get_file_index(resolve_request_path(indexer, file_path))
    except UnindexedFileError as e:
        raise HTTPException(status_code=404, detail=str(e))
    
    return FileFunctionsResponse(
        file_path=file_index.filePath,
        functions=dict(file_index.localFunctions),
        imports=dict(file_index.importedSymbols)
    )
