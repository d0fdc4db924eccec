"""
Function lookup API endpoints.
"""

import itertools
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel

from ..core.errors import UndefinedImportError, UnindexedFileError
from ..core.indexer import Indexer
from .deps import get_indexer, resolve_request_path

router = APIRouter()


class FunctionContentResponse(BaseModel):
    """Response model for a function lookup."""
    file_path: str
    function_name: str
    qualifier: Optional[str] = None
    found: bool
    definition_path: Optional[str] = None
    line_number: Optional[int] = None
    via_import: bool = False
    lines: List[str] = []


@router.get("/content", response_model=FunctionContentResponse)
async def get_function_content(
    request: Request,
    file_path: str = Query(..., description="File the function is referenced from"),
    function_name: str = Query(..., description="Function name"),
    qualifier: Optional[str] = Query(None, description="Object the function is accessed through"),
    limit: Optional[int] = Query(None, gt=0, description="Maximum number of lines returned"),
    indexer: Indexer = Depends(get_indexer)
) -> FunctionContentResponse:
    """
    Return source lines starting at a function's definition.

    Lines run towards the end of the defining file and are cut at ``limit``.
    """
    if limit is None:
        limit = request.app.state.settings.max_lines
    path = resolve_request_path(indexer, file_path)
    
    try:
        location = indexer.locate_function(path, function_name, qualifier)
    except UnindexedFileError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UndefinedImportError as e:
        raise HTTPException(status_code=409, detail=str(e))
    
    if location is None:
        return FunctionContentResponse(
            file_path=file_path,
            function_name=function_name,
            qualifier=qualifier,
            found=False
        )
    
    content = indexer.catalog[location.filePath].content
    lines = list(itertools.islice(content, location.lineNumber, location.lineNumber + limit))
    
    return FunctionContentResponse(
        file_path=file_path,
        function_name=function_name,
        qualifier=qualifier,
        found=True,
        definition_path=location.filePath,
        line_number=location.lineNumber,
        via_import=location.viaImport,
        lines=lines
    )
