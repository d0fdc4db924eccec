"""
Per-file index models: local function offsets and resolved imports.
"""

from typing import Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class FunctionInfo(BaseModel):
    """A function definition found on a single source line."""
    
    name: str = Field(..., description="Function identifier")
    lineNumber: int = Field(..., ge=0, description="Zero-based line offset of the definition")
    kind: str = Field(..., description="'function' for declarations, 'assignment' for const/let/var bindings")
    
    @field_validator('kind')
    @classmethod
    def validate_kind(cls, v):
        """Validate definition kind."""
        if v not in ['function', 'assignment']:
            raise ValueError("Kind must be 'function' or 'assignment'")
        return v


class ImportInfo(BaseModel):
    """A symbol bound by a require() call."""
    
    name: str = Field(..., description="Local name of the imported symbol")
    source: str = Field(..., description="Module path as written, e.g. './lib/util'")


class FileIndex(BaseModel):
    """Indexed state of one script file."""
    
    model_config = ConfigDict(frozen=True)
    
    filePath: str = Field(..., description="Absolute canonical path of the file")
    content: Tuple[str, ...] = Field(default_factory=tuple, description="Trimmed source lines")
    localFunctions: Dict[str, int] = Field(default_factory=dict, description="Function name to line offset")
    importedSymbols: Dict[str, str] = Field(default_factory=dict, description="Imported name to candidate file path")
    
    @field_validator('localFunctions')
    @classmethod
    def validate_offsets(cls, v, info: ValidationInfo):
        """Every offset must point into this file's content."""
        content = info.data.get('content', ())
        for name, offset in v.items():
            if not 0 <= offset < len(content):
                raise ValueError(f"Offset {offset} for {name} is outside of {len(content)} lines")
        return v
    
    def find_local_fn_offset(self, function_name: str):
        """Return the line offset of a locally defined function, or None."""
        return self.localFunctions.get(function_name)


class FunctionLocation(BaseModel):
    """Where a queried function is defined."""
    
    filePath: str = Field(..., description="File that defines the function")
    lineNumber: int = Field(..., description="Zero-based line offset of the definition")
    viaImport: bool = Field(False, description="Whether resolution went through the import map")


class IndexStats(BaseModel):
    """Catalog totals."""
    
    files: int = 0
    functions: int = 0
    imports: int = 0
