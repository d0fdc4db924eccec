"""
Tests for data models.
"""

import pytest
from pydantic import ValidationError

from fnindex.models.file_index import FileIndex, FunctionInfo, FunctionLocation, ImportInfo


class TestFunctionInfo:
    """Test FunctionInfo model."""
    
    def test_function_info_creation(self):
        """Test creating a function definition record."""
        info = FunctionInfo(name="helper", lineNumber=5, kind="function")
        
        assert info.name == "helper"
        assert info.lineNumber == 5
        assert info.kind == "function"
    
    def test_invalid_kind(self):
        """Test that unknown definition kinds are rejected."""
        with pytest.raises(ValidationError):
            FunctionInfo(name="helper", lineNumber=0, kind="method")
    
    def test_negative_line_number(self):
        """Test that offsets are zero-based and non-negative."""
        with pytest.raises(ValidationError):
            FunctionInfo(name="helper", lineNumber=-1, kind="function")


class TestImportInfo:
    """Test ImportInfo model."""
    
    def test_import_creation(self):
        """Test creating an import."""
        imp = ImportInfo(name="helper", source="./lib/helpers")
        
        assert imp.name == "helper"
        assert imp.source == "./lib/helpers"


class TestFileIndex:
    """Test FileIndex model."""
    
    def test_file_index_creation(self):
        """Test creating a file index with functions and imports."""
        file_index = FileIndex(
            filePath="/project/a.js",
            content=["const { helper } = require('./b')", "function foo() {", "}"],
            localFunctions={"foo": 1},
            importedSymbols={"helper": "/project/b.js"}
        )
        
        assert file_index.content == ("const { helper } = require('./b')", "function foo() {", "}")
        assert file_index.find_local_fn_offset("foo") == 1
        assert file_index.find_local_fn_offset("helper") is None
        assert file_index.importedSymbols["helper"] == "/project/b.js"
    
    def test_offset_outside_content(self):
        """Test that offsets must index into the file's own content."""
        with pytest.raises(ValidationError):
            FileIndex(filePath="/project/a.js", content=["function foo() {}"], localFunctions={"foo": 1})
    
    def test_file_index_is_frozen(self):
        """Test that a built file index cannot be reassigned."""
        file_index = FileIndex(filePath="/project/a.js", content=["x"])
        
        with pytest.raises(ValidationError):
            file_index.content = ("y",)
    
    def test_empty_file(self):
        """Test that empty files produce empty maps."""
        file_index = FileIndex(filePath="/project/empty.js")
        
        assert file_index.content == ()
        assert file_index.localFunctions == {}
        assert file_index.importedSymbols == {}


class TestFunctionLocation:
    """Test FunctionLocation model."""
    
    def test_defaults_to_local(self):
        location = FunctionLocation(filePath="/project/a.js", lineNumber=3)
        
        assert location.viaImport is False
