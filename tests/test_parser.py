"""
Tests for the line-oriented JavaScript parser.
"""

import os

import pytest

from fnindex.core.parser import JavaScriptParser, resolve_import_path, split_lines


@pytest.fixture
def parser():
    return JavaScriptParser()


class TestSplitLines:
    """Test line splitting and trimming."""
    
    def test_trims_each_line(self):
        """Leading and trailing whitespace is removed, CRLF included."""
        assert split_lines("  function a() {\r\n\treturn 1\r\n}\n") == ["function a() {", "return 1", "}"]
    
    def test_terminal_newline_adds_no_line(self):
        """Only a final newline is dropped; inner blank lines stay."""
        assert split_lines("x\n\n") == ["x", ""]
        assert split_lines("x") == ["x"]
        assert split_lines("") == []


class TestFindFunctions:
    """Test function definition extraction."""
    
    def test_declaration_form(self, parser):
        """Named function declarations are captured with their offset."""
        functions = parser.find_functions(["// header", "function foo(a, b) {", "}"])
        
        assert len(functions) == 1
        assert functions[0].name == "foo"
        assert functions[0].lineNumber == 1
        assert functions[0].kind == "function"
    
    def test_assignment_form(self, parser):
        """const/let/var bindings to a parenthesis are captured from group two."""
        content = ["const bar = (x) => x", "let baz = (y) => {", "var qux = (z) => z"]
        functions = parser.find_functions(content)
        
        assert [(f.name, f.lineNumber, f.kind) for f in functions] == [
            ("bar", 0, "assignment"),
            ("baz", 1, "assignment"),
            ("qux", 2, "assignment"),
        ]
    
    def test_non_definitions_are_ignored(self, parser):
        """Lines that only resemble definitions do not register."""
        content = [
            "async function later() {",
            "const tight=(x) => x",
            "const util = require('./util')",
            "return function () {}",
            "// function commented() {",
        ]
        
        assert parser.find_functions(content) == []
    
    def test_one_definition_per_line(self, parser):
        """A line matching the declaration form is not tried against the assignment form."""
        functions = parser.find_functions(["function first() { const second = (x) => x }"])
        
        assert [f.name for f in functions] == ["first"]


class TestFindImports:
    """Test require() import extraction."""
    
    def test_destructured_import(self, parser):
        """Every destructured name shares the module path."""
        imports = parser.find_imports(["const { helper, shared } = require('./b')"])
        
        assert [(i.name, i.source) for i in imports] == [("helper", "./b"), ("shared", "./b")]
    
    def test_default_import_with_double_quotes(self, parser):
        """Plain bindings and double-quoted paths are recognized."""
        imports = parser.find_imports(['let util = require("../lib/util")'])
        
        assert [(i.name, i.source) for i in imports] == [("util", "../lib/util")]
    
    def test_destructuring_split_over_lines(self, parser):
        """Joining the lines lets a multi-line destructuring match."""
        content = ["const {", "alpha,", "beta", "} = require('./m')"]
        
        assert [i.name for i in parser.find_imports(content)] == ["alpha", "beta"]
    
    def test_trailing_comma_produces_no_empty_name(self, parser):
        """Empty names from trailing commas are dropped."""
        imports = parser.find_imports(["const { a, } = require('./m')"])
        
        assert [i.name for i in imports] == ["a"]


class TestResolveImportPath:
    """Test static import path resolution."""
    
    def test_relative_to_importing_file(self, tmp_path):
        """Paths resolve against the importing file's directory with a .js suffix."""
        importer = str(tmp_path / "src" / "a.js")
        
        resolved = resolve_import_path(importer, "../lib/util")
        
        assert resolved == os.path.realpath(str(tmp_path / "lib" / "util.js"))
    
    def test_bare_package_resolves_beside_importer(self, tmp_path):
        """Package names are treated like relative paths and need not exist."""
        importer = str(tmp_path / "a.js")
        
        assert resolve_import_path(importer, "lodash") == os.path.realpath(str(tmp_path / "lodash.js"))


class TestParse:
    """Test building a FileIndex from file text."""
    
    def test_builds_file_index(self, parser, tmp_path):
        """Functions and imports land in the FileIndex maps."""
        file_path = os.path.realpath(str(tmp_path / "a.js"))
        text = "const { helper } = require('./b')\n\n  function foo() {\n  }\n"
        
        file_index = parser.parse(file_path, text)
        
        assert file_index.filePath == file_path
        assert file_index.content == ("const { helper } = require('./b')", "", "function foo() {", "}")
        assert file_index.localFunctions == {"foo": 2}
        assert file_index.importedSymbols == {"helper": os.path.join(os.path.dirname(file_path), "b.js")}
    
    def test_duplicate_names_last_wins(self, parser, tmp_path):
        """A later definition or import of the same name replaces the earlier one."""
        text = "\n".join([
            "function twice() {}",
            "const twice = (x) => x",
            "const { dep } = require('./one')",
            "const { dep } = require('./two')",
        ])
        
        file_index = parser.parse(str(tmp_path / "a.js"), text)
        
        assert file_index.localFunctions["twice"] == 1
        assert file_index.importedSymbols["dep"].endswith(os.sep + "two.js")
