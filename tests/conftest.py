"""
Shared fixtures: small require()-style project trees.
"""

from pathlib import Path

import pytest


def write(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


A_JS = """// entry point
const { helper, shared } = require('./b')
const util = require('./lib/util')
function foo() { return 1; }
const bar = (x) => {
  return x + 1
}
function run() {
  return util.format(helper())
}
"""

B_JS = """'use strict'

// helpers used by a.js


function helper() {
  return 2
}
function shared() { return 3; }
"""

UTIL_JS = """function format(value) {
  return String(value)
}
module.exports = { format }
"""

SHADOW_JS = """const { helper } = require('./b')
function helper() { return 'local'; }
"""

BROKEN_JS = """const { ghost } = require('./b')
const pkg = require('lodash')
"""


@pytest.fixture
def js_project(tmp_path):
    """A project with local definitions, imports, and files that must be skipped."""
    root = tmp_path / "project"
    write(root, "a.js", A_JS)
    write(root, "b.js", B_JS)
    write(root, "lib/util.js", UTIL_JS)
    write(root, "shadow.js", SHADOW_JS)
    write(root, "broken.js", BROKEN_JS)
    write(root, "tests/keep.js", "function kept() {}\n")

    # Skipped by the filter
    write(root, "a.test.js", "function skippedTest() {}\n")
    write(root, "latest.js", "function skippedLatest() {}\n")
    write(root, ".eslintrc.js", "function skippedHidden() {}\n")
    write(root, "README.md", "# readme\n")
    write(root, "node_modules/dep/index.js", "function skippedDep() {}\n")
    write(root, "vendor/old_node_modules/x.js", "function skippedVendored() {}\n")
    return root
