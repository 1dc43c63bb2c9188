"""Tests for the rich and JSON report formatters."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from cpxlens.complexity.tree_file import MethodFailure, TreeFile, TreeFileService
from cpxlens.complexity.tree_folder import TreeFolder, TreeFolderService
from cpxlens.formatters import JsonFormatter, RichFormatter, get_formatter
from cpxlens.formatters.json_formatter import method_record
from cpxlens.scanning.treesitter_parser import TreeSitterParser

_parser = TreeSitterParser()

SOURCE = b"""\
function h(a, b, c) {
  if (a && b || c) {
    return 1;
  }
  return 0;
}

function g() {
  return 2;
}
"""


@pytest.fixture
def folder(tmp_path):
    if not _parser.is_language_supported("javascript"):
        pytest.skip("tree-sitter javascript grammar not installed")
    (tmp_path / "app.js").write_bytes(SOURCE)
    service = TreeFolderService(file_service=TreeFileService(parser=_parser))
    return service.generate_tree(tmp_path)


def empty_folder(tmp_path):
    tree_file = TreeFile(path=tmp_path / "broken.js", language="javascript", relative_path="broken.js")
    tree_file.failures.append(MethodFailure(name="f", line=3, reason="node offset outside of method code"))
    folder = TreeFolder(path=tmp_path, files=[tree_file])
    folder.stats = TreeFolderService().calculate_stats(folder)
    return folder


def render(formatter_call):
    buffer = io.StringIO()
    formatter_call(Console(file=buffer, width=120))
    return buffer.getvalue()


class TestGetFormatter:
    """Test formatter lookup."""

    def test_known(self):
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("rich"), RichFormatter)

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_formatter("xml")


class TestJsonFormatter:
    """Test the JSON report structure."""

    def test_structure(self, folder):
        data = json.loads(JsonFormatter().format(folder))
        assert data["stats"]["number_of_methods"] == 2
        assert data["stats"]["number_of_methods_by_status"]["cognitive"]["correct"] == 2
        record = data["files"][0]
        assert record["path"] == "app.js"
        assert record["language"] == "javascript"
        assert [m["name"] for m in record["methods"]] == ["h", "g"]
        assert record["failures"] == []

    def test_method_record(self, folder):
        method = next(folder.all_methods())
        record = method_record(method, "app.js")
        assert record == {
            "name": "h",
            "file": "app.js",
            "line": 1,
            "cognitive": 4,
            "cyclomatic": 2,
            "cognitive_status": "CORRECT",
            "cyclomatic_status": "CORRECT",
            "displayed_code": method.displayed_code.text,
        }
        assert "// +4 Complexity index (+3 basic, +1 structural)" in record["displayed_code"]

    def test_failures(self, tmp_path):
        data = json.loads(JsonFormatter().format(empty_folder(tmp_path)))
        assert data["files"][0]["failures"] == [
            {"name": "f", "line": 3, "reason": "node offset outside of method code"}
        ]
        assert data["stats"]["number_of_methods"] == 0


class TestRichFormatter:
    """Test the terminal report."""

    def test_render(self, folder):
        output = render(lambda console: RichFormatter(console).render(folder))
        assert "Methods evaluated: 2" in output
        assert "Methods by status" in output
        assert "Cognitive complexity distribution" in output
        assert "app.js:1" in output

    def test_render_failures(self, tmp_path):
        output = render(lambda console: RichFormatter(console).render(empty_folder(tmp_path)))
        assert "No methods found" in output
        assert "1 method(s) could not be evaluated" in output
        assert "broken.js:3 f" in output

    def test_explain(self, folder):
        tree_file = folder.files[0]
        output = render(lambda console: RichFormatter(console).render_explain(tree_file, "h"))
        assert "Complexity index" in output
        assert "function g" not in output

    def test_explain_unknown_method(self, folder):
        tree_file = folder.files[0]
        output = render(lambda console: RichFormatter(console).render_explain(tree_file, "zzz"))
        assert "No method named 'zzz'" in output

    def test_format_returns_empty_string(self, tmp_path):
        formatter = RichFormatter(Console(file=io.StringIO()))
        assert formatter.format(TreeFolder(path=Path(tmp_path))) == ""
