"""JSON formatter for cpxlens."""

import json
from dataclasses import asdict

from ..complexity.tree_file import TreeFile
from ..complexity.tree_folder import TreeFolder
from ..complexity.tree_method import TreeMethod
from .base import BaseFormatter


def method_record(method: TreeMethod, file_path: str = "") -> dict:
    """The per-method record handed to report renderers."""
    return {
        "name": method.name,
        "file": file_path or method.filename,
        "line": method.line,
        "cognitive": method.cpx_index,
        "cyclomatic": method.cyclomatic_cpx,
        "cognitive_status": method.cognitive_status.value,
        "cyclomatic_status": method.cyclomatic_status.value,
        "displayed_code": method.displayed_code.text,
    }


def file_record(tree_file: TreeFile) -> dict:
    return {
        "path": tree_file.relative_path or tree_file.path.as_posix(),
        "language": tree_file.language,
        "stats": tree_file.stats.to_dict(),
        "methods": [method_record(m, tree_file.relative_path) for m in tree_file.methods],
        "failures": [asdict(f) for f in tree_file.failures],
    }


class JsonFormatter(BaseFormatter):
    """Render the analysis as JSON."""

    def render(self, folder: TreeFolder) -> None:
        print(self.format(folder))

    def format(self, folder: TreeFolder) -> str:
        data = {
            "stats": folder.stats.to_dict(),
            "files": [file_record(f) for f in folder.all_files()],
        }
        return json.dumps(data, indent=2)

    def format_file(self, tree_file: TreeFile) -> str:
        return json.dumps(file_record(tree_file), indent=2)
