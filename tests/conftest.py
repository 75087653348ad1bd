"""Shared test fixtures."""

from pathlib import Path
import sys

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from indexer import build  # noqa: E402
import index_store  # noqa: E402


PAGE = """<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
<head><title>{title}</title><style>p {{ color: red; }}</style></head>
<body><p>{body}</p></body>
</html>
"""


@pytest.fixture
def scenario_docs():
    return [
        ("a.xhtml", "glClear glClear void"),
        ("b.xhtml", "glBegin void"),
    ]


@pytest.fixture
def scenario_index(scenario_docs):
    return build(scenario_docs)


@pytest.fixture
def corpus(tmp_path):
    """Folder with two xhtml pages, a text file and a nested folder."""
    folder = tmp_path / "docs"
    folder.mkdir()
    (folder / "glClear.xhtml").write_text(PAGE.format(title="glClear", body="glClear clears buffers"))
    (folder / "glBegin.xhtml").write_text(PAGE.format(title="glBegin", body="glBegin delimits vertices"))
    (folder / "notes.txt").write_text("not markup")
    nested = folder / "es2"
    nested.mkdir()
    (nested / "glViewport.xhtml").write_text(PAGE.format(title="glViewport", body="glViewport sets the viewport"))
    return folder


@pytest.fixture
def index_file(tmp_path, scenario_index):
    path = tmp_path / "index.json"
    index_store.save(scenario_index, str(path))
    return path
