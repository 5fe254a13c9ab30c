# tests/test_selection.py
"""Tests for entry and default file selection."""
from emilio.components.generation.models import CodeFile
from emilio.components.generation.selection import select_default_file, select_entry_file, select_file


def _files(*names):
    return [CodeFile(name=name, content=f"content of {name}") for name in names]


def test_entry_is_first_exact_index_html():
    files = _files("app.js", "index.html", "index.html")

    assert select_entry_file(files) is files[1]


def test_entry_name_must_match_exactly():
    files = _files("public/index.html", "Index.html", "index.htm")

    assert select_entry_file(files) is None


def test_default_prefers_entry_then_first_file():
    assert select_default_file(_files("a.css", "index.html")).name == "index.html"
    assert select_default_file(_files("main.dart", "pubspec.yaml")).name == "main.dart"
    assert select_default_file([]) is None


def test_select_file_by_name():
    files = _files("a.css", "b.js", "b.js")

    assert select_file(files, "b.js") is files[1]
    assert select_file(files, "c.js") is None
    assert select_file(files) is files[0]
