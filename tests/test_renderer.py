# tests/test_renderer.py
"""Tests for preview rendering."""
from emilio.components.preview.renderer import PLACEHOLDER_HTML, PreviewRenderer


def test_entry_document_is_rewritten(document):
    renderer = PreviewRenderer()
    preview = renderer.render(document)
    handles = renderer.arena.handles

    assert preview.has_entry
    assert preview.revision == 1
    assert f'href="{handles["style.css"]}"' in preview.html
    assert f'src="{handles["app.js"]}"' in preview.html
    assert 'src="missing.js"' in preview.html


def test_missing_entry_renders_placeholder(headless_document):
    renderer = PreviewRenderer()
    preview = renderer.render(headless_document)

    assert not preview.has_entry
    assert preview.html == PLACEHOLDER_HTML
    assert "No index.html found to preview." in preview.html
    assert len(renderer.arena) == 2


def test_no_document_renders_placeholder():
    preview = PreviewRenderer().render(None)

    assert preview.html == PLACEHOLDER_HTML
    assert not preview.has_entry


def test_each_render_bumps_revision_and_replaces_assets(document, headless_document):
    renderer = PreviewRenderer()
    first = renderer.render(document)
    second = renderer.render(headless_document)

    assert second.revision == first.revision + 1
    assert renderer.current is second
    assert set(renderer.arena.handles) == {"main.dart", "pubspec.yaml"}


def test_close_revokes_assets(document):
    renderer = PreviewRenderer()
    renderer.render(document)
    renderer.close()

    assert len(renderer.arena) == 0
