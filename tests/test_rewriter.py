# tests/test_rewriter.py
"""Tests for entry document reference rewriting."""
from emilio.components.preview.rewriter import rewrite_references

HANDLES = {
    "app.js": "http://127.0.0.1:8765/assets/tok1/app.js",
    "style.css": "http://127.0.0.1:8765/assets/tok2/style.css",
    "img/logo.svg": "http://127.0.0.1:8765/assets/tok3/img/logo.svg",
}


def test_relative_reference_is_replaced_and_missing_left_alone():
    html = '<script src="./app.js"></script><script src="missing.js"></script>'
    rewritten = rewrite_references(html, HANDLES)

    assert 'src="http://127.0.0.1:8765/assets/tok1/app.js"' in rewritten
    assert 'src="missing.js"' in rewritten


def test_leading_slash_and_single_quotes():
    html = "<link rel='stylesheet' href='/style.css'>"

    assert rewrite_references(html, HANDLES) == (
        '<link rel=\'stylesheet\' href="http://127.0.0.1:8765/assets/tok2/style.css">'
    )


def test_nested_path_matches_exact_name():
    html = '<img src="img/logo.svg"><img src="logo.svg">'
    rewritten = rewrite_references(html, HANDLES)

    assert 'src="http://127.0.0.1:8765/assets/tok3/img/logo.svg"' in rewritten
    assert '<img src="logo.svg">' in rewritten


def test_external_urls_are_untouched():
    html = '<script src="https://cdn.tailwindcss.com"></script><a href="#top">top</a>'

    assert rewrite_references(html, HANDLES) == html


def test_rewriting_is_idempotent():
    html = '<link href="./style.css"><script src="app.js"></script><script src="missing.js"></script>'
    once = rewrite_references(html, HANDLES)

    assert rewrite_references(once, HANDLES) == once


def test_relative_handles_do_not_rematch():
    handles = {"app.js": "/assets/abc/app.js"}
    once = rewrite_references('<script src="app.js"></script>', handles)

    assert once == '<script src="/assets/abc/app.js"></script>'
    assert rewrite_references(once, handles) == once
