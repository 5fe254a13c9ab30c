# tests/test_blocks.py
"""Tests for fenced code block scanning."""
import pytest

from emilio.components.generation.blocks import (
    extract_code_files,
    extract_fallback_file,
    extract_tagged_files,
    parse_info,
    scan_fences,
)


@pytest.mark.parametrize("info,expected", [
    ("html:index.html", (True, "html", "index.html")),
    ("javascript:src/app.js", (True, "javascript", "src/app.js")),
    ("python", (True, "python", None)),
    (":notes.txt", (True, None, "notes.txt")),
    ("", (True, None, None)),
    ("html index.html", (False, None, None)),
    ("js:", (False, None, None)),
])
def test_parse_info(info, expected):
    assert parse_info(info) == expected


def test_n_tagged_blocks_in_source_order():
    region = (
        "```html:index.html\n<h1>x</h1>\n```\n\n"
        "Some prose between blocks.\n\n"
        "```css:style.css\nbody {}\n```\n"
        "```javascript:app.js\n\n  console.log(1);  \n\n```"
    )
    files = extract_tagged_files(region)

    assert [(f.name, f.lang) for f in files] == [
        ("index.html", "html"),
        ("style.css", "css"),
        ("app.js", "javascript"),
    ]
    assert files[0].content == "<h1>x</h1>"
    assert files[2].content == "console.log(1);"


def test_missing_tokens_default_to_text_and_untitled():
    files = extract_tagged_files("```\nplain words\n```\n```python\nx = 1\n```\n```:notes.txt\nhi\n```")

    assert [(f.name, f.lang) for f in files] == [
        ("untitled", "text"),
        ("untitled", "python"),
        ("notes.txt", "text"),
    ]


def test_malformed_fence_is_skipped_without_breaking_the_next_block():
    region = "```html index.html\n<p>bad</p>\n```\n```css:ok.css\na {}\n```"
    files = extract_tagged_files(region)

    assert len(files) == 1
    assert files[0].name == "ok.css"
    assert files[0].content == "a {}"


def test_markdown_file_with_nested_fences_is_kept_whole():
    region = "```markdown:README.md\n# App\n```bash\nnpm i\n```\n```\n```js:app.js\nx\n```"
    files = extract_tagged_files(region)

    assert [(f.name, f.lang) for f in files] == [("README.md", "markdown"), ("app.js", "js")]
    assert files[0].content == "# App\n```bash\nnpm i\n```"
    assert files[1].content == "x"


def test_unbalanced_nesting_closes_at_the_first_bare_fence():
    region = "```js:a.js\nconst a = 1;\n```css:b.css\nbody {}\n```\ntrailing"
    files = extract_tagged_files(region)

    assert [f.name for f in files] == ["a.js"]
    assert files[0].content == "const a = 1;\n```css:b.css\nbody {}"


def test_block_without_closing_fence_is_dropped():
    assert scan_fences("```js:a.js\nconst a = 1;\n") == []


def test_closing_fence_may_be_indented():
    files = extract_tagged_files("```js:a.js\nlet x;\n   ```   ")

    assert files[0].content == "let x;"


def test_inline_fence_is_a_malformed_block():
    blocks = scan_fences("```npm install```")

    assert len(blocks) == 1
    assert blocks[0].body == "npm install"
    assert not blocks[0].well_formed


def test_scan_records_line_numbers():
    blocks = scan_fences("intro\n\n```js:a.js\n1\n```")

    assert blocks[0].line == 3


def test_fallback_ignores_the_fence_tag():
    fallback = extract_fallback_file("prose\n```python:main.py\nprint(1)\n```\n```js\nlater\n```")

    assert fallback.name == "code.js"
    assert fallback.lang == "javascript"
    assert fallback.content == "print(1)"


def test_fallback_is_none_without_any_block():
    assert extract_fallback_file("no code here") is None


def test_extract_code_files_prefers_the_files_region():
    raw = "```js\nelsewhere\n```\n### 4.3. Code Files\n```css:a.css\nb {}\n```"
    files = extract_code_files("```css:a.css\nb {}\n```", raw)

    assert [f.name for f in files] == ["a.css"]


def test_extract_code_files_falls_back_to_the_whole_response():
    raw = "### 4.3. Code Files\nnothing\n### 4.4. Notes\n```\nconsole.log(1)\n```"
    files = extract_code_files("nothing", raw)

    assert len(files) == 1
    assert files[0].name == "code.js"
    assert files[0].content == "console.log(1)"
