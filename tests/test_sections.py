# tests/test_sections.py
"""Tests for section scanning."""
from emilio.components.generation.blocks import extract_tagged_files
from emilio.components.generation.sections import extract_sections, scan_sections


def test_four_sections_in_order(scenario_a_text):
    sections = extract_sections(scenario_a_text)

    assert sections.header == "Hi"
    assert sections.structure == "Tree"
    assert sections.files == "```html:index.html\n<h1>Hi</h1>\n```"
    assert sections.notes == "Done"


def test_missing_markers_yield_empty_regions():
    text = "### 4.3. Code Files\n```js:a.js\nx\n```\n### 4.4. Notes\nbye"
    sections = extract_sections(text)

    assert sections.header == ""
    assert sections.structure == ""
    assert sections.files.startswith("```js:a.js")
    assert sections.notes == "bye"


def test_no_markers_at_all():
    sections = extract_sections("just some chatter")

    assert sections.header == ""
    assert sections.structure == ""
    assert sections.files == ""
    assert sections.notes == ""


def test_empty_and_none_input():
    assert extract_sections("").files == ""
    assert extract_sections(None).notes == ""


def test_heading_decoration_does_not_disturb_the_files():
    text = "### 4.3. Code Files (Full & Unabridged)\n```css:a.css\nb{}\n```"
    sections = extract_sections(text)

    assert sections.files.startswith("(Full & Unabridged)")
    files = extract_tagged_files(sections.files)
    assert [(f.name, f.content) for f in files] == [("a.css", "b{}")]


def test_text_on_the_marker_line_is_kept():
    text = "### 4.1. Header Block Hi\n### 4.2. Project Structure\nTree\n### 4.4. Notes Done"
    sections = extract_sections(text)

    assert sections.header == "Hi"
    assert sections.structure == "Tree"
    assert sections.notes == "Done"


def test_later_marker_inside_earlier_region_truncates_it():
    text = (
        "### 4.1. Header Block\n"
        "Intro, see ### 4.2. Project Structure below\n"
        "real tree\n"
        "### 4.3. Code Files\nfiles\n"
    )
    sections = extract_sections(text)

    assert sections.header == "Intro, see"
    assert sections.structure == "below\nreal tree"
    assert sections.files == "files"


def test_markers_out_of_order_are_only_found_forward():
    text = "### 4.4. Notes\nnotes first\n### 4.3. Code Files\nthe files"
    sections = extract_sections(text)

    assert sections.files == "the files"
    assert sections.notes == ""


def test_scan_reports_offsets(scenario_a_text):
    hits = scan_sections(scenario_a_text)

    assert [hit.section for hit in hits] == ["header", "structure", "files", "notes"]
    first = hits[0]
    assert first.start == 0
    assert scenario_a_text[first.body_start:].lstrip().startswith("Hi")
