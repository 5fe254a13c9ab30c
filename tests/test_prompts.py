# tests/test_prompts.py
"""Tests for prompt building."""
import pytest

from emilio.components.ai.prompts import SYSTEM_PROMPT, build_generation_prompt, get_system_prompt
from emilio.constants import FILES_MARKER, HEADER_MARKER, NOTES_MARKER, STRUCTURE_MARKER


def test_frontend_only():
    assert build_generation_prompt("HTML + CSS + JS") == "Target Frontend Stack: HTML + CSS + JS"


def test_all_parts_in_order():
    prompt = build_generation_prompt(
        "Vue + Tailwind",
        database_type="Supabase",
        user_prompt="Dark theme please",
        url="https://example.com",
    )

    assert prompt.split("\n") == [
        "User's Detailed Prompt: Dark theme please",
        "Target Frontend Stack: Vue + Tailwind",
        "Target Backend/Database: Supabase",
        "Source URL: https://example.com",
    ]


def test_backend_none_is_omitted():
    assert "Backend" not in build_generation_prompt("p5.js", database_type="None")


def test_user_prompt_is_truncated():
    prompt = build_generation_prompt("Canvas 2D", user_prompt="x" * 250)

    assert prompt.split("\n")[0] == "User's Detailed Prompt: " + "x" * 200


@pytest.mark.parametrize("frontend,backend", [
    ("COBOL", "None"),
    ("React + Tailwind", "Oracle"),
])
def test_unknown_stack_is_rejected(frontend, backend):
    with pytest.raises(ValueError):
        build_generation_prompt(frontend, database_type=backend)


def test_system_prompt_names_every_section():
    for marker in (HEADER_MARKER, STRUCTURE_MARKER, FILES_MARKER, NOTES_MARKER):
        assert marker in SYSTEM_PROMPT


def test_custom_system_prompt():
    assert get_system_prompt() == SYSTEM_PROMPT
    assert get_system_prompt("   ") == SYSTEM_PROMPT
    assert get_system_prompt("Be brief.") == "Be brief."
