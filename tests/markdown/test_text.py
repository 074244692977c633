"""Tests for Markdown text helpers."""

from __future__ import annotations

import pytest

from docrender.markdown import escape_name, render_code_block


@pytest.mark.parametrize("name", ["plain", "max_size", "__init__", "a_b_c_", "_"])
def test_escape_name_escapes_every_underscore(name: str) -> None:
    escaped = escape_name(name)
    assert escaped.count("\\_") == name.count("_")
    assert escaped.replace("\\_", "").count("_") == 0


def test_escape_name_leaves_other_characters() -> None:
    assert escape_name("max_size") == "max\\_size"
    assert escape_name("Point.norm") == "Point.norm"


def test_render_code_block_uses_python_fence() -> None:
    assert render_code_block("x: int") == "```python\nx: int\n```"
    assert render_code_block("x", "text") == "```text\nx\n```"
