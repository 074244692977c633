"""Small text helpers for Markdown output."""

from __future__ import annotations

from ..constants import CODE_BLOCK_LANGUAGE


def escape_name(name: str) -> str:
    """Escape underscores so names outside code spans are not read as emphasis."""
    return name.replace("_", "\\_")


def render_code_block(contents: str, language: str = CODE_BLOCK_LANGUAGE) -> str:
    return f"```{language}\n{contents}\n```"
