"""Markdown rendering for the documentation model."""

from .prose import DocStringMode, render_doc_string
from .prototype import render_function_prototype
from .render import (
    render_doc_item,
    render_doc_member,
    render_doc_module,
    render_doc_param,
    render_doc_type,
    render_function,
    render_function_parameters,
    render_members,
    render_property,
)
from .text import escape_name, render_code_block

__all__ = [
    "DocStringMode",
    "escape_name",
    "render_code_block",
    "render_doc_item",
    "render_doc_member",
    "render_doc_module",
    "render_doc_param",
    "render_doc_string",
    "render_doc_type",
    "render_function",
    "render_function_parameters",
    "render_function_prototype",
    "render_members",
    "render_property",
]
