"""Render documentation models to Markdown."""

from .markdown import render_doc_item, render_doc_member, render_doc_param

__all__ = ["render_doc_item", "render_doc_member", "render_doc_param"]
