"""Markdown rendering of documented modules, types, functions and properties."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, RenderConfig
from ..constants import DETAILS_HEADING, MEMBER_SEPARATOR, PARAMETERS_HEADING, RETURNS_HEADING
from ..logging import get_logger
from ..models import (
    DocFunction,
    DocItem,
    DocMember,
    DocModule,
    DocParam,
    DocProperty,
    DocString,
    DocType,
    as_member,
)
from .prose import DocStringMode, render_doc_string
from .prototype import render_function_prototype
from .text import escape_name, render_code_block

logger = get_logger("markdown")


def render_property(name: str, prop: DocProperty, config: Optional[RenderConfig] = None) -> str:
    config = config or DEFAULT_CONFIG
    prototype = render_code_block(f"{name}: {prop.typ}", config.code_language)
    body = f"## {escape_name(name)}\n\n{prototype}"

    # Summary and details are emitted independently rather than combined.
    summary = render_doc_string(DocStringMode.SUMMARY, prop.docs)
    details = render_doc_string(DocStringMode.DETAILS, prop.docs)
    if summary is not None:
        body += f"\n\n{summary}"
    if details is not None:
        body += f"\n\n{details}"
    return body


def render_function_parameters(params: Iterable[Tuple[str, DocParam]]) -> Optional[str]:
    """Render a bullet list for the documented entries of ``params``.

    Undocumented parameters are skipped; ``None`` means none had docs.
    Continuation lines of multi-line prose are indented under their bullet
    and every entry, the last included, ends with a newline.
    """
    lines: List[str] = []
    for name, param in params:
        if param.docs is None:
            continue
        docs = render_doc_string(DocStringMode.COMBINED, param.docs) or ""
        doc_lines = _split_lines(docs)
        if not doc_lines:
            lines.append(f"* `{name}`")
            continue
        lines.append(f"* `{name}`: {doc_lines[0]}")
        lines.extend(f"  {line}" for line in doc_lines[1:])

    if not lines:
        return None
    return "".join(f"{line}\n" for line in lines)


def _split_lines(text: str) -> List[str]:
    # Only "\n" (optionally preceded by "\r") ends a line; other Unicode
    # separators stay inside the line.
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def render_function(
    name: str,
    function: DocFunction,
    include_header: bool = True,
    config: Optional[RenderConfig] = None,
) -> str:
    config = config or DEFAULT_CONFIG
    prototype = render_code_block(
        render_function_prototype(name, function, config), config.code_language
    )
    body = f"## {escape_name(name)}\n\n{prototype}" if include_header else prototype

    summary = render_doc_string(DocStringMode.SUMMARY, function.docs)
    details = render_doc_string(DocStringMode.DETAILS, function.docs)
    parameter_docs = render_function_parameters(function.params.doc_params_with_starred_names())
    return_docs = render_doc_string(DocStringMode.COMBINED, function.ret.docs)

    if summary is not None:
        body += f"\n\n{summary}"
    if parameter_docs is not None:
        body += f"\n\n{PARAMETERS_HEADING}\n\n{parameter_docs}"
    if return_docs is not None:
        body += f"\n\n{RETURNS_HEADING}\n\n{return_docs}"
    if details is not None:
        if parameter_docs is not None or return_docs is not None:
            body += f"\n\n{DETAILS_HEADING}\n\n{details}"
        else:
            # Nothing sits between summary and details, so no heading is needed.
            body += f"\n\n{details}"
    return body


def render_members(
    name: str,
    docs: Optional[DocString],
    prefix: str,
    members: Iterable[Tuple[str, DocMember]],
    after_summary: Optional[str] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render a titled container followed by its members.

    Members are ordered by code-point comparison of their names and rendered
    under ``prefix + name``. ``after_summary`` (a type's constructor) comes
    before the members. Blocks are separated by a horizontal rule.
    """
    summary = render_doc_string(DocStringMode.COMBINED, docs)
    header = f"# {name}" if summary is None else f"# {name}\n\n{summary}"

    blocks: List[str] = [] if after_summary is None else [after_summary]
    for child, member in sorted(members, key=lambda pair: pair[0]):
        blocks.append(render_doc_member(f"{prefix}{child}", member, config))

    return f"{header}\n\n{MEMBER_SEPARATOR.join(blocks)}"


def render_doc_type(
    name: str, doc_type: DocType, config: Optional[RenderConfig] = None
) -> str:
    constructor = None
    if doc_type.constructor is not None:
        constructor = render_function(name, doc_type.constructor, include_header=False, config=config)
    return render_members(
        f"`{name}` type",
        doc_type.docs,
        f"{name}.",
        doc_type.members.items(),
        constructor,
        config,
    )


def render_doc_module(
    name: str, module: DocModule, config: Optional[RenderConfig] = None
) -> str:
    members: List[Tuple[str, DocMember]] = []
    for child, item in module.members.items():
        member = as_member(item)
        if member is None:
            logger.debug("Skipping nested module %s.%s", name, child)
            continue
        members.append((child, member))
    return render_members(name, module.docs, "", members, None, config)


def render_doc_item(name: str, item: DocItem, config: Optional[RenderConfig] = None) -> str:
    """Render a top-level module, type, function or property."""
    logger.debug("Rendering %s %s", type(item).__name__, name)
    if isinstance(item, DocModule):
        return render_doc_module(name, item, config)
    if isinstance(item, DocType):
        return render_doc_type(name, item, config)
    return render_doc_member(name, item, config)


def render_doc_member(name: str, member: DocMember, config: Optional[RenderConfig] = None) -> str:
    """Render a function or property with its ``##`` header."""
    if isinstance(member, DocFunction):
        return render_function(name, member, include_header=True, config=config)
    if isinstance(member, DocProperty):
        return render_property(name, member, config)
    raise TypeError(f"Cannot render {type(member).__name__} as a member")


def render_doc_param(starred_name: str, param: DocParam) -> str:
    """Render hover text for one parameter; empty when it has no docs."""
    return render_function_parameters([(starred_name, param)]) or ""
