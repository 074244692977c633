"""Selection of summary/details prose from a :class:`DocString`."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..models import DocString


class DocStringMode(str, Enum):
    SUMMARY = "summary"
    DETAILS = "details"
    COMBINED = "combined"


def render_doc_string(mode: DocStringMode, docs: Optional[DocString]) -> Optional[str]:
    """Return the part of ``docs`` selected by ``mode``.

    ``COMBINED`` joins summary and details with a blank line when both exist.
    ``None`` means there is nothing to emit for that mode.
    """
    if docs is None:
        return None
    if mode is DocStringMode.SUMMARY:
        return docs.summary
    if mode is DocStringMode.DETAILS:
        return docs.details
    if docs.details is not None:
        return f"{docs.summary}\n\n{docs.details}"
    return docs.summary
