"""Call-signature rendering for documented functions."""

from __future__ import annotations

from typing import Optional

from ..config import DEFAULT_CONFIG, RenderConfig
from ..models import DocFunction
from ..ty import Ty


def raw_type_prefix(prefix: str, ty: Ty) -> str:
    """Return ``prefix`` followed by the type text, or nothing for ``Any``."""
    if ty.is_any():
        return ""
    return f"{prefix}{ty}"


def render_function_prototype(
    function_name: str,
    function: DocFunction,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render ``def name(...) -> ret`` on one line or one parameter per line.

    The multi-line form is used when more than
    ``config.max_documented_params`` parameters carry docs, or when the
    single-line form is longer than ``config.max_line_length``. Only
    documented parameters count towards the first limit.
    """
    config = config or DEFAULT_CONFIG
    ret_type = raw_type_prefix(" -> ", function.ret.typ)
    prefix = f"def {function_name}"
    single_line = f"{prefix}({function.params.render_code()}){ret_type}"

    documented = sum(1 for _ in function.params.doc_params())
    if documented > config.max_documented_params or len(single_line) > config.max_line_length:
        chunked = function.params.render_code(config.param_indent)
        return f"{prefix}(\n{chunked}){ret_type}"
    return single_line
