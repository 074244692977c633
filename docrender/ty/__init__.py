"""Type values consumed by the renderer and the variadic unpack helpers."""

from .model import Ty, TyAny, TyBasic, TyDict, TyList, TyName, TyTuple
from .parse import TypeParseError, parse_ty
from .unpack import unpack_args_item_ty, unpack_kwargs_value_ty

__all__ = [
    "Ty",
    "TyAny",
    "TyBasic",
    "TyDict",
    "TyList",
    "TyName",
    "TyTuple",
    "TypeParseError",
    "parse_ty",
    "unpack_args_item_ty",
    "unpack_kwargs_value_ty",
]
