"""Project item types out of the declared types of ``*args``/``**kwargs``."""

from __future__ import annotations

from .model import MAPPING_SHAPES, SEQUENCE_SHAPES, Ty


def unpack_args_item_ty(ty: Ty) -> Ty:
    """Return the element type a ``*args`` binding of type ``ty`` yields.

    Sequence-like variants contribute their element type; any other variant
    degrades to ``Any`` instead of failing.
    """
    return Ty.unions(
        variant.item_ty() if isinstance(variant, SEQUENCE_SHAPES) else Ty.any()
        for variant in ty.iter_union()
    )


def unpack_kwargs_value_ty(ty: Ty) -> Ty:
    """Return the value type a ``**kwargs`` binding of type ``ty`` yields."""
    return Ty.unions(
        variant.value if isinstance(variant, MAPPING_SHAPES) else Ty.any()
        for variant in ty.iter_union()
    )
