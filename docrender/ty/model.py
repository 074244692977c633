"""Type values: ordered unions of structural variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union


@dataclass(frozen=True)
class TyAny:
    """A variant carrying no shape information."""

    def __str__(self) -> str:
        return "Any"


@dataclass(frozen=True)
class TyName:
    """An opaque named type such as ``int`` or ``str``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TyList:
    """Sequence-like variant with a single element type."""

    item: Ty

    def item_ty(self) -> Ty:
        return self.item

    def __str__(self) -> str:
        return f"list[{self.item}]"


@dataclass(frozen=True)
class TyTuple:
    """Sequence-like variant; ``variadic`` marks the ``tuple[T, ...]`` form."""

    elems: Tuple[Ty, ...]
    variadic: bool = False

    @classmethod
    def of(cls, item: Ty) -> TyTuple:
        return cls((item,), variadic=True)

    def item_ty(self) -> Ty:
        return Ty.unions(self.elems)

    def __str__(self) -> str:
        if self.variadic:
            return f"tuple[{self.elems[0]}, ...]"
        if not self.elems:
            return "tuple[()]"
        return "tuple[{}]".format(", ".join(str(elem) for elem in self.elems))


@dataclass(frozen=True)
class TyDict:
    """Mapping-like variant."""

    key: Ty
    value: Ty

    def __str__(self) -> str:
        return f"dict[{self.key}, {self.value}]"


TyBasic = Union[TyAny, TyName, TyList, TyTuple, TyDict]

SEQUENCE_SHAPES = (TyList, TyTuple)
MAPPING_SHAPES = (TyDict,)


@dataclass(frozen=True)
class Ty:
    """An ordered, duplicate-free union of :data:`TyBasic` variants.

    A single-variant union is an ordinary type; the empty union is ``Never``.
    Values compare structurally, so two separately built ``list[int]`` types
    are equal and collapse to one variant inside a union.
    """

    variants: Tuple[TyBasic, ...] = ()

    @classmethod
    def any(cls) -> Ty:
        return cls((TyAny(),))

    @classmethod
    def never(cls) -> Ty:
        return cls(())

    @classmethod
    def name(cls, name: str) -> Ty:
        return cls((TyName(name),))

    @classmethod
    def list_of(cls, item: Ty) -> Ty:
        return cls((TyList(item),))

    @classmethod
    def tuple_of(cls, item: Ty) -> Ty:
        return cls((TyTuple.of(item),))

    @classmethod
    def dict_of(cls, key: Ty, value: Ty) -> Ty:
        return cls((TyDict(key, value),))

    @classmethod
    def unions(cls, types: Iterable[Ty]) -> Ty:
        """Flatten ``types`` into one union, keeping first-seen order."""
        seen: set[TyBasic] = set()
        ordered: List[TyBasic] = []
        for ty in types:
            for variant in ty.variants:
                if variant in seen:
                    continue
                seen.add(variant)
                ordered.append(variant)
        return cls(tuple(ordered))

    def is_any(self) -> bool:
        return self.variants == (TyAny(),)

    def is_never(self) -> bool:
        return not self.variants

    def iter_union(self) -> Tuple[TyBasic, ...]:
        return self.variants

    def __str__(self) -> str:
        if not self.variants:
            return "Never"
        return " | ".join(str(variant) for variant in self.variants)
