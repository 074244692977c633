"""Documentation model consumed by the Markdown renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Mapping, Optional, Tuple, Union

from .ty import Ty


@dataclass(frozen=True)
class DocString:
    """Prose attached to an entity: a one-line summary plus optional details."""

    summary: str
    details: Optional[str] = None


class ParamKind(str, Enum):
    POSITIONAL_ONLY = "positional"
    POSITIONAL_OR_KEYWORD = "positional_or_keyword"
    KEYWORD_ONLY = "keyword"
    ARGS = "args"
    KWARGS = "kwargs"


@dataclass(frozen=True)
class DocParam:
    """A single parameter of a documented function."""

    name: str
    kind: ParamKind = ParamKind.POSITIONAL_OR_KEYWORD
    typ: Ty = field(default_factory=Ty.any)
    docs: Optional[DocString] = None
    default: Optional[str] = None  # source text of the default value

    @property
    def starred_name(self) -> str:
        if self.kind is ParamKind.ARGS:
            return f"*{self.name}"
        if self.kind is ParamKind.KWARGS:
            return f"**{self.name}"
        return self.name

    def render_code(self) -> str:
        text = self.starred_name
        if not self.typ.is_any():
            text += f": {self.typ}"
        if self.default is not None:
            text += f" = {self.default}"
        return text


@dataclass(frozen=True)
class DocParams:
    """Parameters in call-signature order."""

    params: Tuple[DocParam, ...] = ()

    def __iter__(self) -> Iterator[DocParam]:
        return iter(self.params)

    def __len__(self) -> int:
        return len(self.params)

    def doc_params(self) -> Iterator[DocParam]:
        """Yield the parameters that carry documentation."""
        return (param for param in self.params if param.docs is not None)

    def doc_params_with_starred_names(self) -> Iterator[Tuple[str, DocParam]]:
        return ((param.starred_name, param) for param in self.params)

    def render_code(self, indent: Optional[str] = None) -> str:
        """Render the parameter list as it appears between the parentheses.

        ``/`` follows the last positional-only parameter and a bare ``*``
        precedes the first keyword-only parameter unless ``*args`` already
        opened the keyword-only section. With ``indent`` set, every entry goes
        on its own line with a trailing comma.
        """
        entries: List[str] = []
        seen_star = False
        for index, param in enumerate(self.params):
            if param.kind is ParamKind.KEYWORD_ONLY and not seen_star:
                entries.append("*")
                seen_star = True
            if param.kind is ParamKind.ARGS:
                seen_star = True
            entries.append(param.render_code())
            if param.kind is ParamKind.POSITIONAL_ONLY:
                following = self.params[index + 1 :]
                if not following or following[0].kind is not ParamKind.POSITIONAL_ONLY:
                    entries.append("/")

        if indent is None:
            return ", ".join(entries)
        return "".join(f"{indent}{entry},\n" for entry in entries)


@dataclass(frozen=True)
class DocReturn:
    typ: Ty = field(default_factory=Ty.any)
    docs: Optional[DocString] = None


@dataclass(frozen=True)
class DocFunction:
    """A documented callable."""

    params: DocParams = field(default_factory=DocParams)
    ret: DocReturn = field(default_factory=DocReturn)
    docs: Optional[DocString] = None


@dataclass(frozen=True)
class DocProperty:
    """A documented attribute or constant."""

    typ: Ty = field(default_factory=Ty.any)
    docs: Optional[DocString] = None


DocMember = Union[DocFunction, DocProperty]


@dataclass(frozen=True)
class DocType:
    """A composite type: its own docs, an optional constructor and its members."""

    docs: Optional[DocString] = None
    constructor: Optional[DocFunction] = None
    members: Mapping[str, DocMember] = field(default_factory=dict)
    ty: Ty = field(default_factory=Ty.any)


@dataclass(frozen=True)
class DocModule:
    docs: Optional[DocString] = None
    members: Mapping[str, Union[DocFunction, DocProperty, DocType, "DocModule"]] = field(
        default_factory=dict
    )


DocItem = Union[DocModule, DocType, DocFunction, DocProperty]


def as_member(item: DocItem) -> Optional[DocMember]:
    """Collapse a module member into something renderable as a member.

    A type listed inside a module is shown as a property of that type;
    nested modules have no member form and yield ``None``.
    """
    if isinstance(item, (DocFunction, DocProperty)):
        return item
    if isinstance(item, DocType):
        return DocProperty(typ=item.ty, docs=item.docs)
    return None
