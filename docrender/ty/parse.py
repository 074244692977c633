"""Parse canonical type text (``list[int] | None``) back into :class:`Ty`."""

from __future__ import annotations

import re
from typing import List, Optional

from .model import Ty, TyAny, TyBasic, TyDict, TyList, TyName, TyTuple

_TOKEN_PATTERN = re.compile(r"\s*(\.\.\.|[A-Za-z_][A-Za-z0-9_.]*|\(\)|[\[\],|])")
_ANY_NAMES = {"Any", "typing.Any"}
_NEVER_NAMES = {"Never", "typing.Never"}


class TypeParseError(ValueError):
    """Raised when type text cannot be parsed."""


def parse_ty(text: str) -> Ty:
    """Parse ``text`` into a type; blank text means ``Any``."""
    if not text or not text.strip():
        return Ty.any()
    parser = _Parser(text, _tokenize(text))
    ty = parser.parse_union()
    if parser.peek() is not None:
        raise TypeParseError(f"Unexpected {parser.peek()!r} in type {text!r}")
    return ty


def _tokenize(text: str) -> List[str]:
    tokens: List[str] = []
    position = 0
    stripped_end = len(text.rstrip())
    while position < stripped_end:
        match = _TOKEN_PATTERN.match(text, position)
        if match is None:
            raise TypeParseError(f"Invalid character {text[position]!r} in type {text!r}")
        tokens.append(match.group(1))
        position = match.end()
    return tokens


class _Parser:
    def __init__(self, text: str, tokens: List[str]) -> None:
        self._text = text
        self._tokens = tokens
        self._index = 0

    def peek(self) -> Optional[str]:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def take(self, expected: Optional[str] = None) -> str:
        token = self.peek()
        if token is None:
            raise TypeParseError(f"Unexpected end of type {self._text!r}")
        if expected is not None and token != expected:
            raise TypeParseError(f"Expected {expected!r} but found {token!r} in type {self._text!r}")
        self._index += 1
        return token

    def parse_union(self) -> Ty:
        parts = [self.parse_basic()]
        while self.peek() == "|":
            self.take("|")
            parts.append(self.parse_basic())
        return Ty.unions(parts)

    def parse_basic(self) -> Ty:
        name = self.take()
        if not (name[0].isalpha() or name[0] == "_"):
            raise TypeParseError(f"Expected a type name but found {name!r} in type {self._text!r}")
        if name in _NEVER_NAMES:
            return Ty.never()
        if self.peek() != "[":
            if name in _ANY_NAMES:
                return Ty.any()
            return Ty.name(name)
        self.take("[")
        variant = self._parse_generic(name)
        self.take("]")
        return Ty((variant,))

    def _parse_generic(self, name: str) -> TyBasic:
        if name == "tuple":
            return self._parse_tuple()
        args = self._parse_args()
        if name == "list" and len(args) == 1:
            return TyList(args[0])
        if name == "dict" and len(args) == 2:
            return TyDict(args[0], args[1])
        if name in _ANY_NAMES:
            return TyAny()
        rendered = ", ".join(str(arg) for arg in args)
        return TyName(f"{name}[{rendered}]")

    def _parse_tuple(self) -> TyTuple:
        if self.peek() == "()":
            self.take()
            return TyTuple(())
        elems = [self.parse_union()]
        while self.peek() == ",":
            self.take(",")
            if self.peek() == "...":
                self.take()
                if len(elems) != 1:
                    raise TypeParseError(f"Variadic tuple takes one element type in {self._text!r}")
                return TyTuple.of(elems[0])
            elems.append(self.parse_union())
        return TyTuple(tuple(elems))

    def _parse_args(self) -> List[Ty]:
        args = [self.parse_union()]
        while self.peek() == ",":
            self.take(",")
            args.append(self.parse_union())
        return args
