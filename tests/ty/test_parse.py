"""Tests for parsing type text."""

from __future__ import annotations

import pytest

from docrender.ty import Ty, TyName, TypeParseError, parse_ty


@pytest.mark.parametrize(
    "text",
    [
        "int",
        "list[int]",
        "dict[str, list[bool]]",
        "tuple[int, ...]",
        "tuple[int, str]",
        "str | None",
        "os.PathLike",
    ],
)
def test_parse_round_trips_canonical_text(text: str) -> None:
    assert str(parse_ty(text)) == text


def test_parse_blank_and_any_text() -> None:
    assert parse_ty("").is_any()
    assert parse_ty("  ").is_any()
    assert parse_ty("typing.Any").is_any()
    assert parse_ty("Never").is_never()


def test_parse_builds_structural_variants() -> None:
    assert parse_ty("dict[str, bool]") == Ty.dict_of(Ty.name("str"), Ty.name("bool"))
    assert parse_ty("list[int] | dict[str, int]") == Ty.unions(
        [Ty.list_of(Ty.name("int")), Ty.dict_of(Ty.name("str"), Ty.name("int"))]
    )


def test_parse_keeps_unknown_generics_opaque() -> None:
    assert parse_ty("set[int]").iter_union() == (TyName("set[int]"),)


@pytest.mark.parametrize("text", ["list[int", "int]", "| int", "dict[str,]", "int $"])
def test_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(TypeParseError):
        parse_ty(text)
