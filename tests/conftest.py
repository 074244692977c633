from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from docrender.models import (
    DocFunction,
    DocModule,
    DocParam,
    DocParams,
    DocProperty,
    DocReturn,
    DocString,
    DocType,
)
from docrender.ty import Ty


@pytest.fixture
def write_model(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a dedented model document into tmp_path and return its path."""

    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_module() -> DocModule:
    """A small module with a type, a function and a property."""
    point = DocType(
        docs=DocString("A 2D point."),
        constructor=DocFunction(
            params=DocParams(
                (
                    DocParam("x", typ=Ty.name("int")),
                    DocParam("y", typ=Ty.name("int")),
                )
            ),
            ret=DocReturn(Ty.name("Point")),
        ),
        members={
            "norm": DocFunction(ret=DocReturn(Ty.name("float")), docs=DocString("Length.")),
            "x": DocProperty(Ty.name("int")),
        },
        ty=Ty.name("Point"),
    )
    return DocModule(
        docs=DocString("Geometry helpers.", "Shapes and distances."),
        members={
            "zoom": DocFunction(
                params=DocParams((DocParam("factor", typ=Ty.name("float")),)),
                docs=DocString("Scale everything."),
            ),
            "Point": point,
            "max_size": DocProperty(Ty.name("int"), DocString("Maximum size.")),
            "nested": DocModule(),
        },
    )
