"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from docrender.cli import _build_parser, main

MODEL = """
name: geo
kind: module
docs: Geometry helpers.
members:
  max_size:
    kind: property
    type: int
    docs: Maximum size.
  Point:
    kind: type
    members:
      scale:
        kind: function
        params:
          - name: factor
            type: float
            docs: Multiplier.
          - name: rest
            kind: args
"""


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()
    before = parser.parse_args(["--verbose", "render", "model.yml"])
    after = parser.parse_args(["render", "model.yml", "--verbose"])

    assert before.verbose is True
    assert after.verbose is True
    assert after.command == "render"


def test_param_command_reaches_method_of_type_in_module(
    write_model: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_model("geo.yml", MODEL)

    main(["-q", "param", str(path), "Point.scale", "factor"])

    assert capsys.readouterr().out == "* `factor`: Multiplier.\n"


def test_render_member_of_type_in_module(
    write_model: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_model("geo.yml", MODEL)

    main(["-q", "render", str(path), "--member", "Point.scale"])

    assert capsys.readouterr().out.startswith(
        "## Point.scale\n\n```python\ndef Point.scale(factor: float, *rest)\n```"
    )


def test_param_command_rejects_path_through_property(
    write_model: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_model("geo.yml", MODEL)

    with pytest.raises(SystemExit) as excinfo:
        main(["-q", "param", str(path), "max_size.scale", "factor"])

    assert excinfo.value.code == 1
    assert "geo has no member max_size.scale" in capsys.readouterr().err


def test_render_prints_markdown(
    write_model: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_model("geo.yml", MODEL)

    main(["--quiet", "render", str(path)])

    out = capsys.readouterr().out
    assert out.startswith("# geo\n\nGeometry helpers.\n\n## Point\n")
    assert "## max\\_size" in out


def test_render_single_member_of_type(
    write_model: Callable[[str, str], Path], tmp_path: Path
) -> None:
    type_path = write_model(
        "Point.yml",
        """
        kind: type
        members:
          scale:
            kind: function
            docs: Scale it.
        """,
    )
    output = tmp_path / "out.md"

    main(["-q", "render", str(type_path), "--member", "scale", "--output", str(output)])

    assert output.read_text(encoding="utf-8") == (
        "## Point.scale\n\n```python\ndef Point.scale()\n```\n\nScale it.\n"
    )


def test_render_uses_config_next_to_model(
    write_model: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    write_model(".docrender.yml", "code_block:\n  language: text\n")
    path = write_model("flag.yml", "kind: property\ntype: bool\n")

    main(["-q", "render", str(path)])

    assert capsys.readouterr().out == "## flag\n\n```text\nflag: bool\n```\n"


def test_param_command_renders_hover_text(
    write_model: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_model(
        "scale.yml",
        """
        kind: function
        params:
          - name: factor
            docs:
              summary: Multiplier.
              details: Must be positive.
        """,
    )

    main(["-q", "param", str(path), ".", "factor"])

    assert capsys.readouterr().out == "* `factor`: Multiplier.\n  \n  Must be positive.\n"


def test_unknown_member_exits_with_error(write_model: Callable[[str, str], Path]) -> None:
    path = write_model("geo.yml", MODEL)

    with pytest.raises(SystemExit) as excinfo:
        main(["-q", "render", str(path), "--member", "missing"])

    assert excinfo.value.code == 1


def test_invalid_model_exits_with_error(
    write_model: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_model("bad.yml", "kind: widget\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["-q", "render", str(path)])

    assert excinfo.value.code == 1
    assert "docrender render failed" in capsys.readouterr().err


def test_non_utf8_model_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "latin1.yml"
    path.write_bytes("kind: property\ndocs: caf\xe9\n".encode("latin-1"))

    with pytest.raises(SystemExit) as excinfo:
        main(["-q", "render", str(path)])

    assert excinfo.value.code == 1
    assert "is not UTF-8 text" in capsys.readouterr().err


def test_directory_as_model_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    model_dir = tmp_path / "models.yml"
    model_dir.mkdir()

    with pytest.raises(SystemExit) as excinfo:
        main(["-q", "render", str(model_dir)])

    assert excinfo.value.code == 1
    assert "cannot read" in capsys.readouterr().err
