"""Build documentation models from YAML or JSON documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from .logging import get_logger
from .models import (
    DocFunction,
    DocItem,
    DocModule,
    DocParam,
    DocParams,
    DocProperty,
    DocReturn,
    DocString,
    DocType,
    ParamKind,
)
from .ty import Ty, TypeParseError, parse_ty

logger = get_logger("loader")

_KINDS = ("module", "type", "function", "property")


class ModelError(ValueError):
    """Raised when a document does not describe a valid documentation model."""

    def __init__(self, location: str, message: str) -> None:
        super().__init__(f"{location}: {message}")
        self.location = location


def load_file(path: Path) -> Tuple[str, DocItem]:
    """Load ``(name, item)`` from a ``.json`` or YAML document."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ModelError(path.name, f"invalid JSON: {exc}") from exc
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ModelError(path.name, f"invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ModelError(path.name, "document root must be a mapping")
    name = data.get("name", path.stem)
    if not isinstance(name, str) or not name:
        raise ModelError("name", "expected a non-empty string")

    item = load_item(data)
    logger.debug("Loaded %s %s from %s", type(item).__name__, name, path)
    return name, item


def load_item(data: Mapping[str, Any], location: str = "$") -> DocItem:
    """Build a model entity from a mapping with a ``kind`` key."""
    kind = data.get("kind")
    if kind not in _KINDS:
        raise ModelError(location, f"kind must be one of {', '.join(_KINDS)}; got {kind!r}")
    if kind == "module":
        return _load_module(data, location)
    if kind == "type":
        return _load_type(data, location)
    if kind == "function":
        return _load_function(data, location)
    return _load_property(data, location)


def _load_module(data: Mapping[str, Any], location: str) -> DocModule:
    members: Dict[str, Any] = {}
    for name, member in _members(data, location).items():
        member_location = f"{location}.members.{name}"
        members[name] = load_item(_as_mapping(member, member_location), member_location)
    return DocModule(docs=_load_docs(data.get("docs"), f"{location}.docs"), members=members)


def _load_type(data: Mapping[str, Any], location: str) -> DocType:
    members: Dict[str, Any] = {}
    for name, member in _members(data, location).items():
        member_location = f"{location}.members.{name}"
        loaded = load_item(_as_mapping(member, member_location), member_location)
        if not isinstance(loaded, (DocFunction, DocProperty)):
            raise ModelError(member_location, "type members must be functions or properties")
        members[name] = loaded

    constructor = None
    if data.get("constructor") is not None:
        constructor_location = f"{location}.constructor"
        constructor = _load_function(
            _as_mapping(data["constructor"], constructor_location), constructor_location
        )

    ty_text = data.get("ty", data.get("name"))
    ty = _load_ty(ty_text, f"{location}.ty") if ty_text is not None else _type_from_location(location)
    return DocType(
        docs=_load_docs(data.get("docs"), f"{location}.docs"),
        constructor=constructor,
        members=members,
        ty=ty,
    )


def _load_function(data: Mapping[str, Any], location: str) -> DocFunction:
    raw_params = data.get("params") or []
    if not isinstance(raw_params, list):
        raise ModelError(f"{location}.params", "expected a list")
    params = tuple(
        _load_param(_as_mapping(raw, f"{location}.params[{index}]"), f"{location}.params[{index}]")
        for index, raw in enumerate(raw_params)
    )
    _check_unique_params(params, f"{location}.params")

    returns = _as_mapping(data.get("returns") or {}, f"{location}.returns")
    ret = DocReturn(
        typ=_load_ty(returns.get("type"), f"{location}.returns.type"),
        docs=_load_docs(returns.get("docs"), f"{location}.returns.docs"),
    )
    return DocFunction(
        params=DocParams(params),
        ret=ret,
        docs=_load_docs(data.get("docs"), f"{location}.docs"),
    )


def _load_param(data: Mapping[str, Any], location: str) -> DocParam:
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ModelError(f"{location}.name", "expected a non-empty string")

    raw_kind = data.get("kind", ParamKind.POSITIONAL_OR_KEYWORD.value)
    try:
        kind = ParamKind(raw_kind)
    except ValueError as exc:
        choices = ", ".join(member.value for member in ParamKind)
        raise ModelError(f"{location}.kind", f"expected one of {choices}; got {raw_kind!r}") from exc

    default = data.get("default")
    return DocParam(
        name=name,
        kind=kind,
        typ=_load_ty(data.get("type"), f"{location}.type"),
        docs=_load_docs(data.get("docs"), f"{location}.docs"),
        default=None if default is None else str(default),
    )


def _load_property(data: Mapping[str, Any], location: str) -> DocProperty:
    return DocProperty(
        typ=_load_ty(data.get("type"), f"{location}.type"),
        docs=_load_docs(data.get("docs"), f"{location}.docs"),
    )


def _load_docs(value: Any, location: str) -> DocString | None:
    if value is None:
        return None
    if isinstance(value, str):
        return DocString(summary=value)
    data = _as_mapping(value, location)
    summary = data.get("summary")
    if not isinstance(summary, str):
        raise ModelError(f"{location}.summary", "expected a string")
    details = data.get("details")
    if details is not None and not isinstance(details, str):
        raise ModelError(f"{location}.details", "expected a string")
    # Empty details are treated as absent.
    return DocString(summary=summary, details=details or None)


def _load_ty(value: Any, location: str) -> Ty:
    if value is None:
        return Ty.any()
    if not isinstance(value, str):
        raise ModelError(location, "expected type text")
    try:
        return parse_ty(value)
    except TypeParseError as exc:
        raise ModelError(location, str(exc)) from exc


def _type_from_location(location: str) -> Ty:
    # ``$.members.Foo`` names the type ``Foo``; a root type falls back to Any.
    _, _, last = location.rpartition(".members.")
    return Ty.name(last) if last and last != location else Ty.any()


def _members(data: Mapping[str, Any], location: str) -> Mapping[str, Any]:
    members = data.get("members") or {}
    return _as_mapping(members, f"{location}.members")


def _as_mapping(value: Any, location: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ModelError(location, "expected a mapping")
    return value


def _check_unique_params(params: Tuple[DocParam, ...], location: str) -> None:
    seen: List[str] = []
    for param in params:
        if param.name in seen:
            raise ModelError(location, f"duplicate parameter {param.name!r}")
        seen.append(param.name)
