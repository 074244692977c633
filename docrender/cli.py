"""CLI entrypoints for docrender commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Tuple

from .config import ConfigError, RenderConfig, load_config
from .loader import ModelError, load_file
from .logging import configure_logging, get_logger
from .markdown import render_doc_item, render_doc_member, render_doc_param
from .models import DocFunction, DocItem, DocMember, DocModule, DocParam, DocType, as_member

logger = get_logger("cli")


class LookupFailed(LookupError):
    """Raised when a requested member or parameter does not exist."""


def _add_verbosity_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default = argparse.SUPPRESS if suppress_default else False
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log warnings and errors.",
    )


def _add_model_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="YAML or JSON file describing the documented item.")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to .docrender.yml or its directory (defaults to the model's directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docrender",
        description="Render documentation models to Markdown.",
    )
    _add_verbosity_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a module, type, function or property.",
    )
    _add_verbosity_options(render_parser, suppress_default=True)
    _add_model_options(render_parser)
    render_parser.add_argument(
        "--member",
        default=None,
        help="Render only this member of a module or type.",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write Markdown to this file instead of stdout.",
    )

    param_parser = subparsers.add_parser(
        "param",
        help="Render hover text for a single function parameter.",
    )
    _add_verbosity_options(param_parser, suppress_default=True)
    _add_model_options(param_parser)
    param_parser.add_argument(
        "function",
        help="Function name, dotted for methods (Point.scale); '.' for the item itself.",
    )
    param_parser.add_argument("param", help="Parameter name, with or without * markers.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docrender commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    model_path = Path(args.path)
    try:
        config = _load_render_config(model_path, args.config)
        name, item = load_file(model_path)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except UnicodeDecodeError as exc:
        parser.exit(
            1, f"docrender {args.command} failed: {model_path} is not UTF-8 text ({exc.reason})\n"
        )
    except OSError as exc:
        parser.exit(
            1, f"docrender {args.command} failed: cannot read {model_path}: {exc.strerror or exc}\n"
        )
    except (ConfigError, ModelError) as exc:
        parser.exit(1, f"docrender {args.command} failed: {exc}\n")

    try:
        if args.command == "render":
            markdown = _render(name, item, args.member, config)
        elif args.command == "param":
            markdown = _render_param(name, item, args.function, args.param)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except LookupFailed as exc:
        parser.exit(1, f"{exc.args[0]}\n")

    # Parameter lists already end with a newline; never add a second one.
    text = markdown if markdown.endswith("\n") else f"{markdown}\n"
    output = getattr(args, "output", None)
    if output:
        Path(output).write_text(text, encoding="utf-8")
        logger.info("Markdown written to %s", _relativize(Path(output)))
    else:
        sys.stdout.write(text)


def _load_render_config(model_path: Path, config_arg: Optional[str]) -> RenderConfig:
    config_path = Path(config_arg) if config_arg else model_path.parent
    config = load_config(config_path)
    logger.debug("Using render config %s", config)
    return config


def _render(name: str, item: DocItem, member_name: Optional[str], config: RenderConfig) -> str:
    if member_name is None:
        return render_doc_item(name, item, config)
    display_name, member = _select_member(name, item, member_name)
    return render_doc_member(display_name, member, config)


def _render_param(name: str, item: DocItem, function_name: str, param_name: str) -> str:
    if function_name == ".":
        function = item
    else:
        _, function = _select_member(name, item, function_name)
    if not isinstance(function, DocFunction):
        raise LookupFailed(f"{function_name} is not a function")

    param = _find_param(function, param_name)
    if param is None:
        raise LookupFailed(f"{function_name} has no parameter {param_name}")
    text = render_doc_param(param.starred_name, param)
    if not text:
        logger.warning("Parameter %s has no documentation", param.starred_name)
    return text


def _select_member(name: str, item: DocItem, member_path: str) -> Tuple[str, DocMember]:
    """Resolve a dotted path such as ``Point.scale`` below ``item``.

    Modules are walked through their raw members so a method of a type
    inside a module stays reachable; only the last segment is collapsed to
    a member. Display names follow the prefixes used by the renderer.
    """
    *parents, last = member_path.split(".")
    current: DocItem = item
    for segment in parents:
        current = _child(name, current, segment, member_path)
    member = as_member(_child(name, current, last, member_path))
    if member is None:
        raise LookupFailed(f"{name} has no member {member_path}")
    display_prefix = f"{name}." if isinstance(item, DocType) else ""
    return f"{display_prefix}{member_path}", member


def _child(name: str, parent: DocItem, segment: str, member_path: str) -> DocItem:
    if not isinstance(parent, (DocModule, DocType)):
        raise LookupFailed(f"{name} has no member {member_path}")
    found = parent.members.get(segment)
    if found is None:
        raise LookupFailed(f"{name} has no member {member_path}")
    return found


def _find_param(function: DocFunction, param_name: str) -> Optional[DocParam]:
    for param in function.params:
        if param_name in (param.name, param.starred_name):
            return param
    return None


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
