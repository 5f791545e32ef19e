"""CLI entrypoints for moddoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jinja2 import TemplateError

from .config import ConfigError, load_config
from .loader import DocumentationLoadError, load_documentation
from .logging import configure_logging, get_logger
from .processors import available_formats, get_processor
from .resolver import TemplateResolutionError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moddoc",
        description="Render per-module API documentation from module descriptions.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render one page per module plus an index page.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    render_parser.add_argument(
        "sources",
        nargs="*",
        help="Description files or directories (defaults to `sources` in .moddoc.yml).",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        help="Target folder for rendered pages (defaults to docs/api).",
    )
    render_parser.add_argument(
        "-f",
        "--format",
        choices=available_formats(),
        help="Output format (defaults to markdown).",
    )
    render_parser.add_argument(
        "--templates",
        help="Directory with template overrides laid out as <format>/<name>.j2.",
    )
    render_parser.add_argument(
        "-c",
        "--config",
        default=".",
        help="Path to .moddoc.yml or the directory holding it.",
    )
    render_parser.add_argument(
        "--log-file",
        help="Also write a timestamped log of the run to this file.",
    )

    formats_parser = subparsers.add_parser(
        "formats",
        help="List the available output formats.",
    )
    _add_verbose_option(formats_parser, suppress_default=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for moddoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = getattr(args, "log_file", None)
    configure_logging(verbose=bool(args.verbose), log_file=Path(log_file) if log_file else None)

    if args.command == "formats":
        for name in available_formats():
            print(name)
        return

    try:
        output_dir = _run_render(args)
    except (ConfigError, DocumentationLoadError, TemplateResolutionError, ValueError) as exc:
        parser.exit(1, f"moddoc render failed: {exc}\n")
    except (TemplateError, OSError) as exc:
        get_logger("cli").debug("Render failure", exc_info=True)
        parser.exit(1, f"moddoc render failed: {exc}\nRun with --verbose for more details.\n")
    print(f"Documentation written to {_relativize(output_dir)}")


def _run_render(args: argparse.Namespace) -> Path:
    config = load_config(Path(args.config))
    sources = [Path(source) for source in args.sources] or config.sources
    if not sources:
        raise DocumentationLoadError("No description sources given")
    output_dir = Path(args.output) if args.output else config.output_dir
    templates_dir = Path(args.templates) if args.templates else config.templates_dir
    format_tag = args.format or config.output.format

    modules = load_documentation(sources)
    processor = get_processor(format_tag, templates_dir=templates_dir)
    processor.process(modules, output_dir)
    return output_dir


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":  # pragma: no cover - manual execution
    main(sys.argv[1:])
