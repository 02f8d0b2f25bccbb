"""CLI entrypoints for featuregraph commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .changelog import RecordSourceError
from .config import CONFIG_FILENAME, ConfigError, FeatureGraphConfig, load_config
from .logging import configure_logging
from .orchestrator import AnalysisReport, Orchestrator
from .render import SvgRenderer


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


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="README changelog or JSON export (defaults to the configured source).",
    )
    parser.add_argument("--width", type=float, default=None, help="Layout canvas width.")
    parser.add_argument("--height", type=float, default=None, help="Layout canvas height.")
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to {CONFIG_FILENAME} (defaults to the source directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="featuregraph",
        description="Infer and lay out dependencies between changelog features.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Print the dependency graph, statistics and layout.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_source_options(analyze_parser)
    analyze_parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="text",
        help="Output format (defaults to a text summary).",
    )

    render_parser = subparsers.add_parser(
        "render",
        help="Write the dependency graph as an SVG document.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    _add_source_options(render_parser)
    render_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Destination SVG file.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP analysis service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default=None, help="Bind address.")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port.")
    serve_parser.add_argument("--config", default=None, help=f"Path to {CONFIG_FILENAME}.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for featuregraph commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        config = _load_cli_config(args)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "serve":
        from .service import run_service

        try:
            run_service(
                host=args.host or config.service.host,
                port=args.port or config.service.port,
            )
        except RuntimeError as exc:
            parser.exit(1, f"{exc}\n")
        return

    report = _run_analysis(parser, args, config)
    if args.command == "analyze":
        if args.format == "json":
            print(json.dumps(report.to_dict(), indent=2))
        else:
            print("\n".join(report.summary_lines()))
    elif args.command == "render":
        output = SvgRenderer(config.render).write(report, Path(args.output))
        print(f"Graph written to {_relativize(output)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _load_cli_config(args: argparse.Namespace) -> FeatureGraphConfig:
    if args.config:
        return load_config(Path(args.config))
    source = getattr(args, "source", None)
    if source:
        source_path = Path(source).expanduser()
        base = source_path if source_path.is_dir() else source_path.parent
        return load_config(base)
    return load_config(Path.cwd())


def _run_analysis(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    config: FeatureGraphConfig,
) -> AnalysisReport:
    orchestrator = Orchestrator(config=config)
    try:
        return orchestrator.run_analyze(args.source, width=args.width, height=args.height)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except RecordSourceError as exc:
        parser.exit(1, f"featuregraph {args.command} failed: {exc}\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


__all__ = ["main"]


if __name__ == "__main__":
    main(sys.argv[1:])
