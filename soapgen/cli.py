"""CLI entrypoints for soapgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, SoapGenConfig, load_config
from .logging import configure_logging
from .metadata import MetadataError, load_metadata
from .orchestrator import GenerationReport, Orchestrator


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


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "--config",
        default=CONFIG_FILENAME,
        help=f"Path to the configuration file or its directory (defaults to {CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render classes without writing them to disk.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also append log records, with timestamps, to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soapgen",
        description="Generate PHP SOAP client and type classes from service metadata.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    types_parser = subparsers.add_parser(
        "types",
        help="Generate one class per complex type.",
    )
    _add_common_options(types_parser)
    types_parser.add_argument("metadata", help="Path to the metadata snapshot (YAML or JSON).")

    client_parser = subparsers.add_parser(
        "client",
        help="Generate the client class with one method per operation.",
    )
    _add_common_options(client_parser)
    client_parser.add_argument("metadata", help="Path to the metadata snapshot (YAML or JSON).")

    factory_parser = subparsers.add_parser(
        "factory",
        help="Generate a factory that wires the client to the SOAP engine.",
    )
    _add_common_options(factory_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for soapgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = getattr(args, "log_file", None)
    configure_logging(verbose=bool(args.verbose), log_file=Path(log_file) if log_file else None)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")

    dry_run = bool(getattr(args, "dry_run", False))
    try:
        report = _run_command(args.command, config, args, dry_run=dry_run)
    except MetadataError as exc:
        parser.exit(1, f"Invalid metadata: {exc}\n")
    except ValueError as exc:
        parser.exit(1, f"soapgen {args.command} failed: {exc}\n")

    _print_report(report, dry_run=dry_run)
    if not report.ok:
        parser.exit(1, f"{len(report.failures)} class(es) failed to generate. Run with --verbose for more details.\n")


def _run_command(
    command: str, config: SoapGenConfig, args: argparse.Namespace, *, dry_run: bool
) -> GenerationReport:
    orchestrator = Orchestrator(config)
    if command == "factory":
        return orchestrator.generate_client_factory(dry_run=dry_run)

    metadata = load_metadata(Path(args.metadata), types_namespace=config.types.namespace)
    if command == "types":
        return orchestrator.generate_types(metadata, dry_run=dry_run)
    return orchestrator.generate_client(metadata, dry_run=dry_run)


def _print_report(report: GenerationReport, *, dry_run: bool) -> None:
    for generated in report.generated:
        if dry_run:
            print(f"// {generated.path}")
            print(generated.source)
        else:
            print(f"{generated.fqcn} -> {_relativize(generated.path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


__all__ = ["main"]


if __name__ == "__main__":
    main(sys.argv[1:])
