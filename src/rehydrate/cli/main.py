"""CLI entrypoint for Rehydrate."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rehydrate import __version__
from rehydrate.constants.branding import CLI_DESCRIPTION
from rehydrate.exceptions import ConfigError, RehydrateError
from rehydrate.hydrator import hydrate
from rehydrate.reporting import StdoutReporter, write_json_report


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="rehydrate",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Directory to hydrate (default: current working directory)",
    )
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Resolve markers and report what would change without writing or deleting files",
    )
    parser.add_argument("--report", type=Path, default=None, help="Write a JSON report of per-marker outcomes")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show byte counts, digests, and debug logs")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Suppress the stdout report")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    root = args.root if args.root is not None else Path.cwd()

    try:
        result = hydrate(root, config_path=args.config, dry_run=args.dry_run)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except RehydrateError as exc:
        print(f"Hydration error: {exc}", file=sys.stderr)
        return 1

    if args.report is not None:
        try:
            write_json_report(result, args.report)
        except OSError as exc:
            print(f"Report error: cannot write {args.report}: {exc}", file=sys.stderr)
            return 1

    if not args.quiet:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(result, color=use_color, verbose=args.verbose)
        print(reporter.render())

    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
