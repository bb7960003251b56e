# SPDX-License-Identifier: MIT
"""
SecretMap - Command Line Interface

This CLI provides:
- secretmap version
- secretmap scan <root> --format {text,json,sarif} [--fix] [--no-home] [--depth N]
- secretmap config-template

Exit codes:
- 0: scan completed, no critical exposures
- 1: scan completed with at least one critical exposure
- 2: fatal setup or configuration error
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .core.exceptions import SecretMapError

EXIT_OK = 0
EXIT_CRITICAL = 1
EXIT_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser():
    p = argparse.ArgumentParser(prog="secretmap", description="SecretMap - unified credential inventory scanner")
    p.add_argument("-v", "--version", action="store_true", help="print version and exit")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")
    sub.add_parser("config-template", help="print a commented .secretmap.yml template")

    sp = sub.add_parser("scan", help="scan a directory (and home known-locations)")
    sp.add_argument("root", nargs="?", default=".", help="directory to scan (default: .)")
    sp.add_argument(
        "--format",
        choices=["text", "json", "sarif"],
        default="text",
        help="output format (default: text)"
    )
    sp.add_argument("--fix", action="store_true", help="show fix suggestions")
    sp.add_argument(
        "--no-home",
        dest="include_home",
        action="store_const",
        const=False,
        default=None,
        help="skip home directory known locations"
    )
    sp.add_argument("--depth", dest="max_depth", type=int, help="max directory depth (default: 8)")
    sp.add_argument("--workers", type=int, help="parallel file readers (default: 4)")
    sp.add_argument("--config", help="path to scanner config YAML file")
    sp.add_argument("--verbose", action="store_true", help="show all findings including low-risk")
    sp.add_argument("--no-color", dest="color", action="store_false", help="disable ANSI colors")
    sp.add_argument(
        "--json-out",
        dest="json_out",
        help="write JSON results to file"
    )
    sp.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="logging level for diagnostics on stderr (default: WARNING)"
    )
    return p


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    p = build_parser()
    args = p.parse_args(argv)

    if args.version or args.cmd == "version":
        print(__version__)
        return EXIT_OK

    if args.cmd == "config-template":
        from .scanner.config import create_default_config_template

        print(create_default_config_template(), end="")
        return EXIT_OK

    if args.cmd == "scan":
        return handle_scan_command(args)

    p.print_help()
    return EXIT_OK


def handle_scan_command(args):
    """Handle the scan subcommand."""
    from .aggregate import has_critical
    from .autofix.planner import generate_fix_suggestions, format_fix_suggestions
    from .report.formatter import format_human, format_json
    from .report.sarif import build_sarif
    from .scanner import build_scan_options, load_scanner_config, scan

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[secretmap] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    root = str(Path(args.root).resolve())

    try:
        config = load_scanner_config(args.config, root_dir=root)
        options = build_scan_options(
            root,
            config,
            max_depth=args.max_depth,
            include_home=args.include_home,
            workers=args.workers,
            verbose=args.verbose,
        )
        result = scan(options)
    except SecretMapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    suggestions = generate_fix_suggestions(result) if args.fix else None

    if args.json_out:
        try:
            Path(args.json_out).write_text(format_json(result, suggestions))
        except OSError as e:
            print(f"Error: cannot write {args.json_out}: {e.strerror or e}", file=sys.stderr)
            return EXIT_ERROR
        if args.format == "text":
            print(f"JSON output written to {args.json_out}")

    if args.format == "json":
        print(format_json(result, suggestions))
    elif args.format == "sarif":
        print(json.dumps(build_sarif(result), indent=2))
    else:
        print(format_human(result, verbose=args.verbose, color=args.color and sys.stdout.isatty()))
        if suggestions:
            print(format_fix_suggestions(suggestions))

    # Exit with distinct status if critical exposures found
    if has_critical(result):
        return EXIT_CRITICAL

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
