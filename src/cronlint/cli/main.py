#!/usr/bin/env python3
"""
CRONLINT CLI
------------
Command-line front end for the crontab linter. Collects the file list from
arguments or a config file, runs the engine, and renders the findings.

Exit codes: 0 clean, 1 lint errors found, 2 usage or config error.

Author: CronLint Team
Date: 2026-10-17
"""

import os
import sys
import logging
import argparse
from typing import List, Optional

from rich.markup import escape

from cronlint.cli.formatter import CronFormatter, console
from cronlint.config import ConfigError, LintConfig, find_config, load_config
from cronlint.core.engine import CronLintEngine

__version__ = "1.0.0"

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_USAGE = 2


class CronLintCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self, formatter: Optional[CronFormatter] = None):
        self.formatter = formatter or CronFormatter()
        self.parser = argparse.ArgumentParser(
            prog="cronlint",
            description="CronLint - Crontab schedule-line validator",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("--version", action="version", version=f"cronlint v{__version__}")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        check_parser = subparsers.add_parser("check", help="🔍 Validate crontab files")
        check_parser.add_argument("files", nargs="*", help="Crontab files, relative to --build-dir")
        check_parser.add_argument("--build-dir", default=None,
                                  help="Directory the file names are resolved against")
        check_parser.add_argument("--config", default=None,
                                  help="YAML config (default: .cronlint.yml in the current directory)")
        check_parser.add_argument("--check-month", action="store_true",
                                  help="Also validate the month column")
        check_parser.add_argument("--format", choices=("table", "json"), default="table",
                                  help="Output format (default: table)")
        check_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    def _resolve_config(self, args: argparse.Namespace) -> LintConfig:
        """Config file values, overridden by anything given on the command line."""
        config_path = args.config or find_config(".")
        config = load_config(str(config_path)) if config_path else LintConfig()

        if args.files:
            config.files = list(args.files)
        if args.build_dir is not None:
            config.build_dir = args.build_dir
        if args.check_month:
            config.check_month = True
        config.build_dir = _with_separator(config.build_dir)
        return config

    def _run_check(self, args: argparse.Namespace) -> int:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )

        try:
            config = self._resolve_config(args)
        except ConfigError as e:
            console.print(f"[bold red]Config error:[/bold red] {escape(str(e))}")
            return EXIT_USAGE

        if not config.files:
            console.print("[bold yellow]⚠️  No crontab files given.[/bold yellow]")
            return EXIT_USAGE

        engine = CronLintEngine(check_month=config.check_month)
        result = engine.execute(config.files, config.build_dir)

        if args.format == "json":
            self.formatter.print_json(result)
        else:
            self.formatter.print_header("Crontab Lint", __version__)
            self.formatter.print_diagnostics(result)
            self.formatter.print_summary(engine.generate_summary(result, config.files))

        return EXIT_OK if result.success else EXIT_LINT_ERRORS

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            self.formatter.print_header("Crontab Validator", __version__)
            self.parser.print_help()
            return EXIT_OK

        args = self.parser.parse_args(argv)
        if args.command == "check":
            return self._run_check(args)

        self.parser.print_help()
        return EXIT_USAGE


def _with_separator(build_dir: str) -> str:
    # The engine joins by plain concatenation
    if build_dir and not build_dir.endswith(("/", os.sep)):
        return build_dir + os.sep
    return build_dir


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(CronLintCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    main()
