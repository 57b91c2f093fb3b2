"""Entry point for running the sign-in demo as a module.

Usage:
    python -m formguard                          # Run the demo
    python -m formguard --hide-error-on-focus    # Hide errors while typing
    python -m formguard --log-file demo.log      # Write logs to a file
"""

from __future__ import annotations

import argparse

from formguard.app import run_demo
from formguard.lib.logging import setup_logging
from formguard.settings import get_settings


def main(argv: list[str] | None = None) -> None:
    """Run the demo application."""
    parser = argparse.ArgumentParser(
        prog="formguard",
        description="Sign-in form demonstrating coordinated field validation",
    )
    parser.add_argument(
        "--hide-error-on-focus",
        action="store_true",
        default=None,
        help="Hide a field's error while it has focus (default: from .formguard.yaml)",
    )
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument(
        "--json-logs", action="store_true", help="Log as JSON (needs --log-file)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging (needs --log-file)"
    )
    args = parser.parse_args(argv)
    if (args.verbose or args.json_logs) and not args.log_file:
        parser.error("--verbose and --json-logs require --log-file")

    settings = get_settings()
    if args.log_file:
        # The terminal belongs to the UI, so logs only go to the file
        setup_logging(
            verbose=args.verbose,
            json_format=args.json_logs,
            log_file=args.log_file,
            level_name=settings.log_level,
            console=False,
        )

    run_demo(hide_error_on_focus=args.hide_error_on_focus)


if __name__ == "__main__":
    main()
