#!/usr/bin/env python3
"""Command-line interface for datecue."""

import argparse
import sys
import logging
import os
from datetime import date

from datecue.config import load_config
from datecue.exceptions import ConfigurationError, ParseError
from datecue.parser import DateParser


def setup_logging(debug=False):
    """Set up logging configuration."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler()
        ]
    )


def format_result(result):
    """Render a result as "text | date | time"."""
    time_str = str(result.time) if result.time else '-'
    return f"{result.text} | {result.date.isoformat()} | {time_str}"


def parse_line(parser, line, out=None):
    """Parse one line and print the result; returns False on a parse error."""
    out = out or sys.stdout
    try:
        result = parser.parse(line)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False
    print(format_result(result), file=out)
    return True


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description='Extract dates and times from text')
    parser.add_argument('text', nargs='*', help='Text to parse (reads lines from stdin if omitted)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--config', help='Path to config file')
    parser.add_argument('--today', type=date.fromisoformat, help='Reference date (YYYY-MM-DD)')
    parser.add_argument('--default-today', action='store_true',
                        help="Use today's date when the text has no date reference")

    args = parser.parse_args(argv)

    # Set up logging
    setup_logging(args.debug)

    # Custom config must exist if provided
    if args.config and not os.path.exists(args.config):
        print(f"Config file not found: {args.config}")
        return 1

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1

    date_parser = DateParser(config=config, today=args.today, default_to_today=args.default_today)

    if args.text:
        return 0 if parse_line(date_parser, ' '.join(args.text)) else 1

    try:
        for line in sys.stdin:
            line = line.strip()
            if line:
                parse_line(date_parser, line)
    except KeyboardInterrupt:
        print("\nStopped by user")
    return 0


if __name__ == '__main__':
    sys.exit(main())
