#!/usr/bin/env python3
"""CLI entry point for the random sort demo.

Generates random integers, sorts them into descending order in place and
prints the values before and after sorting. Logs go to stderr so stdout
carries only the report.
"""

import argparse
import logging
import os
import sys

from random_sort import RunConfig, SortRunner, SortVerificationError
from random_sort.config import DEFAULT_SIZE
from random_sort.core.generator import DEFAULT_HIGH, DEFAULT_LOW


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    GREEN = "\033[32m"
    CYAN = "\033[36m"
    BLUE = "\033[34m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BOLD_RED = "\033[1;31m"


class ColoredFormatter(logging.Formatter):
    """Formatter producing ``[datetime] [module] [severity] message``.

    The datetime and module are green; the severity color depends on level.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.BLUE,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        datetime_str = self.formatTime(record, self.datefmt)

        green_part = f"{Colors.GREEN}[{datetime_str}] [{record.name}]{Colors.RESET}"
        severity_part = f"{level_color}[{record.levelname}]{Colors.RESET}"

        message = f"{green_part} {severity_part} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def configure_logging():
    """Configure logging based on the LOG_LEVEL environment variable.

    Accepts DEBUG, INFO, WARNING (default), ERROR or CRITICAL. The handler
    writes to stderr.
    """
    log_level_str = os.environ.get('LOG_LEVEL', 'WARNING').upper()

    log_level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }

    log_level = log_level_map.get(log_level_str, logging.WARNING)

    formatter = ColoredFormatter(datefmt='%Y-%m-%d %H:%M:%S')

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured with level: %s", log_level_str)

    # turn off low-level logging
    for noisy in ["matplotlib", "PIL"]:
        logging.getLogger(noisy).setLevel(logging.ERROR)


logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description='Random Sort - sort random integers into descending order',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example usage:
  python run_sort.py
  python run_sort.py --size 20 --seed 42
  python run_sort.py --size 500 --low -50 --high 50 --plot sort_trace.png

Set LOG_LEVEL=INFO or LOG_LEVEL=DEBUG to see progress on stderr.
        """
    )

    parser.add_argument(
        '--size',
        type=int,
        default=DEFAULT_SIZE,
        help=f'Number of values to generate (default: {DEFAULT_SIZE})'
    )

    parser.add_argument(
        '--low',
        type=int,
        default=DEFAULT_LOW,
        help=f'Inclusive lower bound of generated values (default: {DEFAULT_LOW})'
    )

    parser.add_argument(
        '--high',
        type=int,
        default=DEFAULT_HIGH,
        help=f'Exclusive upper bound of generated values (default: {DEFAULT_HIGH})'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the random values (default: unseeded)'
    )

    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Save a chart of the run to this path (optional)'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the random sort demo."""
    configure_logging()
    args = parse_arguments(argv)

    try:
        config = RunConfig(size=args.size, low=args.low, high=args.high, seed=args.seed)
    except ValueError as e:
        logger.error("Invalid configuration: %s", str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = SortRunner(config).run()

        if args.plot:
            from random_sort.plotting import plot_run

            plot_run(result, args.plot)

        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Sort interrupted by user")
        sys.exit(130)  # Standard exit code for SIGINT

    except SortVerificationError as e:
        logger.error("Sort verification failed: %s", str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        logger.exception("Run failed with error: %s", str(e))
        print("\n" + "=" * 70, file=sys.stderr)
        print("ERROR: Run failed", file=sys.stderr)
        print("=" * 70, file=sys.stderr)
        print(f"\n{str(e)}\n", file=sys.stderr)
        print("=" * 70, file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
