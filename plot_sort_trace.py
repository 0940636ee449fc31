#!/usr/bin/env python3
"""
Plot one sort run: values before/after sorting and swaps per outer pass.
Usage:
  python plot_sort_trace.py [--size N] [--seed S] [--output PATH]

Examples:
  python plot_sort_trace.py
  python plot_sort_trace.py --size 40 --seed 7
  python plot_sort_trace.py --size 200 --output charts/sort_200.png
"""

import argparse
import io
import sys

from random_sort import RunConfig, run
from random_sort.plotting import plot_run
from run_sort import configure_logging


def main(argv=None):
    configure_logging()

    parser = argparse.ArgumentParser(
        description='Plot values and swap counts for one sort run',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python plot_sort_trace.py
  python plot_sort_trace.py --size 40 --seed 7
  python plot_sort_trace.py --size 200 --output charts/sort_200.png
        """
    )
    parser.add_argument('--size', type=int, default=100,
                        help='Number of values to sort (default: 100)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random values (default: unseeded)')
    parser.add_argument('--output', default='sort_trace.png',
                        help='Output file path for the plot (default: sort_trace.png)')

    args = parser.parse_args(argv)

    try:
        config = RunConfig(size=args.size, seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Sorting {config.size} value(s) (seed={config.seed})")

    # The report itself is not needed here
    result = run(config, stream=io.StringIO())

    output_path = plot_run(result, args.output)
    print(f"Comparisons: {result.trace.comparisons}")
    print(f"Swaps:       {result.trace.swaps}")
    print(f"\nPlot saved to: {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
