"""Print the bundled sample values, one per line.

Run: python examples/demo.py [--table] [--digits N] [--verbose]
"""

import argparse

from prettynumber import Formatter, load_samples
from prettynumber.cli.display import (
    print_budget_sweep,
    print_header,
    print_samples,
    setup_logging,
)


def main():
    parser = argparse.ArgumentParser(description="Format sample byte counts.")
    parser.add_argument("--digits", type=int, default=3, help="significant digits")
    parser.add_argument("--table", action="store_true", help="show Rich tables")
    parser.add_argument("--verbose", action="store_true", help="log each result")
    args = parser.parse_args()

    setup_logging("DEBUG" if args.verbose else "WARNING")
    formatter = Formatter(max_significant_digits=args.digits)
    samples = load_samples()

    if not args.table:
        for sample in samples:
            print(formatter.format(sample.number_of_bytes))
        return

    print_header()
    print_samples(samples, formatter)
    print_budget_sweep(5_915_000)
    print_budget_sweep(999_999)


if __name__ == "__main__":
    main()
