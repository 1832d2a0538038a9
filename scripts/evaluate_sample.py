#!/usr/bin/env python3
"""Evaluate one water sample and print its pollution indices.

Usage:
    python scripts/evaluate_sample.py scripts/user_config.py
    python scripts/evaluate_sample.py scripts/user_config.py --precision 3
    python scripts/evaluate_sample.py scripts/user_config.py -v
"""

import sys
import argparse

from hmpi.cli import run_sample
from hmpi.contracts import HmpiError


def main():
    parser = argparse.ArgumentParser(description="Compute heavy-metal pollution indices for one sample")
    parser.add_argument("config", help="Path to user config file")
    parser.add_argument("--precision", type=int, help="Decimal places in the report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    try:
        run_sample(args.config, precision=args.precision, verbose=args.verbose)
    except HmpiError as e:
        print(f"No result for this sample: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
