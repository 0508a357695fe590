#!/usr/bin/env python3
"""
Print the N-th prime.

Computes the first N primes by trial division (N from config/default.yaml,
1,000,000 by default) and prints the last one.

Usage:
    python run_nth_prime.py
"""

import sys
import time
from pathlib import Path

from nthprime.config import load_config
from nthprime.collector import nth_prime


CONFIG_PATH = Path(__file__).parent / 'config' / 'default.yaml'


def main():
    config = load_config(CONFIG_PATH)

    start = time.time()
    result = nth_prime(config['N'])
    elapsed = time.time() - start

    print(result)

    if config['verbose']:
        print(f"N = {config['N']:,}, completed in {elapsed:.2f}s", file=sys.stderr)


if __name__ == '__main__':
    main()
