"""
Experiment: trial-division timing over a grid of N.

Times collect_primes for each N and records the N-th prime together with
gap statistics. Outputs a CSV and a log-log figure.
"""

import time
import pandas as pd
from pathlib import Path
from typing import List

from ..collector import collect_primes
from ..metrics import gap_summary
from ..plotting import plot_timing


DEFAULT_N_GRID = [10**3, 10**4, 10**5, 10**6]


def run_timing_experiment(N_grid: List[int], output_dir: Path,
                          plot: bool = True) -> pd.DataFrame:
    """
    Time prime collection for each N in N_grid.

    Parameters
    ----------
    N_grid : list of int
        Prime counts to time.
    output_dir : Path
        Directory for timing.csv (and timing.png if plot is set).
    plot : bool
        Whether to save the figure.

    Returns
    -------
    pd.DataFrame
        Columns N, nth_prime, seconds, mean_gap, max_gap.
    """
    # First call pays for numba compilation; keep it out of the table
    collect_primes(2)

    rows = []
    for N in sorted(N_grid):
        print(f"  N = {N:,}...", end=" ", flush=True)
        t0 = time.time()
        sequence = collect_primes(N)
        elapsed = time.time() - t0
        print(f"{elapsed:.2f}s")

        stats = gap_summary(sequence)
        rows.append({
            'N': N,
            'nth_prime': sequence.last,
            'seconds': elapsed,
            'mean_gap': stats['mean_gap'],
            'max_gap': stats['max_gap'],
        })

    df = pd.DataFrame(rows)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'timing.csv', index=False)

    if plot:
        plot_timing(df, output_dir / 'timing.png')

    print(f"  Results saved to {output_dir}")

    return df


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Time trial-division prime collection')
    parser.add_argument('--N-grid', type=float, nargs='+', default=DEFAULT_N_GRID,
                        help='Prime counts to time (default: 1e3 1e4 1e5 1e6)')
    parser.add_argument('--output', type=str, default='data/results',
                        help='Output directory')
    args = parser.parse_args()

    N_grid = [int(N) for N in args.N_grid]

    print("=" * 60)
    print("Trial Division Timing")
    print("=" * 60)
    print(f"N_grid = {N_grid}")
    print()

    df = run_timing_experiment(N_grid, Path(args.output))

    print()
    print(df.to_string(index=False))


if __name__ == '__main__':
    main()
