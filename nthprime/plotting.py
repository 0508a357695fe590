"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pandas as pd
from pathlib import Path
from typing import Optional


def plot_timing(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot collection time and N-th prime against N.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from run_timing_experiment with columns N, seconds,
        nth_prime.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax = axes[0]
    ax.loglog(df['N'], df['seconds'], 'o-')
    ax.set_xlabel('N (primes collected)')
    ax.set_ylabel('Time (s)')
    ax.set_title('Trial division time')
    ax.grid(True, which='both', alpha=0.3)

    ax = axes[1]
    ax.loglog(df['N'], df['nth_prime'], 's-')
    ax.set_xlabel('N')
    ax.set_ylabel('N-th prime')
    ax.set_title('Largest prime found')
    ax.grid(True, which='both', alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
