"""
Analysis module for plotting and exporting simulation results.
"""

from .plotting import plot_flock_metrics
from .export import (
    calculate_summary_stats,
    export_results_to_json,
    export_snapshots_to_csv,
    export_stats_to_csv,
)

__all__ = [
    'plot_flock_metrics',
    'calculate_summary_stats',
    'export_results_to_json',
    'export_snapshots_to_csv',
    'export_stats_to_csv',
]
