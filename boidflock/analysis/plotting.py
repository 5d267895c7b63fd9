"""
Plotting functions for visualizing flock metrics.
"""

import logging
from typing import Any, Dict

try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False

logger = logging.getLogger(__name__)


def plot_flock_metrics(results: Dict[str, Any], output_file: str = "flock_metrics.png") -> str:
    """
    Plot speed, cohesion, polarization and neighbor counts over time.

    Args:
        results: Results dictionary from FlockSimulation.run
        output_file: Output filename for the plot

    Returns:
        Path to saved plot file, or "" when nothing was plotted
    """
    if not MATPLOTLIB_AVAILABLE:
        logger.warning("matplotlib not available, skipping plot")
        return ""

    samples = results["stats_over_time"]
    if not samples:
        logger.warning("no statistics recorded, skipping plot")
        return ""

    frames = [s["frame"] for s in samples]

    fig, axes = plt.subplots(2, 2, figsize=(12, 8))
    axes = axes.flatten()

    panels = [
        ("mean_speed", "Mean Speed", '#FF6B6B'),
        ("cohesion", "Cohesion (avg dist to centroid)", '#4ECDC4'),
        ("polarization", "Polarization (|mean heading|)", '#FFB347'),
        ("mean_neighbors", "Mean Neighbors in Range", '#95E1D3'),
    ]

    for ax, (key, label, color) in zip(axes, panels):
        values = [s[key] for s in samples]
        ax.plot(frames, values, linewidth=2, color=color)
        ax.set_xlabel('Tick', fontsize=10)
        ax.set_ylabel(label, fontsize=10)
        ax.grid(True, alpha=0.3, linestyle='--')
        if values:
            ax.annotate(f'{values[-1]:.2f}', xy=(frames[-1], values[-1]),
                        xytext=(5, 0), textcoords='offset points',
                        fontsize=8, color=color)

    fig.suptitle(f"Flock Metrics ({results['boid_count']} boids, {results['frames']} ticks)",
                 fontsize=14, fontweight='bold')
    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logger.info("plot saved to %s", output_file)
    return output_file
