"""
Export functions for saving simulation results to CSV and JSON.
"""

import csv
import json
import logging
from typing import Any, Dict, Iterable, List

import numpy as np

logger = logging.getLogger(__name__)

STATS_FIELDS = [
    'frame', 'boid_count', 'mean_speed', 'cohesion', 'polarization',
    'mean_neighbors', 'steering_fraction', 'mean_contributing',
]

SNAPSHOT_FIELDS = [
    'frame', 'agent_id', 'x', 'y', 'z', 'heading_x', 'heading_y', 'heading_z',
    'speed', 'state', 'neighbor_count',
]


def export_stats_to_csv(results: Dict[str, Any], filename: str = "flock_stats.csv") -> str:
    """
    Export the statistics time series to CSV format.

    Args:
        results: Results dictionary from FlockSimulation.run
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=STATS_FIELDS, extrasaction='ignore')
        writer.writeheader()
        for sample in results["stats_over_time"]:
            writer.writerow(sample)

    logger.info("statistics saved to %s", filename)
    return filename


def export_snapshots_to_csv(snapshots: Iterable[Dict[str, Any]],
                            filename: str = "flock_snapshots.csv") -> str:
    """
    Export recorded boid snapshots to CSV, one row per boid per frame.

    Args:
        snapshots: Entries of results["snapshots_over_time"]
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=SNAPSHOT_FIELDS)
        writer.writeheader()

        for entry in snapshots:
            for boid in entry["boids"]:
                x, y, z = boid["position"]
                hx, hy, hz = boid["heading"]
                writer.writerow({
                    'frame': entry["frame"],
                    'agent_id': boid["agent_id"],
                    'x': f"{x:.4f}",
                    'y': f"{y:.4f}",
                    'z': f"{z:.4f}",
                    'heading_x': f"{hx:.5f}",
                    'heading_y': f"{hy:.5f}",
                    'heading_z': f"{hz:.5f}",
                    'speed': f"{boid['speed']:.4f}",
                    'state': boid["state"],
                    'neighbor_count': boid["neighbor_count"],
                })

    logger.info("snapshots saved to %s", filename)
    return filename


def export_results_to_json(results: Dict[str, Any], filename: str = "flock_results.json") -> str:
    """
    Export the full results dictionary to JSON.

    Args:
        results: Complete results dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    logger.info("results saved to %s", filename)
    return filename


def calculate_summary_stats(samples: List[Dict[str, Any]]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation of each metric over time.

    Args:
        samples: Entries of results["stats_over_time"]

    Returns:
        Dictionary with mean and std for each metric
    """
    if not samples:
        return {}

    metrics = [f for f in STATS_FIELDS if f != 'frame']
    summary = {}

    for metric in metrics:
        values = np.array([s[metric] for s in samples if s.get(metric) is not None], dtype=float)
        if values.size:
            summary[f"{metric}_mean"] = float(values.mean())
            summary[f"{metric}_std"] = float(values.std(ddof=1)) if values.size > 1 else 0.0

    return summary
