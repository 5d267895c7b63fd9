"""
Main entry point for the flocking simulation.

Run with:
    python -m boidflock                        # 600 ticks with default settings
    python -m boidflock --ticks 2000 --plot    # Longer run with metric plot
    python -m boidflock --config flock.json    # Settings from a JSON file
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .core.config import SimulationConfig
from .core.errors import SettingsError


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge a config file (if any) with command-line overrides."""
    data = SimulationConfig.load(args.config).to_dict() if args.config else SimulationConfig().to_dict()

    overrides = {
        "boidCount": args.count,
        "spread": args.spread,
        "startSpeed": args.start_speed,
        "seed": args.seed,
        "snapshotInterval": args.snapshots,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return SimulationConfig.from_dict(data)


def run_simulation(config: SimulationConfig, ticks: int, output_dir: Optional[str] = None,
                   plot: bool = False) -> dict:
    """
    Run a headless simulation and export its results.

    Args:
        config: Simulation configuration
        ticks: Number of ticks to simulate
        output_dir: Directory for CSV/JSON/plot output (nothing written if None)
        plot: Whether to save a metrics plot

    Returns:
        Results dictionary
    """
    from .simulation.flock import FlockSimulation
    from .analysis.export import (
        calculate_summary_stats, export_results_to_json,
        export_snapshots_to_csv, export_stats_to_csv,
    )

    print("=" * 60)
    print("Boid Flocking Simulation")
    print("=" * 60)
    print(f"Boids: {config.boidCount + 1} (spawn count {config.boidCount}, inclusive)")
    print(f"Ticks: {ticks} at dt={config.dt:.4f}s")
    print(f"Zones: repulsion {config.flock.repulsionDistance}, "
          f"alignment {config.flock.alignmentDistance}, "
          f"attraction {config.flock.attractionDistance}")
    print()

    sim = FlockSimulation(config)
    results = sim.run(ticks)
    results["summary"] = calculate_summary_stats(results["stats_over_time"])

    print("RESULTS SUMMARY")
    print("-" * 60)
    print(f"   Mean speed:     {results['final_mean_speed']:.3f} / {config.flock.maxSpeed}")
    print(f"   Cohesion:       {results['final_cohesion']:.3f}")
    print(f"   Polarization:   {results['final_polarization']:.3f}")
    print(f"   Mean neighbors: {results['final_mean_neighbors']:.2f}")
    print(f"   Elapsed:        {results['elapsed_time_seconds']:.2f}s")

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        files = [
            export_results_to_json(results, os.path.join(output_dir, "flock_results.json")),
            export_stats_to_csv(results, os.path.join(output_dir, "flock_stats.csv")),
        ]
        if results["snapshots_over_time"]:
            files.append(export_snapshots_to_csv(results["snapshots_over_time"],
                                                 os.path.join(output_dir, "flock_snapshots.csv")))
        if plot:
            from .analysis.plotting import plot_flock_metrics
            path = plot_flock_metrics(results, os.path.join(output_dir, "flock_metrics.png"))
            if path:
                files.append(path)

        print("\nSaved:")
        for path in files:
            print(f"   {path}")

    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Zone-based 3D boid flocking simulation")
    parser.add_argument("--ticks", type=int, default=600, help="Number of ticks to simulate")
    parser.add_argument("--count", type=int, default=None, help="Spawn count (count + 1 boids are created)")
    parser.add_argument("--spread", type=float, default=None, help="Radius of the spawn sphere")
    parser.add_argument("--start-speed", type=float, default=None, help="Initial boid speed")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--save-config", default=None, help="Write the effective config to a JSON file")
    parser.add_argument("--output-dir", default=None, help="Directory for exported results")
    parser.add_argument("--snapshots", type=int, default=None, help="Record boid snapshots every N ticks")
    parser.add_argument("--plot", action="store_true", help="Save a metrics plot (needs --output-dir)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.ticks < 0:
        parser.error("--ticks must be >= 0")

    try:
        config = build_config(args)
    except SettingsError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    if args.save_config:
        config.save(args.save_config)
        print(f"Config saved to: {args.save_config}")

    run_simulation(config, args.ticks, output_dir=args.output_dir, plot=args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
