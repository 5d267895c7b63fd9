"""
Headless flock simulation: the explicit loop that owns the boids.
"""

import logging
import random
import time
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..core.agents.boid import AgentState, Boid, BoidSnapshot
from ..core.config import SimulationConfig
from ..core.spatial_grid import NeighborSensor, SpatialGrid
from ..core.spawner import FlockSpawner

logger = logging.getLogger(__name__)


class FlockSimulation:
    """
    Tick-driven flock simulation.

    Each step runs to completion for every boid before the next begins:
    sense neighbors, steer every boid, then move every boid.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, boids: Optional[List[Boid]] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            boids: Pre-built boids to simulate instead of spawning a flock
        """
        self.config = config if config else SimulationConfig()
        self.settings = self.config.flock
        self.rng = random.Random(self.config.seed)

        self.spatial_grid = SpatialGrid(self.config.cell_size)
        self.sensor = NeighborSensor(self.spatial_grid, self.settings.sensing_radius)

        if boids is None:
            spawner = FlockSpawner(self.settings, self.rng)
            boids = spawner.spawn(
                self.config.boidCount,
                self.config.center,
                self.config.spread,
                self.config.startSpeed,
            )
        self.boids = boids

        self.frame_count = 0
        self.start_time = time.time()

        # Statistics
        self.stats = {
            "neighbor_events": 0,
            "stats_over_time": [],
            "snapshots_over_time": [],
        }

    def step(self) -> None:
        """Advance the whole flock by one tick."""
        entered, exited = self.sensor.update(self.boids)
        self.stats["neighbor_events"] += entered + exited

        contributing = [boid.tick() for boid in self.boids]

        for boid in self.boids:
            boid.move(self.config.dt)

        self.frame_count += 1
        self._update_statistics(contributing)

    def _update_statistics(self, contributing: List[int]) -> None:
        """Record a statistics sample and snapshots when their interval is due."""
        interval = self.config.statsInterval
        if interval and self.frame_count % interval == 0:
            sample = self.measure()
            sample["frame"] = self.frame_count
            sample["mean_contributing"] = float(np.mean(contributing)) if contributing else 0.0
            self.stats["stats_over_time"].append(sample)

        interval = self.config.snapshotInterval
        if interval and self.frame_count % interval == 0:
            self.stats["snapshots_over_time"].append({
                "frame": self.frame_count,
                "boids": [s.to_dict() for s in self.snapshot()],
            })

    def measure(self) -> Dict[str, float]:
        """
        Measure flock-wide metrics for the current state.

        Returns:
            Dictionary with mean speed, cohesion (mean distance to centroid),
            polarization (length of the mean heading), mean neighbor count
            and the fraction of boids currently steering
        """
        if not self.boids:
            return {
                "boid_count": 0,
                "mean_speed": 0.0,
                "cohesion": 0.0,
                "polarization": 0.0,
                "mean_neighbors": 0.0,
                "steering_fraction": 0.0,
            }

        positions = np.array([tuple(b.position) for b in self.boids], dtype=float)
        headings = np.array([tuple(b.heading) for b in self.boids], dtype=float)
        speeds = np.array([b.speed for b in self.boids], dtype=float)

        centroid = positions.mean(axis=0)
        cohesion = np.linalg.norm(positions - centroid, axis=1).mean()
        polarization = np.linalg.norm(headings.mean(axis=0))
        steering = sum(1 for b in self.boids if b.state is AgentState.STEERING)

        return {
            "boid_count": len(self.boids),
            "mean_speed": float(speeds.mean()),
            "cohesion": float(cohesion),
            "polarization": float(polarization),
            "mean_neighbors": float(np.mean([len(b.neighbors) for b in self.boids])),
            "steering_fraction": steering / len(self.boids),
        }

    def snapshot(self) -> Tuple[BoidSnapshot, ...]:
        """Read-only state of every boid, for renderers and exporters."""
        return tuple(boid.snapshot() for boid in self.boids)

    def run(self, max_frames: int) -> Dict[str, Any]:
        """
        Run the simulation for a number of ticks.

        Args:
            max_frames: Number of ticks to simulate

        Returns:
            Results dictionary with all statistics
        """
        if max_frames < 0:
            raise ValueError(f"max_frames must be >= 0, got {max_frames}")

        logger.info("running %d ticks with %d boids", max_frames, len(self.boids))
        target = self.frame_count + max_frames

        while self.frame_count < target:
            self.step()

            if self.frame_count % 1000 == 0:
                elapsed = time.time() - self.start_time
                logger.info("tick %d/%d (%.1fs elapsed)", self.frame_count, target, elapsed)

        logger.info("run finished after %d ticks", self.frame_count)
        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get simulation results.

        Returns:
            Dictionary containing the time series and final metrics
        """
        elapsed = time.time() - self.start_time
        final = self.measure()

        return {
            "frames": self.frame_count,
            "elapsed_time_seconds": elapsed,
            "boid_count": len(self.boids),
            "neighbor_events": self.stats["neighbor_events"],
            "final_mean_speed": final["mean_speed"],
            "final_cohesion": final["cohesion"],
            "final_polarization": final["polarization"],
            "final_mean_neighbors": final["mean_neighbors"],
            "final_steering_fraction": final["steering_fraction"],
            "stats_over_time": self.stats["stats_over_time"],
            "snapshots_over_time": self.stats["snapshots_over_time"],
            "config": self.config.to_dict(),
        }
