"""
Flock spawner: creates the initial population around a center point.
"""

import logging
import random
from typing import List, Optional

import pygame

from .agents.boid import Boid
from .config import FlockSettings
from .errors import SettingsError
from .vector_math import safe_normalize, vec3

logger = logging.getLogger(__name__)


def random_in_unit_sphere(rng: random.Random) -> pygame.math.Vector3:
    """Uniformly sample a point inside the unit sphere by rejection."""
    while True:
        point = pygame.math.Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
        if point.length_squared() <= 1.0:
            return point


class FlockSpawner:
    """
    Creates boids that all share one FlockSettings instance.
    """

    def __init__(self, settings: FlockSettings, rng: Optional[random.Random] = None):
        """
        Initialize the spawner.

        Args:
            settings: Settings shared by reference with every spawned boid
            rng: Random source (a fresh unseeded one if None)
        """
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()

    def spawn(self, count: int, center=(0, 0, 0), spread: float = 1.0,
              start_speed: float = 4.0) -> List[Boid]:
        """
        Spawn boids inside a sphere, launched outward from its center.

        The loop bound is inclusive, so `count + 1` boids are created.
        Boids never spawn below the center's height plane.

        Args:
            count: Requested boid count
            center: Center of the spawn sphere
            spread: Radius of the spawn sphere
            start_speed: Initial speed of every boid

        Returns:
            List of spawned boids
        """
        if count < 0:
            raise SettingsError(f"count must be >= 0, got {count}")
        if spread < 0:
            raise SettingsError(f"spread must be >= 0, got {spread}")
        if start_speed < 0:
            raise SettingsError(f"start_speed must be >= 0, got {start_speed}")

        center = vec3(center)
        boids = []
        for _ in range(count + 1):
            position = random_in_unit_sphere(self.rng) * spread + center
            # Mirror into the upper half relative to the center
            position.y = center.y + abs(position.y - center.y)

            boid = Boid(position, self.settings)
            boid.set_velocity(safe_normalize(position - center) * start_speed)
            boids.append(boid)

        logger.info("spawned %d boids around %s (spread=%s, start speed=%s)",
                    len(boids), tuple(center), spread, start_speed)
        return boids
