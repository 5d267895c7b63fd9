import pygame
import pytest

from boidflock.core.agents.boid import Boid
from boidflock.core.config import FlockSettings


@pytest.fixture
def settings():
    return FlockSettings()


@pytest.fixture
def make_boid(settings):
    """Factory for boids sharing the default settings."""
    def _make(position=(0, 0, 0), heading=(0, 0, 1), speed=0.0, boid_settings=None):
        return Boid(pygame.math.Vector3(position), boid_settings or settings,
                    heading=heading, speed=speed)
    return _make
