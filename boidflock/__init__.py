"""
Zone-based 3D boid flocking simulation.
"""

import os

# Quiet the pygame banner; only pygame.math is used
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .core import (
    Boid, BoidSnapshot, FlockSettings, FlockSpawner, SettingsError,
    SimulationConfig, UnknownZoneError, Zone,
)
from .simulation import FlockSimulation

__version__ = "0.1.0"

__all__ = [
    'Boid', 'BoidSnapshot', 'FlockSettings', 'FlockSpawner', 'SettingsError',
    'SimulationConfig', 'UnknownZoneError', 'Zone', 'FlockSimulation',
]
