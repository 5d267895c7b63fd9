"""
Core module containing configuration, zones, steering rules, spatial grid,
agents and the flock spawner.
"""

from .config import FlockSettings, SimulationConfig, DEFAULT_SETTINGS, DEFAULT_CONFIG
from .errors import FlockError, SettingsError, UnknownZoneError
from .zones import Zone, classify, classify_offset, zone_bounds
from .spatial_grid import SpatialGrid, NeighborSensor
from .agents import Agent, AgentState, Boid, BoidSnapshot
from .spawner import FlockSpawner

__all__ = [
    'FlockSettings', 'SimulationConfig', 'DEFAULT_SETTINGS', 'DEFAULT_CONFIG',
    'FlockError', 'SettingsError', 'UnknownZoneError',
    'Zone', 'classify', 'classify_offset', 'zone_bounds',
    'SpatialGrid', 'NeighborSensor',
    'Agent', 'AgentState', 'Boid', 'BoidSnapshot',
    'FlockSpawner',
]
