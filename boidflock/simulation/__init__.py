"""
Simulation module containing the headless flock simulation loop.
"""

from .flock import FlockSimulation

__all__ = ['FlockSimulation']
