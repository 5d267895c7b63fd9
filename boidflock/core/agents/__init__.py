"""
Agent classes for the flocking simulation.
"""

from .base import Agent
from .boid import AgentState, Boid, BoidSnapshot

__all__ = ['Agent', 'AgentState', 'Boid', 'BoidSnapshot']
