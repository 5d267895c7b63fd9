"""
Steering rules: one force contribution per classified neighbor.
"""

import pygame

from .config import FlockSettings
from .errors import UnknownZoneError
from .vector_math import safe_normalize
from .zones import Zone


def repulsion(offset: pygame.math.Vector3, settings: FlockSettings) -> pygame.math.Vector3:
    """Push away from a neighbor that is too close."""
    return -safe_normalize(offset) * settings.repulsionForce


def alignment(other_heading: pygame.math.Vector3, settings: FlockSettings) -> pygame.math.Vector3:
    """Turn toward the heading the neighbor is flying along."""
    return pygame.math.Vector3(other_heading) * settings.alignmentForce


def attraction(offset: pygame.math.Vector3, settings: FlockSettings) -> pygame.math.Vector3:
    """Pull toward a distant but visible neighbor."""
    return safe_normalize(offset) * settings.attractionForce


def contribution(zone: Zone, offset: pygame.math.Vector3,
                 other_heading: pygame.math.Vector3,
                 settings: FlockSettings) -> pygame.math.Vector3:
    """
    Compute the steering contribution of one neighbor.
    
    Args:
        zone: Zone the neighbor was classified into
        offset: Vector from the boid to the neighbor
        other_heading: Unit heading of the neighbor
        settings: Flock settings holding the zone forces
        
    Returns:
        Force vector to add to the boid's target direction
    """
    if zone is Zone.REPULSION:
        return repulsion(offset, settings)
    if zone is Zone.ALIGNMENT:
        return alignment(other_heading, settings)
    if zone is Zone.ATTRACTION:
        return attraction(offset, settings)
    raise UnknownZoneError(f"Unknown zone: {zone!r}")
