"""
Neighbor classification into the three concentric steering zones.
"""

from enum import Enum
from typing import Optional, Tuple

import pygame

from .config import FlockSettings
from .errors import UnknownZoneError


class Zone(Enum):
    """Distance band around a boid that decides which rule a neighbor triggers."""
    REPULSION = "repulsion"
    ALIGNMENT = "alignment"
    ATTRACTION = "attraction"


def zone_bounds(settings: FlockSettings, zone: Zone) -> Tuple[float, float]:
    """
    Get the (exclusive lower, inclusive upper) distance bounds of a zone.
    
    Args:
        settings: Flock settings holding the zone radii
        zone: Zone to look up
        
    Returns:
        Tuple of (min_distance, max_distance)
    """
    if zone is Zone.REPULSION:
        return 0.0, settings.repulsionDistance
    if zone is Zone.ALIGNMENT:
        return settings.repulsionDistance, settings.alignmentDistance
    if zone is Zone.ATTRACTION:
        return settings.alignmentDistance, settings.attractionDistance
    raise UnknownZoneError(f"Unknown zone: {zone!r}")


def is_visible(heading: pygame.math.Vector3, offset: pygame.math.Vector3) -> bool:
    """A neighbor is visible unless it lies behind the heading plane."""
    return heading.dot(offset) >= 0


def classify_offset(heading: pygame.math.Vector3, offset: pygame.math.Vector3,
                    settings: FlockSettings) -> Optional[Zone]:
    """
    Classify a neighbor from the vector pointing at it.
    
    Args:
        heading: Unit facing direction of the observing boid
        offset: Vector from the observer to the neighbor
        settings: Flock settings holding the zone radii
        
    Returns:
        The zone the neighbor falls in, or None when it is behind the
        observer, coincident with it, or beyond the sensing radius
    """
    if not is_visible(heading, offset):
        return None
    
    distance = offset.length()
    for zone in Zone:
        lower, upper = zone_bounds(settings, zone)
        if lower < distance <= upper:
            return zone
    return None


def classify(agent, other) -> Optional[Zone]:
    """Classify `other` as seen from `agent` using the agent's settings."""
    offset = other.position - agent.position
    return classify_offset(agent.heading, offset, agent.settings)
