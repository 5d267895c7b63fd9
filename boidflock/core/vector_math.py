"""
Small 3D vector helpers built on pygame.math.Vector3.
"""

import math

import pygame

EPS = 1e-9
WORLD_UP = pygame.math.Vector3(0, 1, 0)


def vec3(value=None) -> pygame.math.Vector3:
    """Build a new Vector3 from a sequence, a vector, or nothing (zero)."""
    if value is None:
        return pygame.math.Vector3(0, 0, 0)
    return pygame.math.Vector3(value)


def is_zero(v: pygame.math.Vector3, eps: float = EPS) -> bool:
    return v.length_squared() <= eps * eps


def safe_normalize(v: pygame.math.Vector3) -> pygame.math.Vector3:
    """
    Return a unit-length copy of a vector.
    
    Zero-length (or near zero) vectors give back the zero vector instead of
    raising, so a degenerate input contributes nothing.
    """
    length = v.length()
    if length <= EPS:
        return pygame.math.Vector3(0, 0, 0)
    return v / length


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def orientation_facing(direction: pygame.math.Vector3) -> pygame.math.Vector3:
    """Forward vector of the look rotation toward a direction."""
    return safe_normalize(direction)


def _perpendicular(v: pygame.math.Vector3) -> pygame.math.Vector3:
    axis = v.cross(WORLD_UP)
    if is_zero(axis, 1e-6):
        axis = v.cross(pygame.math.Vector3(1, 0, 0))
    return safe_normalize(axis)


def rotate_towards(heading: pygame.math.Vector3, target: pygame.math.Vector3,
                   t: float) -> pygame.math.Vector3:
    """
    Spherically interpolate a unit heading toward a unit target.
    
    Args:
        heading: Current unit facing direction
        target: Desired unit facing direction
        t: Fraction of the angle between them to turn (0..1)
        
    Returns:
        New unit heading
    """
    cos_angle = max(-1.0, min(1.0, heading.dot(target)))
    angle = math.acos(cos_angle)
    if angle <= 1e-7:
        return safe_normalize(target)
    
    axis = heading.cross(target)
    if is_zero(axis, 1e-9):
        # Antiparallel: any perpendicular axis turns us the right way
        axis = _perpendicular(heading)
    else:
        axis = safe_normalize(axis)
    
    # Rodrigues rotation about the unit axis
    theta = angle * t
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    turned = (heading * cos_t
              + axis.cross(heading) * sin_t
              + axis * (axis.dot(heading) * (1.0 - cos_t)))
    return safe_normalize(turned)
