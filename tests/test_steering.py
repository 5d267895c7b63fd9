import math

import pygame
import pytest

from boidflock.core import steering
from boidflock.core.errors import UnknownZoneError
from boidflock.core.zones import Zone

V = pygame.math.Vector3


def test_repulsion_points_away(settings):
    assert steering.repulsion(V(0, 0, 2), settings) == V(0, 0, -15)


def test_repulsion_of_coincident_neighbor_is_zero(settings):
    force = steering.repulsion(V(0, 0, 0), settings)
    assert force.length() == 0
    assert not any(math.isnan(c) for c in force)


def test_alignment_uses_other_heading(settings):
    assert steering.alignment(V(1, 0, 0), settings) == V(3, 0, 0)


def test_attraction_points_toward(settings):
    force = steering.attraction(V(0, 3, 4), settings)
    assert force.x == pytest.approx(0)
    assert force.y == pytest.approx(12)
    assert force.z == pytest.approx(16)


def test_contribution_dispatch(settings):
    offset = V(0, 0, 4)
    heading = V(0, 1, 0)
    assert steering.contribution(Zone.REPULSION, offset, heading, settings) == V(0, 0, -15)
    assert steering.contribution(Zone.ALIGNMENT, offset, heading, settings) == V(0, 3, 0)
    assert steering.contribution(Zone.ATTRACTION, offset, heading, settings) == V(0, 0, 20)


def test_contribution_unknown_zone_raises(settings):
    with pytest.raises(UnknownZoneError):
        steering.contribution(None, V(0, 0, 1), V(0, 0, 1), settings)
