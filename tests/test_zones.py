import pygame
import pytest

from boidflock.core.errors import UnknownZoneError
from boidflock.core.zones import Zone, classify, classify_offset, is_visible, zone_bounds

V = pygame.math.Vector3
FORWARD = V(0, 0, 1)


@pytest.mark.parametrize("distance, expected", [
    (0.5, Zone.REPULSION),
    (5.0, Zone.REPULSION),
    (5.001, Zone.ALIGNMENT),
    (9.0, Zone.ALIGNMENT),
    (9.5, Zone.ATTRACTION),
    (50.0, Zone.ATTRACTION),
    (50.01, None),
])
def test_classify_by_distance(settings, distance, expected):
    assert classify_offset(FORWARD, V(0, 0, distance), settings) is expected


def test_neighbor_on_repulsion_boundary_is_repulsion(settings):
    # 3-4-5 triangle, exactly 5.0 away and in front
    assert classify_offset(FORWARD, V(3, 0, 4), settings) is Zone.REPULSION


def test_neighbor_behind_is_ignored(settings):
    assert classify_offset(FORWARD, V(0, 0, -3), settings) is None
    assert classify_offset(FORWARD, V(1, 0, -0.01), settings) is None


def test_neighbor_beside_is_visible(settings):
    assert is_visible(FORWARD, V(3, 0, 0))
    assert classify_offset(FORWARD, V(3, 0, 0), settings) is Zone.REPULSION


def test_coincident_neighbor_has_no_zone(settings):
    assert classify_offset(FORWARD, V(0, 0, 0), settings) is None


def test_zones_are_mutually_exclusive(settings):
    for step in range(1, 560):
        distance = step * 0.1
        matches = [zone for zone in Zone
                   if zone_bounds(settings, zone)[0] < distance <= zone_bounds(settings, zone)[1]]
        assert len(matches) <= 1
        if distance <= settings.attractionDistance:
            assert len(matches) == 1
            assert classify_offset(FORWARD, V(0, 0, distance), settings) is matches[0]


def test_zone_bounds(settings):
    assert zone_bounds(settings, Zone.REPULSION) == (0.0, 5)
    assert zone_bounds(settings, Zone.ALIGNMENT) == (5, 9)
    assert zone_bounds(settings, Zone.ATTRACTION) == (9, 50)


def test_unknown_zone_fails_fast(settings):
    with pytest.raises(UnknownZoneError):
        zone_bounds(settings, "cohesion")


def test_classify_uses_agent_positions(make_boid):
    me = make_boid((10, 0, 10))
    ahead = make_boid((10, 0, 17))
    behind = make_boid((10, 0, 3))
    assert classify(me, ahead) is Zone.ALIGNMENT
    assert classify(me, behind) is None
