import pygame
import pytest

from boidflock.core.spatial_grid import NeighborSensor, SpatialGrid

V = pygame.math.Vector3


class Dot:
    def __init__(self, x, y, z):
        self.position = V(x, y, z)


def test_get_neighbors_inclusive_radius():
    grid = SpatialGrid(10)
    near = Dot(0, 0, 5)
    edge = Dot(0, 0, 10)
    far = Dot(0, 0, 10.5)
    grid.rebuild([near, edge, far])

    found = grid.get_neighbors(V(0, 0, 0), 10)
    assert near in found
    assert edge in found
    assert far not in found


def test_get_neighbors_across_negative_cells():
    grid = SpatialGrid(4)
    dots = [Dot(-3, -3, -3), Dot(1, 1, 1), Dot(-9, 0, 0)]
    grid.rebuild(dots)

    found = grid.get_neighbors(V(0, 0, 0), 6)
    assert dots[0] in found
    assert dots[1] in found
    assert dots[2] not in found


def test_get_neighbors_radius_larger_than_cell():
    grid = SpatialGrid(2)
    far = Dot(0, 0, 9)
    grid.rebuild([far])
    assert grid.get_neighbors(V(0, 0, 0), 10) == [far]


def test_get_neighbors_excludes_querying_agent():
    grid = SpatialGrid(5)
    me = Dot(0, 0, 0)
    other = Dot(1, 0, 0)
    grid.rebuild([me, other])
    assert grid.get_neighbors(me.position, 5, exclude=me) == [other]


def test_clear():
    grid = SpatialGrid(5)
    grid.insert(Dot(0, 0, 0))
    grid.clear()
    assert grid.get_neighbors(V(0, 0, 0), 5) == []


def test_invalid_cell_size():
    with pytest.raises(ValueError):
        SpatialGrid(0)


def test_sensor_reports_enter_and_exit(make_boid):
    a = make_boid((0, 0, 0))
    b = make_boid((0, 0, 20))
    c = make_boid((0, 0, 200))
    flock = [a, b, c]
    sensor = NeighborSensor(SpatialGrid(50), 50)

    entered, exited = sensor.update(flock)
    assert (entered, exited) == (2, 0)
    assert a.neighbors == (b,)
    assert b.neighbors == (a,)
    assert c.neighbors == ()

    b.position = V(0, 0, 120)
    entered, exited = sensor.update(flock)
    assert (entered, exited) == (0, 2)
    assert a.neighbors == ()

    c.position = V(0, 0, 130)
    entered, exited = sensor.update(flock)
    assert (entered, exited) == (2, 0)
    assert b.neighbors == (c,)


def test_sensor_never_adds_self(make_boid):
    flock = [make_boid((i, 0, 0)) for i in range(4)]
    NeighborSensor(SpatialGrid(50), 50).update(flock)
    for boid in flock:
        assert boid not in boid.neighbors
        assert len(boid.neighbors) == 3
