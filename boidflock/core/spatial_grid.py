"""
Spatial hash grid for efficient neighbor lookup in 3D space.
"""

import logging
import math
from collections import defaultdict
from typing import Any, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class SpatialGrid:
    """
    Spatial hash grid for efficient neighbor lookup.

    Divides unbounded 3D space into cubic cells and only checks the cells
    that can overlap a query sphere.
    """

    def __init__(self, cell_size: float):
        """
        Initialize the spatial grid.

        Args:
            cell_size: Edge length of each grid cell
        """
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self.grid = defaultdict(list)

    def clear(self) -> None:
        """Clear all agents from the grid."""
        self.grid.clear()

    def _hash(self, x: float, y: float, z: float) -> Tuple[int, int, int]:
        """
        Convert world coordinates to grid cell coordinates.

        Args:
            x: X position in world coordinates
            y: Y position in world coordinates
            z: Z position in world coordinates

        Returns:
            Tuple of (column, row, layer) cell indices
        """
        return (
            math.floor(x / self.cell_size),
            math.floor(y / self.cell_size),
            math.floor(z / self.cell_size),
        )

    def insert(self, agent: Any) -> None:
        """
        Insert an agent into the grid based on its position.

        Args:
            agent: Agent object with a 'position' attribute (pygame.math.Vector3)
        """
        cell = self._hash(agent.position.x, agent.position.y, agent.position.z)
        self.grid[cell].append(agent)

    def rebuild(self, agents: Iterable[Any]) -> None:
        """Clear the grid and insert every agent."""
        self.clear()
        for agent in agents:
            self.insert(agent)

    def get_neighbors(self, position: Any, radius: float, exclude: Optional[Any] = None) -> List[Any]:
        """
        Get all agents within a given radius of a position.

        Args:
            position: Center position (pygame.math.Vector3)
            radius: Search radius (inclusive)
            exclude: Agent to leave out of the result, usually the querying one

        Returns:
            List of agents within the specified radius
        """
        neighbors = []
        cell = self._hash(position.x, position.y, position.z)
        reach = max(1, math.ceil(radius / self.cell_size))

        for c in self._get_adjacent_cells(cell, reach):
            for agent in self.grid.get(c, []):
                if agent is exclude:
                    continue
                if position.distance_to(agent.position) <= radius:
                    neighbors.append(agent)

        return neighbors

    def _get_adjacent_cells(self, cell: Tuple[int, int, int], reach: int) -> List[Tuple[int, int, int]]:
        """
        Get a cell and every cell within `reach` steps of it on each axis.

        Args:
            cell: The center cell as (column, row, layer)
            reach: Number of cells to extend in each direction

        Returns:
            List of cell coordinates to check
        """
        col, row, layer = cell
        span = range(-reach, reach + 1)
        return [(col + dc, row + dr, layer + dl) for dc in span for dr in span for dl in span]


class NeighborSensor:
    """
    Keeps each boid's neighbor set in step with the flock's positions.

    Every update compares what the grid finds inside a boid's sensing
    radius with the boid's current neighbors and reports the difference as
    enter/exit events on the boid.
    """

    def __init__(self, grid: SpatialGrid, radius: float):
        self.grid = grid
        self.radius = radius

    def update(self, agents: List[Any]) -> Tuple[int, int]:
        """
        Refresh neighbor sets for all agents.

        Args:
            agents: Agents supporting neighbors / neighbor_entered / neighbor_exited

        Returns:
            Tuple of (enter events, exit events)
        """
        self.grid.rebuild(agents)

        # Compute every sensed set first so no boid sees a half-updated flock
        sensed = [self.grid.get_neighbors(agent.position, self.radius, exclude=agent)
                  for agent in agents]

        entered = exited = 0
        for agent, found in zip(agents, sensed):
            found_ids = {id(other) for other in found}
            for other in agent.neighbors:
                if id(other) not in found_ids:
                    agent.neighbor_exited(other)
                    exited += 1

            current_ids = {id(other) for other in agent.neighbors}
            for other in found:
                if id(other) not in current_ids:
                    agent.neighbor_entered(other)
                    entered += 1

        logger.debug("neighbor sensing: %d entered, %d exited", entered, exited)
        return entered, exited
