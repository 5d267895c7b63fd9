"""
Boid agent class implementing zone-based flocking behavior.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .base import Agent
from ..config import FlockSettings
from ..steering import contribution
from ..vector_math import is_zero, lerp, orientation_facing, rotate_towards, vec3
from ..zones import classify_offset

logger = logging.getLogger(__name__)


class AgentState(Enum):
    IDLE = "idle"
    STEERING = "steering"


@dataclass(frozen=True)
class BoidSnapshot:
    """Read-only view of one boid for renderers and exporters."""
    agent_id: int
    position: Tuple[float, float, float]
    heading: Tuple[float, float, float]
    speed: float
    velocity: Tuple[float, float, float]
    target_direction: Tuple[float, float, float]
    state: str
    neighbor_count: int
    repulsion_distance: float
    alignment_distance: float
    attraction_distance: float

    def to_dict(self) -> dict:
        return {
            "agent_id": self.agent_id,
            "position": list(self.position),
            "heading": list(self.heading),
            "speed": self.speed,
            "velocity": list(self.velocity),
            "target_direction": list(self.target_direction),
            "state": self.state,
            "neighbor_count": self.neighbor_count,
            "repulsion_distance": self.repulsion_distance,
            "alignment_distance": self.alignment_distance,
            "attraction_distance": self.attraction_distance,
        }


class Boid(Agent):
    """
    A boid that steers from the neighbors it can see.

    Each visible neighbor falls into exactly one zone:
    - Repulsion: steer away from it
    - Alignment: steer along its heading
    - Attraction: steer toward it

    Contributions accumulate into a target direction that carries over
    between ticks until the boid's heading gets close enough to it.
    """

    def __init__(self, position, settings: FlockSettings, heading=None, speed: float = 0.0):
        """
        Initialize a boid.

        Args:
            position: Initial 3D position
            settings: Flock settings shared by reference with the whole flock
            heading: Initial facing direction (defaults to +Z)
            speed: Initial scalar speed
        """
        super().__init__(position, heading, speed)
        self.settings = settings
        self.target_direction = vec3()
        self.target_rotation = vec3(self.heading)
        self.contributing_neighbors = 0
        self._neighbors: List["Boid"] = []

    # Neighbor set maintained by the sensing collaborator

    @property
    def neighbors(self) -> Tuple["Boid", ...]:
        return tuple(self._neighbors)

    def neighbor_entered(self, other: "Boid") -> None:
        """Record a boid that came within sensing range."""
        if other is self or other in self._neighbors:
            return
        self._neighbors.append(other)
        logger.debug("boid %d: neighbor %d entered", self.agent_id, other.agent_id)

    def neighbor_exited(self, other: "Boid") -> None:
        """Forget a boid that left sensing range."""
        if other in self._neighbors:
            self._neighbors.remove(other)
            logger.debug("boid %d: neighbor %d exited", self.agent_id, other.agent_id)

    # Motion

    def set_velocity(self, velocity) -> None:
        """
        Set the launch velocity.

        The magnitude becomes the current speed and the vector itself the
        initial target direction; the facing eases toward it over the
        following ticks.
        """
        velocity = vec3(velocity)
        self.speed = velocity.length()
        self.target_direction = velocity
        self.velocity = self.heading * self.speed

    @property
    def state(self) -> AgentState:
        if is_zero(self.target_direction, 0.0):
            return AgentState.IDLE
        return AgentState.STEERING

    def tick(self) -> int:
        """
        Advance steering and speed by one simulation step.

        Returns:
            Number of neighbors that contributed a force this tick
        """
        settings = self.settings
        target = vec3(self.target_direction)
        contributing = 0

        for other in tuple(self._neighbors):
            offset = other.position - self.position
            zone = classify_offset(self.heading, offset, settings)
            if zone is None:
                continue
            target += contribution(zone, offset, other.heading, settings)
            contributing += 1

        self.contributing_neighbors = contributing

        # Ease toward cruising speed and keep flying along the facing
        self.speed = lerp(self.speed, settings.maxSpeed, settings.speedSmoothing)
        self.velocity = self.heading * self.speed

        if contributing == 0:
            self.target_direction = target
            return 0

        target /= contributing
        self.target_direction = target
        if is_zero(target, 0.0):
            return contributing

        self.target_rotation = orientation_facing(target)
        if is_zero(self.heading):
            self.heading = vec3(self.target_rotation)
        else:
            self.heading = rotate_towards(self.heading, self.target_rotation,
                                          settings.turnSmoothing)

        if (target - self.heading).length() < settings.arrivalTolerance:
            self.target_direction = vec3()
            logger.debug("boid %d: reached target direction", self.agent_id)

        return contributing

    def snapshot(self) -> BoidSnapshot:
        """Capture the boid's current state."""
        return BoidSnapshot(
            agent_id=self.agent_id,
            position=tuple(self.position),
            heading=tuple(self.heading),
            speed=self.speed,
            velocity=tuple(self.velocity),
            target_direction=tuple(self.target_direction),
            state=self.state.value,
            neighbor_count=len(self._neighbors),
            repulsion_distance=self.settings.repulsionDistance,
            alignment_distance=self.settings.alignmentDistance,
            attraction_distance=self.settings.attractionDistance,
        )
