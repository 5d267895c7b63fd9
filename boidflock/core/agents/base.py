"""
Base Agent class for all simulation entities.
"""

import itertools

from ..vector_math import safe_normalize, vec3

_agent_ids = itertools.count()


class Agent:
    """
    Base class for all agents in the simulation.

    Holds position, facing and scalar speed. Motion is always along the
    current facing; agents never strafe.
    """

    def __init__(self, position=None, heading=None, speed: float = 0.0):
        """
        Initialize an agent.

        Args:
            position: Initial 3D position (defaults to the origin)
            heading: Initial facing direction (defaults to +Z)
            speed: Initial scalar speed
        """
        self.agent_id = next(_agent_ids)
        self.position = vec3(position)
        self.heading = safe_normalize(vec3(heading if heading is not None else (0, 0, 1)))
        self.speed = float(speed)
        self.velocity = self.heading * self.speed

    def move(self, dt: float) -> None:
        """
        Advance position along the current velocity.

        Args:
            dt: Timestep in seconds
        """
        self.position += self.velocity * dt

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(id={self.agent_id}, "
                f"position={tuple(self.position)}, speed={self.speed:.3f})")
