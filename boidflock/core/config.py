"""
Configuration classes and defaults for the flocking simulation.
"""

import json
import math
from dataclasses import dataclass, field, fields
from typing import List, Optional

from .errors import SettingsError


def _require_finite(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
        raise SettingsError(f"{name} must be a finite number, got {value!r}")


@dataclass(frozen=True)
class FlockSettings:
    """
    Shared, read-only steering parameters for every boid in a flock.

    The three zone radii must be strictly ordered:
    repulsionDistance < alignmentDistance < attractionDistance.
    """

    # Zone radii
    repulsionDistance: float = 5.0
    alignmentDistance: float = 9.0
    attractionDistance: float = 50.0

    # Zone forces (any sign)
    repulsionForce: float = 15.0
    alignmentForce: float = 3.0
    attractionForce: float = 20.0

    # Movement
    maxSpeed: float = 10.0
    steerSpeed: float = 1.0  # degrees per second

    # Per-tick integration factors
    speedSmoothing: float = 0.1
    turnSmoothing: float = 0.1
    arrivalTolerance: float = 1.0

    def __post_init__(self):
        for f in fields(self):
            _require_finite(f.name, getattr(self, f.name))

        for name in ("repulsionDistance", "alignmentDistance", "attractionDistance"):
            if getattr(self, name) <= 0:
                raise SettingsError(f"{name} must be positive, got {getattr(self, name)}")

        if not (self.repulsionDistance < self.alignmentDistance < self.attractionDistance):
            raise SettingsError(
                "Zone radii must satisfy repulsionDistance < alignmentDistance < attractionDistance "
                f"(got {self.repulsionDistance}, {self.alignmentDistance}, {self.attractionDistance})"
            )

        if self.maxSpeed < 0:
            raise SettingsError(f"maxSpeed must be >= 0, got {self.maxSpeed}")
        if self.steerSpeed < 0:
            raise SettingsError(f"steerSpeed must be >= 0, got {self.steerSpeed}")

        for name in ("speedSmoothing", "turnSmoothing"):
            value = getattr(self, name)
            if not 0 < value <= 1:
                raise SettingsError(f"{name} must be in (0, 1], got {value}")

        if self.arrivalTolerance <= 0:
            raise SettingsError(f"arrivalTolerance must be positive, got {self.arrivalTolerance}")

    @property
    def sensing_radius(self) -> float:
        """Farthest distance at which another boid is perceived."""
        return self.attractionDistance

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "FlockSettings":
        """Create settings from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


@dataclass
class SimulationConfig:
    """Configuration for a headless flocking run."""

    # Spawning
    boidCount: int = 50
    spread: float = 20.0
    startSpeed: float = 4.0
    center: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    seed: Optional[int] = None

    # Timing
    dt: float = 1.0 / 60.0

    # Neighbor detection (None = use the attraction radius)
    gridCellSize: Optional[float] = None

    # Recording
    statsInterval: int = 10
    snapshotInterval: int = 0

    # Shared boid settings
    flock: FlockSettings = field(default_factory=FlockSettings)

    def __post_init__(self):
        if isinstance(self.flock, dict):
            self.flock = FlockSettings.from_dict(self.flock)
        self.validate()

    def validate(self) -> None:
        """Raise SettingsError if any value is out of range."""
        if not isinstance(self.boidCount, int) or self.boidCount < 0:
            raise SettingsError(f"boidCount must be a non-negative integer, got {self.boidCount!r}")

        for name in ("spread", "startSpeed", "dt"):
            _require_finite(name, getattr(self, name))
        if self.spread < 0:
            raise SettingsError(f"spread must be >= 0, got {self.spread}")
        if self.startSpeed < 0:
            raise SettingsError(f"startSpeed must be >= 0, got {self.startSpeed}")
        if self.dt <= 0:
            raise SettingsError(f"dt must be positive, got {self.dt}")

        if len(self.center) != 3:
            raise SettingsError(f"center must have 3 components, got {self.center!r}")
        for value in self.center:
            _require_finite("center", value)

        if self.gridCellSize is not None:
            _require_finite("gridCellSize", self.gridCellSize)
            if self.gridCellSize <= 0:
                raise SettingsError(f"gridCellSize must be positive, got {self.gridCellSize}")

        for name in ("statsInterval", "snapshotInterval"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise SettingsError(f"{name} must be a non-negative integer, got {value!r}")

    @property
    def cell_size(self) -> float:
        if self.gridCellSize is not None:
            return self.gridCellSize
        return self.flock.attractionDistance

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "boidCount": self.boidCount,
            "spread": self.spread,
            "startSpeed": self.startSpeed,
            "center": list(self.center),
            "seed": self.seed,
            "dt": self.dt,
            "gridCellSize": self.gridCellSize,
            "statsInterval": self.statsInterval,
            "snapshotInterval": self.snapshotInterval,
            "flock": self.flock.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    @classmethod
    def load(cls, path: str) -> "SimulationConfig":
        """Load config from a JSON file."""
        with open(path, 'r') as f:
            return cls.from_dict(json.load(f))

    def save(self, path: str) -> str:
        """Save config to a JSON file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
        return path


# Default configuration for a headless run
DEFAULT_SETTINGS = FlockSettings()
DEFAULT_CONFIG = SimulationConfig()
