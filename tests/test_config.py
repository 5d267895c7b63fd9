import dataclasses
import math

import pytest

from boidflock.core.config import DEFAULT_SETTINGS, FlockSettings, SimulationConfig
from boidflock.core.errors import SettingsError


def test_flock_settings_defaults():
    s = FlockSettings()
    assert (s.repulsionDistance, s.alignmentDistance, s.attractionDistance) == (5, 9, 50)
    assert (s.repulsionForce, s.alignmentForce, s.attractionForce) == (15, 3, 20)
    assert s.maxSpeed == 10
    assert s.steerSpeed == 1
    assert s.sensing_radius == 50


@pytest.mark.parametrize("radii", [(9, 5, 50), (5, 50, 9), (5, 5, 50), (5, 9, 9)])
def test_unordered_radii_rejected(radii):
    r, a, t = radii
    with pytest.raises(SettingsError, match="repulsionDistance < alignmentDistance"):
        FlockSettings(repulsionDistance=r, alignmentDistance=a, attractionDistance=t)


@pytest.mark.parametrize("kwargs", [
    {"repulsionDistance": 0},
    {"maxSpeed": -1},
    {"steerSpeed": -0.5},
    {"speedSmoothing": 0},
    {"turnSmoothing": 1.5},
    {"arrivalTolerance": 0},
    {"attractionForce": math.nan},
    {"alignmentDistance": math.inf},
])
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(SettingsError):
        FlockSettings(**kwargs)


def test_settings_error_is_value_error():
    with pytest.raises(ValueError):
        FlockSettings(alignmentDistance=1)


def test_negative_forces_allowed():
    s = FlockSettings(repulsionForce=-2, attractionForce=-1)
    assert s.repulsionForce == -2


def test_settings_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.maxSpeed = 3


def test_settings_from_dict_ignores_unknown_keys():
    s = FlockSettings.from_dict({"maxSpeed": 7, "displayDebug": True})
    assert s.maxSpeed == 7
    assert FlockSettings.from_dict(s.to_dict()) == s


def test_simulation_config_builds_nested_settings():
    config = SimulationConfig.from_dict({"boidCount": 3, "flock": {"maxSpeed": 2}})
    assert isinstance(config.flock, FlockSettings)
    assert config.flock.maxSpeed == 2
    assert config.cell_size == config.flock.attractionDistance


def test_simulation_config_explicit_cell_size():
    assert SimulationConfig(gridCellSize=12.5).cell_size == 12.5


@pytest.mark.parametrize("kwargs", [
    {"boidCount": -1},
    {"spread": -1},
    {"startSpeed": -4},
    {"dt": 0},
    {"gridCellSize": 0},
    {"statsInterval": -1},
    {"center": [0, 0]},
])
def test_invalid_simulation_config_rejected(kwargs):
    with pytest.raises(SettingsError):
        SimulationConfig(**kwargs)


def test_simulation_config_json_round_trip(tmp_path):
    path = tmp_path / "flock.json"
    config = SimulationConfig(boidCount=7, seed=3, flock=FlockSettings(maxSpeed=6))
    config.save(str(path))

    loaded = SimulationConfig.load(str(path))
    assert loaded.boidCount == 7
    assert loaded.seed == 3
    assert loaded.flock == config.flock
