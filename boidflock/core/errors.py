"""
Exception types raised by the flocking core.
"""


class FlockError(Exception):
    """Base class for all flocking errors."""


class SettingsError(FlockError, ValueError):
    """Raised when flock or simulation settings are malformed."""


class UnknownZoneError(FlockError, RuntimeError):
    """Raised when a value outside the known zones reaches zone logic."""
