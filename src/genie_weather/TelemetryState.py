"""Telemetry state dataclasses."""
from dataclasses import dataclass, field

from .RollingHistory import RollingHistory

TEMPERATURE_HISTORY_DAYS = 7
PRESSURE_HISTORY_DAYS = 8


@dataclass
class TemperatureState:
    """Live temperature, running extrema and their daily histories."""
    current: int = 0
    minimum: int = 40
    maximum: int = -10
    history: RollingHistory = field(
        default_factory=lambda: RollingHistory(TEMPERATURE_HISTORY_DAYS)
    )
    minimum_history: RollingHistory = field(
        default_factory=lambda: RollingHistory(TEMPERATURE_HISTORY_DAYS)
    )
    maximum_history: RollingHistory = field(
        default_factory=lambda: RollingHistory(TEMPERATURE_HISTORY_DAYS)
    )


@dataclass
class PressureState:
    """Live pressure and its daily history."""
    current: int = 0
    history: RollingHistory = field(
        default_factory=lambda: RollingHistory(PRESSURE_HISTORY_DAYS)
    )
