"""Melody configuration data: operating modes and melodies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF


def _check_range(name: str, value: int, high: int) -> None:
    if not 0 <= value <= high:
        raise ValueError(f"{name} must be between 0 and {high}, got {value}")


class ModeType(IntEnum):
    """Kind of behaviour a melody is configured for."""

    TRIGGER = 0
    SWITCH = 1
    VENTING_MONITOR = 2


class Mode(ABC):
    """Base of all melody operating modes."""

    @abstractmethod
    def mode_type(self) -> ModeType:
        """Return the kind of this mode."""


@dataclass(frozen=True)
class TriggerMode(Mode):
    """Play once whenever the group object receives a true value."""

    ko_number: int

    def __post_init__(self) -> None:
        _check_range("ko_number", self.ko_number, _UINT16_MAX)

    def mode_type(self) -> ModeType:
        return ModeType.TRIGGER


@dataclass(frozen=True)
class SwitchMode(Mode):
    """Repeat the melody while the group object is switched on."""

    ko_number: int

    def __post_init__(self) -> None:
        _check_range("ko_number", self.ko_number, _UINT16_MAX)

    def mode_type(self) -> ModeType:
        return ModeType.SWITCH


@dataclass(frozen=True)
class VentingMonitorMode(Mode):
    """Warn when venting lasts too long outside a temperature band."""

    ko_venting: int
    ko_temp: int
    lower_temp_limit_c: int
    upper_temp_limit_c: int
    venting_duration_limit_min: int

    def __post_init__(self) -> None:
        _check_range("ko_venting", self.ko_venting, _UINT16_MAX)
        _check_range("ko_temp", self.ko_temp, _UINT16_MAX)
        _check_range(
            "venting_duration_limit_min", self.venting_duration_limit_min, _UINT8_MAX
        )

    def mode_type(self) -> ModeType:
        return ModeType.VENTING_MONITOR


@dataclass(frozen=True)
class Melody:
    """An RTTTL melody and the pause in seconds between repetitions."""

    rtttl: str
    pause_sec: int

    def __post_init__(self) -> None:
        _check_range("pause_sec", self.pause_sec, _UINT8_MAX)


@dataclass(frozen=True)
class MelodyConfig:
    """A melody together with its priority and operating mode."""

    priority: int
    mode: Mode
    melody: Melody

    def __post_init__(self) -> None:
        _check_range("priority", self.priority, _UINT8_MAX)