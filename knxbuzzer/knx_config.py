"""Melody configuration read from the device parameters."""

from __future__ import annotations

from dataclasses import dataclass

from knxbuzzer.knx_params import (
    APPLICATION_VERSION,
    MELODY_COUNT,
    KnxParameters,
    switch_ko,
    temperature_ko,
    trigger_ko,
)
from knxbuzzer.logger import log_warning
from knxbuzzer.modes import (
    Melody,
    MelodyConfig,
    Mode,
    ModeType,
    SwitchMode,
    TriggerMode,
    VentingMonitorMode,
)


@dataclass(frozen=True)
class ApplicationVersion:
    """Major and minor number of the application program."""

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class KnxConfig:
    """Turns raw parameter memory into melody configurations."""

    def __init__(self, params: KnxParameters) -> None:
        self._params = params

    def get_melody_configs(self) -> list[MelodyConfig]:
        """Return one configuration per configured melody, highest index first.

        An unexpected melody count leaves the device unconfigured: a warning
        is logged and an empty list returned.
        """
        count = self._params.number_of_melodies()
        if not 1 <= count <= MELODY_COUNT:
            log_warning("Number of melodies unexpected, keeping system unconfigured!")
            return []
        return [self._melody_config(index) for index in range(count, 0, -1)]

    def get_application_version(self) -> ApplicationVersion:
        """Return the version encoded in the application version byte."""
        return ApplicationVersion(
            major=(APPLICATION_VERSION >> 4) & 0x0F,
            minor=APPLICATION_VERSION & 0x0F,
        )

    def _melody_config(self, index: int) -> MelodyConfig:
        params = self._params
        melody = Melody(
            rtttl=params.melody_rtttl(index),
            pause_sec=params.melody_pause(index),
        )
        return MelodyConfig(priority=index, mode=self._mode(index), melody=melody)

    def _mode(self, index: int) -> Mode:
        params = self._params
        selector = params.melody_mode(index)
        if selector == ModeType.TRIGGER:
            return TriggerMode(trigger_ko(index))
        if selector == ModeType.SWITCH:
            return SwitchMode(switch_ko(index))
        return VentingMonitorMode(
            ko_venting=switch_ko(index),
            ko_temp=temperature_ko(index),
            lower_temp_limit_c=params.lower_temp_limit(index),
            upper_temp_limit_c=params.upper_temp_limit(index),
            venting_duration_limit_min=params.venting_duration(index),
        )