"""Layout of the device parameter memory and group object numbers."""

from __future__ import annotations

OPENKNX_ID = 0xAF
APPLICATION_NUMBER = 0x00
APPLICATION_VERSION = 0x3D
ORDER_NUMBER = "TA-00002.1"
PARAMETER_SIZE = 4129
MAX_KO_NUMBER = 24

MELODY_COUNT = 8
RTTTL_SIZE = 512

_NUMBER_MELODIES_OFFSET = 0x0000
_MELODY_PAUSE_OFFSET = 0x0001
_MELODY_RTTTL_OFFSET = 0x0009
_LOWER_TEMP_OFFSET = 0x1009
_UPPER_TEMP_OFFSET = 0x1011
_DURATION_OFFSET = 0x1019

_TRIGGER_KO_BASE = 0
_SWITCH_KO_BASE = 8
_TEMPERATURE_KO_BASE = 16


def param_delay(time: int) -> int:
    """Decode a delay parameter into milliseconds.

    The two top bits of the 16-bit value select the unit (tenths of a
    second, seconds, minutes or hours), the low 14 bits hold the amount.
    Hour values above 1000 are clamped to one hour.
    """
    unit = time & 0xC000
    amount = time & 0x3FFF
    if unit == 0xC000:
        result = amount * 100
    elif unit == 0x0000:
        result = amount * 1000
    elif unit == 0x4000:
        result = amount * 60000
    else:
        result = 3600000 if amount > 1000 else amount * 3600000
    return result & 0xFFFFFFFF


def _check_index(index: int) -> int:
    if not 1 <= index <= MELODY_COUNT:
        raise ValueError(f"melody index must be between 1 and {MELODY_COUNT}, got {index}")
    return index


def trigger_ko(index: int) -> int:
    """Group object number of the trigger input of melody ``index``."""
    return _TRIGGER_KO_BASE + _check_index(index)


def switch_ko(index: int) -> int:
    """Group object number of the switch input of melody ``index``."""
    return _SWITCH_KO_BASE + _check_index(index)


def temperature_ko(index: int) -> int:
    """Group object number of the temperature input of melody ``index``."""
    return _TEMPERATURE_KO_BASE + _check_index(index)


class KnxParameters:
    """Read access to the parameter memory written by the ETS.

    ``data`` shorter than :data:`PARAMETER_SIZE` is padded with zero bytes.
    """

    def __init__(self, data: bytes | bytearray = b"") -> None:
        if len(data) > PARAMETER_SIZE:
            raise ValueError(
                f"parameter data holds at most {PARAMETER_SIZE} bytes, got {len(data)}"
            )
        self._data = bytes(data).ljust(PARAMETER_SIZE, b"\x00")

    def param_byte(self, offset: int) -> int:
        """Return the byte at ``offset``."""
        if not 0 <= offset < PARAMETER_SIZE:
            raise IndexError(f"parameter offset {offset} out of range")
        return self._data[offset]

    def param_data(self, offset: int, size: int) -> bytes:
        """Return ``size`` bytes starting at ``offset``."""
        if size < 0 or not 0 <= offset <= PARAMETER_SIZE - size:
            raise IndexError(f"parameter range {offset}+{size} out of range")
        return self._data[offset : offset + size]

    def number_of_melodies(self) -> int:
        """Number of configured melodies (4-bit field)."""
        return (self.param_byte(_NUMBER_MELODIES_OFFSET) >> 4) & 0x0F

    def melody_pause(self, index: int) -> int:
        """Pause in seconds between repetitions of melody ``index``."""
        offset = _MELODY_PAUSE_OFFSET + _check_index(index) - 1
        return (self.param_byte(offset) >> 2) & 0x3F

    def melody_rtttl(self, index: int) -> str:
        """RTTTL text of melody ``index``, up to the first NUL byte."""
        offset = _MELODY_RTTTL_OFFSET + (_check_index(index) - 1) * RTTTL_SIZE
        raw = self.param_data(offset, RTTTL_SIZE)
        return raw.split(b"\x00", 1)[0].decode("latin-1")

    def melody_mode(self, index: int) -> int:
        """Raw 2-bit mode selector of melody ``index``."""
        _check_index(index)
        if index == 1:
            return (self.param_byte(0x0000) >> 2) & 0x03
        return self.param_byte(index - 2) & 0x03

    def lower_temp_limit(self, index: int) -> int:
        """Lower temperature exclusion limit in degrees Celsius (signed)."""
        return self._signed_byte(_LOWER_TEMP_OFFSET + _check_index(index) - 1)

    def upper_temp_limit(self, index: int) -> int:
        """Upper temperature exclusion limit in degrees Celsius (signed)."""
        return self._signed_byte(_UPPER_TEMP_OFFSET + _check_index(index) - 1)

    def venting_duration(self, index: int) -> int:
        """Venting time in minutes before melody ``index`` is armed."""
        offset = _DURATION_OFFSET + _check_index(index) - 1
        return (self.param_byte(offset) >> 2) & 0x3F

    def _signed_byte(self, offset: int) -> int:
        value = self.param_byte(offset)
        return value - 0x100 if value & 0x80 else value