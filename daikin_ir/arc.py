"""State and command frame of a Daikin ARC-series remote control."""

from __future__ import annotations

import time
from contextlib import suppress
from enum import IntEnum
from typing import Iterable, Sequence

from .protocol import byte_sum
from .receiver import ArcState, DaikinReceiver, describe_arc
from .sender import IRSender, Pulse

FRAME_LENGTH = 27
HEADER_LENGTH = 8
PACKET_GAP_S = 0.029

_INITIAL_FRAME = bytes(
    (
        0x11, 0xDA, 0x27, 0xF0, 0x00, 0x00, 0x00, 0x20,
        0x11, 0xDA, 0x27, 0x00, 0x00, 0x41, 0x1E, 0x00,
        0xB0, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xC1, 0x80, 0x00, 0xE3,
    )
)


class Mode(IntEnum):
    """Operating modes of the air conditioner."""

    FAN = 0
    COOL = 1
    DRY = 2
    HEAT = 3
    AUTO = 4


_MODE_CODES = (0x6, 0x3, 0x2, 0x4, 0x0)
_MODE_FROM_CODE = {code: index for index, code in enumerate(_MODE_CODES)}

# Speeds 0 to 4, then 5 for auto and 6 for the quiet ("moon") setting.
_FAN_CODES = (0x30, 0x40, 0x50, 0x60, 0x70, 0xA0, 0xB0)
_FAN_FROM_CODE = {code: index for index, code in enumerate(_FAN_CODES)}

_TEMPERATURE_LIMITS = {
    Mode.COOL: (18, 32),
    Mode.HEAT: (10, 30),
    Mode.AUTO: (18, 30),
}


def _as_mode(value: int) -> Mode | int:
    try:
        return Mode(value)
    except ValueError:
        return value


def _hex_dump(frame: Iterable[int]) -> str:
    return "".join(f"{byte:X}-" for byte in frame)


class DaikinARC:
    """Holds the settings of an ARC remote as its 27-byte command frame."""

    def __init__(
        self,
        sender: IRSender | None = None,
        receiver: DaikinReceiver | None = None,
    ) -> None:
        self.sender = sender if sender is not None else IRSender()
        self.receiver = receiver if receiver is not None else DaikinReceiver()
        self._frame = bytearray(_INITIAL_FRAME)

    def _update_checksums(self) -> None:
        self._frame[7] = byte_sum(self._frame[0:7])
        self._frame[26] = byte_sum(self._frame[8:26])

    def on(self) -> None:
        """Switch the unit on."""
        self._frame[13] |= 0x01
        self._update_checksums()

    def off(self) -> None:
        """Switch the unit off."""
        self._frame[13] &= 0xFE
        self._update_checksums()

    @property
    def power(self) -> int:
        """1 when the unit is on, 0 when it is off."""
        return self._frame[13] & 0x01

    @power.setter
    def power(self, state: int) -> None:
        if state:
            self.on()
        else:
            self.off()

    @property
    def swing(self) -> int:
        """1 when vertical swing is on, 0 otherwise."""
        return 1 if self._frame[16] & 0x0F == 0x0F else 0

    @swing.setter
    def swing(self, state: int) -> None:
        if state:
            self._frame[16] |= 0x0F
        else:
            self._frame[16] &= 0xF0
        self._update_checksums()

    @property
    def swing_lr(self) -> int:
        """1 when horizontal swing is on, 0 otherwise."""
        return self._frame[17] & 0x01

    @swing_lr.setter
    def swing_lr(self, state: int) -> None:
        if state:
            self._frame[17] |= 0x0F
        else:
            self._frame[17] &= 0xF0
        self._update_checksums()

    @property
    def mode(self) -> Mode | int:
        """The operating mode; an unknown raw code is returned as is."""
        raw = (self._frame[13] & 0x70) >> 4
        return _as_mode(_MODE_FROM_CODE.get(raw, raw))

    @mode.setter
    def mode(self, value: int) -> None:
        mode = Mode(value)
        self._frame[13] = (_MODE_CODES[mode] << 4) | self.power
        self._update_checksums()

    @property
    def fan(self) -> int:
        """Fan speed: 0 to 4, 5 for auto, 6 for quiet."""
        raw = self._frame[16] & 0xF0
        return _FAN_FROM_CODE.get(raw, raw)

    @fan.setter
    def fan(self, speed: int) -> None:
        if not 0 <= speed < len(_FAN_CODES):
            raise ValueError(f"fan speed must be 0 to {len(_FAN_CODES) - 1}, got {speed}")
        self._frame[16] &= 0x0F
        self._frame[16] |= _FAN_CODES[speed]
        self._update_checksums()

    @property
    def temperature(self) -> int:
        """Target temperature in degrees Celsius."""
        return (self._frame[14] & 0x7E) >> 1

    @temperature.setter
    def temperature(self, temp: int) -> None:
        mode = self.mode
        limits = _TEMPERATURE_LIMITS.get(mode)
        if limits is None:
            raise ValueError(f"temperature cannot be set in mode {mode!r}")
        low, high = limits
        if not low <= temp <= high:
            raise ValueError(
                f"temperature in mode {mode!r} must be {low} to {high}, got {temp}"
            )
        self._frame[14] = temp * 2
        self._update_checksums()

    @property
    def frame(self) -> bytes:
        """The command frame as it stands."""
        return bytes(self._frame)

    def send_command(self) -> tuple[list[Pulse], list[Pulse]]:
        """Send the header packet, pause, then send the data packet."""
        self._update_checksums()
        header = self.sender.send_daikin(self._frame, HEADER_LENGTH, 0)
        time.sleep(PACKET_GAP_S)
        data = self.sender.send_daikin(
            self._frame, FRAME_LENGTH - HEADER_LENGTH, HEADER_LENGTH
        )
        return header, data

    def dump(self) -> str:
        """Return the frame bytes in hexadecimal, each followed by a dash."""
        return _hex_dump(self._frame)

    def description(self) -> ArcState:
        """Read the current settings back out of the data packet."""
        return describe_arc(self._frame[HEADER_LENGTH:], self.receiver.packet_length)

    def decode(self, pulses: Iterable[tuple[int, int]]) -> bool:
        """Decode received (low, high) pairs; adopt the settings of a complete frame."""
        data = self.receiver.decode(pulses)
        if data is None or len(data) <= 10:
            return False
        self.update_from_received(data)
        return True

    def update_from_received(self, data: Sequence[int]) -> None:
        """Take over the settings carried by a received data packet.

        Values that the frame cannot hold in the resulting mode are skipped.
        """
        if len(data) < 10:
            raise ValueError(f"data packet needs at least 10 bytes, got {len(data)}")
        raw_mode = (data[5] & 0x70) >> 4
        raw_fan = data[8] & 0xF0
        self.power = data[5] & 0x01
        with suppress(ValueError):
            self.mode = _MODE_FROM_CODE.get(raw_mode, raw_mode)
        with suppress(ValueError):
            self.fan = _FAN_FROM_CODE.get(raw_fan, raw_fan)
        with suppress(ValueError):
            self.temperature = (data[6] & 0x7E) >> 1
        self.swing = data[8] & 0x01
        self.swing_lr = data[9] & 0x01