"""State and command frame of a Daikin BRC-series remote control."""

from __future__ import annotations

import time

from .protocol import byte_sum
from .sender import IRSender, Pulse

FRAME_LENGTH = 22
HEADER_LENGTH = 7
PACKET_GAP_S = 0.029
MIN_TEMPERATURE = 18
MAX_TEMPERATURE = 36

_INITIAL_FRAME = bytes(
    (
        0x11, 0xDA, 0x17, 0x18, 0x04, 0x00, 0x1E,
        0x11, 0xDA, 0x17, 0x18, 0x00, 0x73, 0x00, 0x21, 0x00,
        0x00, 0x20, 0x35, 0x00, 0x20, 0x23,
    )
)

# Index 0 is high speed, index 1 low speed.
_FAN_CODES = (0x00, 0x20)
# Modes 0 to 2: fan, cool, dry.
_MODE_CODES_12 = (0x60, 0x20, 0x70)
_MODE_CODES_14 = (0x00, 0x70, 0x20)


class DaikinBRC:
    """Holds the settings of a BRC remote as its 22-byte command frame."""

    def __init__(self, sender: IRSender | None = None) -> None:
        self.sender = sender if sender is not None else IRSender()
        self._frame = bytearray(_INITIAL_FRAME)

    def _update_checksums(self) -> None:
        self._frame[6] = byte_sum(self._frame[0:6])
        self._frame[21] = byte_sum(self._frame[7:21])

    def on(self) -> None:
        """Switch the unit on."""
        self._frame[14] |= 0x01
        self._update_checksums()

    def off(self) -> None:
        """Switch the unit off."""
        self._frame[14] &= 0xFE
        self._update_checksums()

    @property
    def power(self) -> int:
        """1 when the unit is on, 0 when it is off."""
        return self._frame[14] & 0x01

    def set_swing(self, state: int) -> None:
        """Turn the louvre swing on or off."""
        self._frame[18] &= 0xFC
        self._frame[18] |= 0x01 if state else 0x02
        self._update_checksums()

    def set_mode(self, mode: int) -> None:
        """Set the mode: 0 fan, 1 cool, 2 dry."""
        if not 0 <= mode < len(_MODE_CODES_12):
            raise ValueError(f"mode must be 0 to {len(_MODE_CODES_12) - 1}, got {mode}")
        self._frame[12] &= 0x8F
        self._frame[12] |= _MODE_CODES_12[mode]
        self._frame[14] &= 0x8F
        self._frame[14] |= _MODE_CODES_14[mode]
        self._update_checksums()

    def set_fan(self, speed: int) -> None:
        """Set the fan speed: 0 high, 1 low."""
        if not 0 <= speed < len(_FAN_CODES):
            raise ValueError(f"fan speed must be 0 or 1, got {speed}")
        self._frame[18] &= 0xDF
        self._frame[18] |= _FAN_CODES[speed]
        self._update_checksums()

    def set_temperature(self, temp: int) -> None:
        """Set the target temperature in degrees Celsius."""
        if not MIN_TEMPERATURE <= temp <= MAX_TEMPERATURE:
            raise ValueError(
                f"temperature must be {MIN_TEMPERATURE} to {MAX_TEMPERATURE}, got {temp}"
            )
        self._frame[17] = (temp - 9) << 1
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
        return "".join(f"{byte:X}-" for byte in self._frame)