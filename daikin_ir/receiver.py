"""Decoding of Daikin IR signals from low/high durations into frame bytes.

Durations are counted in samples of ``SAMPLE_DELAY_US`` microseconds. ``low`` is
the time the detector output stays low (carrier present) and ``high`` is the
time it stays high afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable, Sequence

from .protocol import byte_sum

SAMPLE_DELAY_US = 10
SIGNAL_TIMEOUT_COUNT = 6000 // SAMPLE_DELAY_US
PACKET_GAP_COUNT = 80_000 // SAMPLE_DELAY_US
RECEIVE_BUFFER_SIZE = 26
MIN_BUFFER_SIZE = 24
WAKE_PAIRS_REQUIRED = 4

MODE_NAMES = ("FAN", "COOL", "DRY", "HEAT", "AUTO")
_MODE_CODES = {0x6: 0, 0x3: 1, 0x2: 2, 0x4: 3, 0x0: 4}
_FAN_CODES = {0x30: 0, 0x40: 1, 0x50: 2, 0x60: 3, 0x70: 4, 0xA0: 5, 0xB0: 6}


class Pattern(IntFlag):
    """What a low/high pair was recognised as."""

    NONE = 0
    START = 0b00001
    PACKET = 0b00010
    STOP = 0b00100
    WAKEUP = 0b01000
    PACKET_ERROR = 0b10000


class ReceiveError(Exception):
    """A received signal could not be turned into a valid frame."""


def is_one(low: int, high: int) -> bool:
    """Return True if the pair has the timing of a one bit."""
    return 15 < low < 60 and low + low <= high < 150


def is_zero(low: int, high: int) -> bool:
    """Return True if the pair has the timing of a zero bit."""
    return 15 < low < 60 and 10 <= high < 58


def is_start(low: int, high: int) -> bool:
    """Return True if the pair has the timing of a frame header."""
    return 50 < low < 450 and 70 < high < 250


def is_stop(low: int, high: int) -> bool:
    """Return True if the pair has the timing of a frame trailer."""
    return 20 < low < 500 and high > 200


def verify_checksum(data: Sequence[int]) -> bool:
    """Return True if the last byte is the 8-bit sum of the bytes before it."""
    if not data:
        raise ValueError("cannot verify the checksum of empty data")
    return byte_sum(data[:-1]) == data[-1]


@dataclass(frozen=True)
class ArcState:
    """Settings carried by the data packet of an ARC remote."""

    power: int
    mode: int
    fan: int
    temperature: int
    swing: int
    swing_lr: int
    timer_on: int
    timer_on_value: int
    timer_off: int
    timer_off_value: int
    econo: int
    time_now: int

    def __str__(self) -> str:
        mode = f"Mode:{self.mode}"
        if 0 <= self.mode < len(MODE_NAMES):
            mode += f" ({MODE_NAMES[self.mode]})"
        return "\n".join(
            [
                f"Power:{self.power}",
                mode,
                f"Fan:{self.fan}",
                f"Temperature:{self.temperature}",
                f"Swing:{self.swing}",
                f"SwingLR:{self.swing_lr}",
            ]
        )


def describe_arc(data: Sequence[int], packet_length: int = 2) -> ArcState:
    """Read the settings out of a received ARC data packet."""
    if len(data) < 17:
        raise ValueError(f"ARC data packet needs at least 17 bytes, got {len(data)}")
    raw_mode = (data[5] & 0x70) >> 4
    raw_fan = data[8] & 0xF0
    time_now = 0
    if packet_length == 3:
        time_now = data[5] | (data[6] & 0x07) << 8
    return ArcState(
        power=data[5] & 0x01,
        mode=_MODE_CODES.get(raw_mode, raw_mode),
        fan=_FAN_CODES.get(raw_fan, raw_fan),
        temperature=(data[6] & 0x7E) >> 1,
        swing=(data[8] & 0x0F) >> 3,
        swing_lr=(data[9] & 0x0F) >> 3,
        timer_on=(data[5] & 0x02) >> 1,
        timer_on_value=data[10] | (data[11] & 0x07) << 8,
        timer_off=(data[5] & 0x04) >> 2,
        timer_off_value=((data[11] & 0xF0) >> 4) | (data[12] & 0x7F) << 4,
        econo=(data[16] & 0x04) >> 2,
        time_now=time_now,
    )


class DaikinReceiver:
    """State machine that assembles Daikin packets from low/high duration pairs.

    A frame is made of two packets, or three when a wake-up preamble was seen;
    the bytes of the last packet are what a completed decode yields.
    """

    def __init__(self, buffer_size: int = 25) -> None:
        if buffer_size < MIN_BUFFER_SIZE:
            raise ValueError(
                f"buffer size must be at least {MIN_BUFFER_SIZE}, got {buffer_size}"
            )
        self.buffer_size = buffer_size
        self.reset()

    def reset(self) -> None:
        """Forget every partially received packet."""
        self.packet_counter = 0
        self.packet_length = 3
        self.has_wakeup = False
        self.in_packet = False
        self.wake_counter = 0
        self._buffer = bytearray(RECEIVE_BUFFER_SIZE)
        self._bit_ptr = 0
        self._index = 0

    def _restart(self) -> None:
        self.in_packet = False
        self.has_wakeup = False
        self.packet_counter = 0
        self._index = 0
        self._bit_ptr = 0

    def _push_bit(self, bit: int) -> None:
        if self._bit_ptr > 7:
            if self._index + 1 >= RECEIVE_BUFFER_SIZE:
                self._restart()
                raise ReceiveError("packet is longer than the receive buffer")
            self._index += 1
            self._bit_ptr = 0
        else:
            self._buffer[self._index] >>= 1
        if bit:
            self._buffer[self._index] |= 0x80
        else:
            self._buffer[self._index] &= 0x7F
        self._bit_ptr += 1

    def _step(self, low: int, high: int) -> Pattern:
        if not self.in_packet:
            if is_zero(low, high):
                self.wake_counter += 1
                if self.wake_counter >= WAKE_PAIRS_REQUIRED:
                    self.has_wakeup = True
                    return Pattern.WAKEUP
            if self.has_wakeup and is_stop(low, high):
                return Pattern.STOP | Pattern.WAKEUP
            if is_start(low, high):
                self.wake_counter = 0
                self.in_packet = True
                self.packet_length = 3 if self.has_wakeup else 2
                self._bit_ptr = 0
                self._index = 0
                self._buffer = bytearray(RECEIVE_BUFFER_SIZE)
                return Pattern.START
            return Pattern.NONE

        if is_stop(low, high):
            self.in_packet = False
            self.wake_counter = 0
            self.packet_counter += 1
            return Pattern.STOP
        self._push_bit(0 if is_zero(low, high) else 1)
        return Pattern.PACKET

    def feed(self, low: int, high: int) -> Pattern:
        """Process a pair that ended with a new low edge; return what it was."""
        result = self._step(low, high)
        if Pattern.WAKEUP in result:
            self.packet_counter = 0
        return result

    def _close(self, result: Pattern) -> bytes | None:
        if Pattern.STOP in result and Pattern.WAKEUP in result:
            return None
        if Pattern.STOP not in result:
            self._restart()
            raise ReceiveError("signal timed out outside a packet trailer")
        data = bytes(self._buffer[: self._index + 1])
        if not verify_checksum(data):
            self.packet_counter = 0
            raise ReceiveError("packet checksum mismatch")
        if self.packet_counter != self.packet_length:
            return None
        if len(data) <= 8:
            self.has_wakeup = False
            self.packet_counter = 0
            self.wake_counter = 0
            raise ReceiveError(f"data packet too short: {len(data)} bytes")
        if len(data) > self.buffer_size:
            self._restart()
            raise ReceiveError(
                f"data packet of {len(data)} bytes exceeds buffer of {self.buffer_size}"
            )
        self.has_wakeup = False
        self.packet_counter = 0
        return data

    def end_of_signal(self, low: int, high: int) -> bytes | None:
        """Process a pair whose high part ran into the signal timeout.

        Returns the data packet once a whole frame has arrived, None while
        more packets are expected, and raises ReceiveError on a bad packet.
        """
        try:
            frame = self._close(self._step(low, high))
        finally:
            self._index = 0
        if frame is None and self.packet_counter and high > PACKET_GAP_COUNT:
            self.has_wakeup = False
            self.packet_counter = 0
        return frame

    def decode(self, pulses: Iterable[tuple[int, int]]) -> bytes | None:
        """Run (low, high) pairs through the decoder; return the first complete frame."""
        for low, high in pulses:
            try:
                if high > SIGNAL_TIMEOUT_COUNT:
                    frame = self.end_of_signal(low, high)
                    if frame is not None:
                        return frame
                else:
                    self.feed(low, high)
            except ReceiveError:
                continue
        return None