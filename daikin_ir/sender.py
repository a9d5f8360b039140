"""Encoding of Daikin frames into mark/space pulse trains and their transmission."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from .protocol import (
    FREQUENCY_KHZ,
    HDR_MARK,
    HDR_SPACE,
    ONE_MARK,
    ONE_SPACE,
    ZERO_MARK,
    ZERO_SPACE,
    Level,
)

WARM_UP_HIGH_US = 100
WARM_UP_LOW_US = 5


@dataclass(frozen=True)
class Pulse:
    """One stretch of signal: a carrier burst (mark) or silence (space)."""

    level: Level
    duration: int
    modulated: bool = True

    @property
    def is_mark(self) -> bool:
        return self.level is Level.MARK


def _mark(duration: int) -> Pulse:
    return Pulse(Level.MARK, duration)


def _space(duration: int) -> Pulse:
    return Pulse(Level.SPACE, duration)


def _check_bytes(data: Iterable[int]) -> list[int]:
    values = list(data)
    for value in values:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
    return values


def encode_frame(data: Iterable[int]) -> list[Pulse]:
    """Encode bytes as a Daikin frame: header, bits LSB first, then a trailer."""
    pulses = [_mark(HDR_MARK), _space(HDR_SPACE)]
    for byte in _check_bytes(data):
        for bit in range(8):
            if byte >> bit & 1:
                pulses += [_mark(ONE_MARK), _space(ONE_SPACE)]
            else:
                pulses += [_mark(ZERO_MARK), _space(ZERO_SPACE)]
    pulses += [_mark(ONE_MARK), _space(ZERO_SPACE)]
    return pulses


def wake_pattern() -> list[Pulse]:
    """Return the wake-up preamble: a leading space and five short mark/space pairs."""
    pulses = [_space(ZERO_MARK)]
    for _ in range(5):
        pulses += [_mark(ZERO_MARK), _space(ZERO_MARK)]
    return pulses


def raw_pulses(durations: Iterable[int]) -> list[Pulse]:
    """Turn alternating durations (mark first) into pulses, closed by an empty space."""
    pulses = [
        _space(duration) if index % 2 else _mark(duration)
        for index, duration in enumerate(durations)
    ]
    pulses.append(_space(0))
    return pulses


def _warm_up() -> list[Pulse]:
    return [
        Pulse(Level.MARK, WARM_UP_HIGH_US, modulated=False),
        _space(WARM_UP_LOW_US),
    ]


Transmit = Callable[[list[Pulse], int], None]


class IRSender:
    """Builds pulse trains and hands them, with a carrier frequency, to a transmitter.

    Every send method also returns the pulses it produced.
    """

    def __init__(
        self, transmit: Transmit | None = None, frequency_khz: int = FREQUENCY_KHZ
    ) -> None:
        if frequency_khz <= 0:
            raise ValueError(f"carrier frequency must be positive, got {frequency_khz}")
        self.transmit = transmit
        self.frequency_khz = frequency_khz

    def _emit(self, pulses: list[Pulse], frequency_khz: int) -> list[Pulse]:
        if self.transmit is not None:
            self.transmit(pulses, frequency_khz)
        return pulses

    def send_daikin(
        self, data: Sequence[int], length: int | None = None, start: int = 0
    ) -> list[Pulse]:
        """Send `length` bytes of `data` from `start` as one frame, after a warm-up pulse."""
        if length is None:
            length = len(data) - start
        if start < 0 or length < 0 or start + length > len(data):
            raise ValueError(
                f"slice start={start} length={length} outside data of size {len(data)}"
            )
        pulses = _warm_up() + encode_frame(data[start : start + length])
        return self._emit(pulses, self.frequency_khz)

    def send_daikin_wake(self) -> list[Pulse]:
        """Send the wake-up preamble at the standard carrier frequency."""
        return self._emit(wake_pattern(), FREQUENCY_KHZ)

    def send_raw(
        self, durations: Iterable[int], frequency_khz: int | None = None
    ) -> list[Pulse]:
        """Send alternating mark/space durations at the given carrier frequency."""
        khz = self.frequency_khz if frequency_khz is None else frequency_khz
        if khz <= 0:
            raise ValueError(f"carrier frequency must be positive, got {khz}")
        return self._emit(raw_pulses(durations), khz)