"""Timing constants and small helpers shared by the Daikin IR encoder and decoder."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

FREQUENCY_KHZ = 38

HDR_MARK = 3600
HDR_SPACE = 1600
ONE_MARK = 400
ONE_SPACE = 1300
ZERO_MARK = 400
ZERO_SPACE = 428


class Level(IntEnum):
    """Signal level as seen by an IR detector, whose output is active low."""

    MARK = 0
    SPACE = 1


def byte_sum(data: Iterable[int]) -> int:
    """Return the 8-bit wrapping sum of the given byte values."""
    return sum(data) & 0xFF


def carrier_half_periods(khz: int) -> tuple[int, int]:
    """Return the (high, low) microsecond durations of one carrier cycle.

    The high part takes three quarters of the period; the low part takes the
    rest, including what integer division leaves over.
    """
    if khz <= 0:
        raise ValueError(f"carrier frequency must be positive, got {khz}")
    period = 1000 // khz
    if period == 0:
        raise ValueError(f"carrier frequency {khz} kHz is too high")
    high = (period // 4) * 3
    low = period // 4 + period % 4
    return high, low