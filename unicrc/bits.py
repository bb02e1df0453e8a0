# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Bit-level helpers shared by the CRC engines.

Provides the supported register widths, the shift directions, bit
reversal and the directional shifters.
"""

from abc import ABC, abstractmethod
from enum import IntEnum

from .errors import ConfigurationError


class Width(IntEnum):
    """Supported CRC register widths, in bits."""
    UINT8 = 8
    UINT16 = 16
    UINT32 = 32
    UINT64 = 64


class ShiftDir(IntEnum):
    """Bit processing direction."""
    SHIFT_LEFT = 0
    SHIFT_RIGHT = 1

    MSB_FIRST = 0
    LSB_FIRST = 1


def width_mask(width: int) -> int:
    """Return a mask with the low `width` bits set."""
    return (1 << width) - 1


def check_width(width) -> Width:
    """
    Validate a register width.

    Args:
        width: Width member or plain int (8, 16, 32 or 64)

    Returns:
        The matching Width member

    Raises:
        ConfigurationError: If width is not a supported unsigned width
    """
    if isinstance(width, bool) or not isinstance(width, int):
        raise ConfigurationError(f"Width must be an integer, got {type(width).__name__}")
    try:
        return Width(width)
    except ValueError:
        raise ConfigurationError(f"Unsupported width: {width}") from None


def check_direction(direction) -> ShiftDir:
    """Validate a shift direction, returning the ShiftDir member."""
    if isinstance(direction, bool) or not isinstance(direction, int):
        raise ConfigurationError(f"Unknown shift direction: {direction!r}")
    try:
        return ShiftDir(direction)
    except ValueError:
        raise ConfigurationError(f"Unknown shift direction: {direction!r}") from None


def reverse_bits(value: int, width: int) -> int:
    """
    Reverse the order of the low `width` bits of a value.

    Bit 0 becomes bit width-1, bit 1 becomes bit width-2 and so on.

    Args:
        value: Non-negative integer below 2**width
        width: Number of bits to reverse

    Returns:
        Value with the bits in reverse order

    Raises:
        ValueError: If value does not fit in width bits
    """
    if not 0 <= value <= width_mask(width):
        raise ValueError(f"Value 0x{value:x} does not fit in {width} bits")

    result = 0
    for bit in range(width):
        if value & (1 << bit):
            result |= 1 << (width - bit - 1)
    return result


class Shifter(ABC):
    """Shift a register value by a number of bits in a fixed direction."""

    direction = None

    def __init__(self, width: int):
        self.width = width
        self._mask = width_mask(width)

    @abstractmethod
    def shift(self, value: int, bits: int) -> int:
        """Return value shifted by bits positions."""

    def __repr__(self):
        return f"{type(self).__name__}(width={self.width})"


class LeftShifter(Shifter):
    """Shift toward the most significant bit, dropping bits above width."""

    direction = ShiftDir.SHIFT_LEFT

    def shift(self, value: int, bits: int) -> int:
        return (value << bits) & self._mask


class RightShifter(Shifter):
    """Shift toward the least significant bit."""

    direction = ShiftDir.SHIFT_RIGHT

    def shift(self, value: int, bits: int) -> int:
        return value >> bits


def make_shifter(width: int, direction: ShiftDir) -> Shifter:
    """Create the shifter for a direction."""
    if check_direction(direction) == ShiftDir.SHIFT_LEFT:
        return LeftShifter(width)
    return RightShifter(width)
