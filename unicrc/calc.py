# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Generic CRC calculators.

Both calculators are configured once with a register width, a shift
direction and a polynomial, and then compute the CRC of any number of
data blocks. The CRC of one block can be passed as the seed of the next
one, so large inputs can be processed in chunks:

    calc = CrcFastCalc(Width.UINT16, ShiftDir.LSB_FIRST, 0x1021)
    crc = 0
    for chunk in chunks:
        crc = calc.compute(chunk, seed=crc)

Only the raw register is computed. CRCs with an initial value or a final
XOR (e.g. CRC-32/ISO-HDLC) must pass the initial value as the seed and
apply the XOR to the result:

    calc = CrcFastCalc(Width.UINT32, ShiftDir.LSB_FIRST, 0x04C11DB7)
    crc32 = calc.compute(data, seed=0xFFFFFFFF) ^ 0xFFFFFFFF
"""

from typing import Optional, Tuple

from .bits import (
    ShiftDir,
    Width,
    check_direction,
    check_width,
    make_shifter,
    reverse_bits,
    width_mask,
)
from .errors import ConfigurationError


def _byte_view(data, length: Optional[int]) -> memoryview:
    """Return a byte view over the first `length` bytes of data."""
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    if length is None:
        return view
    if length < 0:
        raise ValueError(f"Negative length: {length}")
    if length > len(view):
        raise ValueError(f"Length {length} exceeds buffer size {len(view)}")
    return view[:length]


class _CrcBase:
    """Configuration shared by both calculators."""

    def __init__(self, width, direction, poly: int):
        """
        Args:
            width: Register width (Width member or 8, 16, 32, 64)
            direction: ShiftDir.MSB_FIRST or ShiftDir.LSB_FIRST
            poly: Polynomial in conventional (MSB-first) notation

        Raises:
            ConfigurationError: If any parameter is invalid
        """
        self._width = check_width(width)
        self._direction = check_direction(direction)

        if isinstance(poly, bool) or not isinstance(poly, int):
            raise ConfigurationError(f"Polynomial must be an integer, got {type(poly).__name__}")
        if not 0 <= poly <= width_mask(self._width):
            raise ConfigurationError(
                f"Polynomial 0x{poly:x} does not fit in {int(self._width)} bits"
            )
        self._poly = poly

        self._shifter = make_shifter(self._width, self._direction)
        if self._direction == ShiftDir.SHIFT_LEFT:
            self._polynomial = poly
            self._mask = 1 << (self._width - 1)
            self._pack = self._width - 8
        else:
            self._polynomial = reverse_bits(poly, self._width)
            self._mask = 1
            self._pack = 0

    @property
    def width(self) -> Width:
        """Register width in bits."""
        return self._width

    @property
    def direction(self) -> ShiftDir:
        """Bit processing direction."""
        return self._direction

    @property
    def poly(self) -> int:
        """Polynomial as given at construction."""
        return self._poly

    @property
    def polynomial(self) -> int:
        """Polynomial used internally (reversed for LSB-first)."""
        return self._polynomial

    @property
    def mask(self) -> int:
        """Mask of the next bit to be processed."""
        return self._mask

    @property
    def pack(self) -> int:
        """Bits to shift a byte to align it inside the register."""
        return self._pack

    @property
    def name(self) -> str:
        """Algorithm name, e.g. "CRC16"."""
        return f"CRC{int(self._width)}"

    def format_value(self, value: int) -> str:
        """Format a register value as zero-padded upper-case hex."""
        return f"{value:0{self._width // 4}X}"

    def check_seed(self, seed: int):
        """Raise ValueError if seed does not fit in the register."""
        if not 0 <= seed <= width_mask(self._width):
            raise ValueError(f"Seed {seed:#x} does not fit in {int(self._width)} bits")

    def _update_byte(self, register: int) -> int:
        """Run the 8 shift/XOR steps for a byte already combined into register."""
        shift = self._shifter.shift
        for _ in range(8):
            if register & self._mask:
                register = shift(register, 1) ^ self._polynomial
            else:
                register = shift(register, 1)
        return register

    def __repr__(self):
        return (
            f"{type(self).__name__}(width={int(self._width)}, "
            f"direction={self._direction.name}, poly=0x{self.format_value(self._poly)})"
        )


class CrcCalc(_CrcBase):
    """
    CRC calculator without lookup table.

    Processes one bit at a time. Construction is trivial and no memory
    is used beyond the configuration.
    """

    def compute(self, data, length: Optional[int] = None, seed: int = 0) -> int:
        """
        Compute the CRC of a data block.

        Args:
            data: Bytes-like object
            length: Number of bytes of data to process (default: all)
            seed: Seed, or the CRC computed for the previous block

        Returns:
            Computed CRC
        """
        view = _byte_view(data, length)
        self.check_seed(seed)

        result = seed
        pack = self._pack
        for byte in view:
            result = self._update_byte(result ^ (byte << pack))
        return result


class CrcFastCalc(_CrcBase):
    """
    CRC calculator with a precomputed lookup table.

    The 256-entry table is built once at construction; afterwards each
    input byte costs one table lookup, one shift and one XOR.
    """

    def __init__(self, width, direction, poly: int):
        super().__init__(width, direction, poly)
        self._lookup_table = tuple(
            self._update_byte(idx << self._pack) for idx in range(256)
        )

    @property
    def lookup_table(self) -> Tuple[int, ...]:
        """Precalculated lookup table (read-only)."""
        return self._lookup_table

    def get_lookup_table(self) -> Tuple[int, ...]:
        """Return the precalculated lookup table."""
        return self._lookup_table

    def compute(self, data, length: Optional[int] = None, seed: int = 0) -> int:
        """
        Compute the CRC of a data block.

        Args:
            data: Bytes-like object
            length: Number of bytes of data to process (default: all)
            seed: Seed, or the CRC computed for the previous block

        Returns:
            Computed CRC
        """
        view = _byte_view(data, length)
        self.check_seed(seed)

        result = seed
        pack = self._pack
        table = self._lookup_table
        shift = self._shifter.shift
        for byte in view:
            result = shift(result, 8) ^ table[((result >> pack) ^ byte) & 0xFF]
        return result
