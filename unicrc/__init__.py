# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
unicrc - generic CRC calculation for any width, polynomial and direction.

Example usage:
    from unicrc import CrcFastCalc, ShiftDir, Width, crc_file

    calc = CrcFastCalc(Width.UINT16, ShiftDir.LSB_FIRST, 0x1021)

    # Single block
    crc = calc.compute(b"123456789")
    print(f"CRC: 0x{calc.format_value(crc)}")

    # Chunked: the CRC of one block is the seed of the next
    crc = calc.compute(b"12345")
    crc = calc.compute(b"6789", seed=crc)

    # Whole file, read in 4 KiB chunks
    crc = crc_file(calc, "firmware.bin")
"""

from .bits import (
    Width,
    ShiftDir,
    Shifter,
    LeftShifter,
    RightShifter,
    make_shifter,
    reverse_bits,
    width_mask,
)
from .calc import CrcCalc, CrcFastCalc
from .errors import (
    CrcError,
    ConfigurationError,
    SourceError,
    ReadTimeoutError,
)
from .source import (
    SerialSource,
    crc_chunks,
    crc_file,
    crc_serial,
    crc_stream,
    iter_stream,
)

__version__ = "0.1.0"

__all__ = [
    # Bit helpers
    "Width",
    "ShiftDir",
    "Shifter",
    "LeftShifter",
    "RightShifter",
    "make_shifter",
    "reverse_bits",
    "width_mask",
    # Calculators
    "CrcCalc",
    "CrcFastCalc",
    # Errors
    "CrcError",
    "ConfigurationError",
    "SourceError",
    "ReadTimeoutError",
    # Sources
    "SerialSource",
    "crc_chunks",
    "crc_file",
    "crc_serial",
    "crc_stream",
    "iter_stream",
]
