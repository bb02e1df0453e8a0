#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Generic CRC calculator for files and serial ports.

Usage:
    python crc_file.py firmware.bin
    python crc_file.py --width 32 --direction lsb --poly 0x04C11DB7 firmware.bin
    python crc_file.py --algorithm table --dump-table
    python crc_file.py --port /dev/ttyUSB0 --length 1024

Requirements:
    pip install pyserial
"""

import argparse
import sys

import serial

from unicrc import CrcCalc, CrcFastCalc, ShiftDir, Width, crc_file, crc_serial
from unicrc.errors import CrcError

DIRECTIONS = {
    "msb": ShiftDir.MSB_FIRST,
    "lsb": ShiftDir.LSB_FIRST,
}

ALGORITHMS = {
    "bitwise": CrcCalc,
    "table": CrcFastCalc,
}


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None


def print_report(calc, source: str, seed: int, crc: int):
    """Print the calculation summary."""
    print(f"File      : {source}")
    print(f"Algorithm : {calc.name}")
    print(f"Polynomial: {calc.format_value(calc.poly)}")
    print(f"Seed      : {calc.format_value(seed)}")
    print(f"CRC       : {calc.format_value(crc)}")


def print_table(calc: CrcFastCalc, per_line: int = 8):
    """Print the lookup table as rows of hex values."""
    table = calc.get_lookup_table()
    for row in range(0, len(table), per_line):
        print(" ".join(f"0x{calc.format_value(v)}" for v in table[row:row + per_line]))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generic CRC calculator for files and serial ports"
    )
    parser.add_argument("file", nargs="?", help="File to compute the CRC of")
    parser.add_argument("--width", "-w", type=int, default=16,
                        choices=[int(w) for w in Width],
                        help="CRC register width in bits (default 16)")
    parser.add_argument("--direction", "-d", default="lsb", choices=sorted(DIRECTIONS),
                        help="Bit processing direction (default lsb)")
    parser.add_argument("--poly", "-p", type=parse_int, default=0x1021,
                        help="Polynomial in MSB-first notation (default 0x1021)")
    parser.add_argument("--seed", "-s", type=parse_int, default=0,
                        help="Initial seed (default 0)")
    parser.add_argument("--algorithm", "-a", default="bitwise", choices=sorted(ALGORITHMS),
                        help="Calculation algorithm (default bitwise)")
    parser.add_argument("--chunk-size", type=int, default=4096,
                        help="Read size in bytes (default 4096)")
    parser.add_argument("--dump-table", action="store_true",
                        help="Print the lookup table and exit")

    serial_group = parser.add_argument_group("serial input")
    serial_group.add_argument("--port", help="Read data from a serial port instead of a file")
    serial_group.add_argument("--baudrate", type=int, default=115200,
                              help="Baud rate (default 115200)")
    serial_group.add_argument("--length", type=int, default=None,
                              help="Number of bytes to read from the port (default: until timeout)")
    serial_group.add_argument("--timeout", type=float, default=1.0,
                              help="Serial read timeout in seconds (default 1.0)")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    algorithm = CrcFastCalc if args.dump_table else ALGORITHMS[args.algorithm]
    try:
        calc = algorithm(args.width, DIRECTIONS[args.direction], args.poly)
    except CrcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dump_table:
        print_table(calc)
        return 0

    if args.port is None and args.file is None:
        print("A filename is required.", file=sys.stderr)
        return 1

    try:
        if args.port is not None:
            source = args.port
            crc = crc_serial(calc, args.port, args.length, args.baudrate,
                             args.timeout, args.chunk_size, args.seed)
        else:
            source = args.file
            crc = crc_file(calc, args.file, args.chunk_size, args.seed)
    except serial.SerialException as e:
        print(f"Serial error on {args.port}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error opening file {args.file}: {e}", file=sys.stderr)
        return 1
    except (CrcError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_report(calc, source, args.seed, crc)
    return 0


if __name__ == "__main__":
    sys.exit(main())
