# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Chunked CRC computation over files, streams and serial ports.

Data is read in fixed-size chunks and the CRC of each chunk is used as
the seed for the next one.
"""

from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

import serial

from .calc import CrcCalc, CrcFastCalc
from .errors import ReadTimeoutError

DEFAULT_CHUNK_SIZE = 4096

Calculator = Union[CrcCalc, CrcFastCalc]


def _check_chunk_size(chunk_size: int):
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")


def crc_chunks(calc: Calculator, chunks, seed: int = 0) -> int:
    """
    Compute the CRC over an iterable of byte chunks.

    Args:
        calc: Configured CRC calculator
        chunks: Iterable of bytes-like objects
        seed: Initial seed

    Returns:
        CRC of the concatenated chunks

    Raises:
        ValueError: If seed does not fit in the register
    """
    calc.check_seed(seed)
    crc = seed
    for chunk in chunks:
        crc = calc.compute(chunk, seed=crc)
    return crc


def iter_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield chunks read from a binary stream until EOF."""
    _check_chunk_size(chunk_size)
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        yield chunk


def crc_stream(
    calc: Calculator,
    stream: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    seed: int = 0,
) -> int:
    """
    Compute the CRC of a binary stream.

    Args:
        calc: Configured CRC calculator
        stream: Binary file-like object
        chunk_size: Read size in bytes (default 4096)
        seed: Initial seed

    Returns:
        CRC of all bytes remaining in the stream
    """
    return crc_chunks(calc, iter_stream(stream, chunk_size), seed)


def crc_file(
    calc: Calculator,
    path: Union[str, Path],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    seed: int = 0,
) -> int:
    """
    Compute the CRC of a file.

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(path, "rb") as f:
        return crc_stream(calc, f, chunk_size, seed)


class SerialSource:
    """
    Serial port data source.

    Can be used as a context manager:
        with SerialSource("/dev/ttyUSB0") as source:
            crc = crc_chunks(calc, source.read_chunks(1024))
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 1.0,
    ):
        """
        Open a serial port for reading.

        Args:
            port: Serial port path or pyserial URL (e.g., "/dev/ttyUSB0")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 1.0)
        """
        self._ser = serial.serial_for_url(port, baudrate=baudrate, timeout=timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def read_chunks(
        self,
        length: Optional[int] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> Iterator[bytes]:
        """
        Yield chunks received on the port.

        Args:
            length: Exact number of bytes to receive, or None to read
                until the first read that times out empty
            chunk_size: Maximum bytes per read

        Raises:
            ReadTimeoutError: If length is given and fewer bytes arrive
            ValueError: If length is negative
        """
        _check_chunk_size(chunk_size)
        if length is not None and length < 0:
            raise ValueError(f"Negative length: {length}")
        received = 0
        while length is None or received < length:
            size = chunk_size if length is None else min(chunk_size, length - received)
            chunk = self._ser.read(size)
            if not chunk:
                if length is None:
                    break
                raise ReadTimeoutError(
                    f"Timeout after {received} of {length} bytes"
                )
            received += len(chunk)
            yield chunk


def crc_serial(
    calc: Calculator,
    port: str,
    length: Optional[int] = None,
    baudrate: int = 115200,
    timeout: float = 1.0,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    seed: int = 0,
) -> int:
    """
    Compute the CRC of data received on a serial port.

    Raises:
        ReadTimeoutError: If length is given and fewer bytes arrive
        serial.SerialException: If the port cannot be opened
    """
    with SerialSource(port, baudrate, timeout) as source:
        return crc_chunks(calc, source.read_chunks(length, chunk_size), seed)
