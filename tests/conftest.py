# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import random
from pathlib import Path

import pytest

from unicrc import CrcCalc, CrcFastCalc, ShiftDir, Width

# Standard check input used by the CRC catalogues
CHECK_INPUT = b"123456789"

# (width, poly) pairs covering every supported width
POLYNOMIALS = [
    (Width.UINT8, 0x07),
    (Width.UINT8, 0x31),
    (Width.UINT16, 0x1021),
    (Width.UINT16, 0x8005),
    (Width.UINT32, 0x04C11DB7),
    (Width.UINT32, 0x1EDC6F41),
    (Width.UINT64, 0x42F0E1EBA9EA3693),
]

CONFIGS = [
    (width, direction, poly)
    for width, poly in POLYNOMIALS
    for direction in (ShiftDir.MSB_FIRST, ShiftDir.LSB_FIRST)
]


def config_id(config):
    width, direction, poly = config
    return f"w{int(width)}-{direction.name.lower()}-{poly:x}"


@pytest.fixture(params=CONFIGS, ids=config_id)
def config(request):
    """Every (width, direction, poly) combination under test."""
    return request.param


@pytest.fixture
def calcs(config):
    """Bitwise and table calculators sharing one configuration."""
    return CrcCalc(*config), CrcFastCalc(*config)


@pytest.fixture(scope="session")
def check_input():
    return CHECK_INPUT


@pytest.fixture(scope="session")
def random_data():
    """Reproducible pseudo-random payload (several chunks long)."""
    rng = random.Random(0x1021)
    return bytes(rng.getrandbits(8) for _ in range(10000))


@pytest.fixture
def sample_file(tmp_path, random_data):
    """A file holding random_data."""
    path = tmp_path / "sample.bin"
    path.write_bytes(random_data)
    return path


@pytest.fixture(scope="session")
def project_root():
    """Get the project root directory."""
    return Path(__file__).parent.parent
