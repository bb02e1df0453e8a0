# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by unicrc."""


class CrcError(Exception):
    """Base exception for unicrc errors."""
    pass


class ConfigurationError(CrcError, ValueError):
    """Invalid engine parameters (width, direction or polynomial)."""
    pass


class SourceError(CrcError):
    """Error reading data from an input source."""
    pass


class ReadTimeoutError(SourceError):
    """Timeout before the expected number of bytes was received."""
    pass
