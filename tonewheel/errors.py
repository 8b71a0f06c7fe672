# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Error taxonomy for Tonewheel.

All errors derive from ValueError so callers that already guard
user input with ``except ValueError`` keep working.

Gamut overflow is never an error: out-of-range colors are always
resolved by chroma clamping.
"""

from __future__ import annotations

from numbers import Integral


class TonewheelError(ValueError):
    """Base class for all Tonewheel errors."""


class InvalidColorFormat(TonewheelError):
    """A color string is not a 6-digit hex color (``#rrggbb`` or ``rrggbb``)."""


class InvalidParameter(TonewheelError):
    """A count, step, kind or resolution argument is outside its domain."""


def ensure_int(value: object, name: str) -> int:
    """Return ``value`` as an int, or raise InvalidParameter.

    Booleans and floats are rejected even when integral-valued, so that
    ``steps=2.5`` or ``count=True`` never slips through silently.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    return int(value)
