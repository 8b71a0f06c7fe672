# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Value types for Tonewheel.

All types in this module are immutable (frozen dataclasses or enums).
Colors, schemes and stops are values with no identity beyond their fields.
"""

from tonewheel.schema.color import (
    ACHROMATIC_CHROMA,
    ColorScheme,
    GradientKind,
    GradientStop,
    HSLColor,
    OKLCHColor,
    RGBColor,
)

__all__ = [
    # Threshold
    "ACHROMATIC_CHROMA",
    # Color values
    "OKLCHColor",
    "RGBColor",
    "HSLColor",  # Legacy interchange only
    # Selectors
    "ColorScheme",
    "GradientKind",
    # Smooth gradient sampling
    "GradientStop",
]
