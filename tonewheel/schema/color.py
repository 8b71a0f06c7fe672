# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Color value types for Tonewheel.

Design principles:
- Immutable: All types are frozen dataclasses or enums
- Validated: Out-of-range fields fail at construction
- Serializable: to_dict / from_dict for JSON hand-off to renderers

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.32 = max saturation in sRGB
- H (Hue): 0-360 degrees (≈30=orange, ≈90=yellow, ≈145=green, ≈260=blue, ≈330=pink)

All palette and gradient math happens in OKLCH. RGB and HSL exist only
as interchange formats at the boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from tonewheel.errors import InvalidParameter

logger = logging.getLogger(__name__)


# Chroma below which a decoded color is treated as gray (hue undefined)
ACHROMATIC_CHROMA = 1e-3


# =============================================================================
# Perceptual Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    A single color in OKLCH color space.

    This is the canonical representation for every color Tonewheel
    derives. Linear interpolation of L and C here tracks perceived tone
    and saturation, which RGB and HSL interpolation do not.

    Attributes:
        L: Lightness (0.0 = black, 1.0 = white)
        C: Chroma (0.0 = neutral gray, typical max ~0.32 for sRGB)
        H: Hue in degrees [0, 360), None for achromatic colors
    """
    L: float
    C: float
    H: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate color values are within expected ranges."""
        if not 0.0 <= self.L <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.L}")
        if self.C < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.C}")
        if self.H is not None and not 0.0 <= self.H < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.H}")

    @property
    def is_achromatic(self) -> bool:
        """True if the color has no usable hue (gray/white/black)."""
        return self.H is None or self.C < ACHROMATIC_CHROMA

    @property
    def hex(self) -> str:
        """
        Canonical hex string (lowercase, ``#rrggbb``).

        Out-of-gamut values are chroma-compressed before encoding.
        """
        from tonewheel.generate.colorspace import oklch_to_hex
        return oklch_to_hex(self.L, self.C, self.H)

    @classmethod
    def from_hex(cls, hex_color: str) -> OKLCHColor:
        """Decode a hex string. Raises InvalidColorFormat on malformed input."""
        from tonewheel.generate.colorspace import hex_to_oklch
        return hex_to_oklch(hex_color)

    def to_dict(self, include_hex: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_hex: If True, include the encoded hex value
        """
        d = {"L": self.L, "C": self.C, "H": self.H}
        if include_hex:
            d["hex"] = self.hex
        return d

    @classmethod
    def from_dict(cls, data: dict) -> OKLCHColor:
        """Deserialize from dictionary."""
        return cls(L=data["L"], C=data["C"], H=data.get("H"))


# =============================================================================
# Interchange Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An 8-bit device RGB triple.

    Used only for interchange with RGB-based consumers; never for
    perceptual arithmetic.
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    Legacy HSL triple: hue in degrees, saturation and lightness in percent.

    Kept for backward compatibility only. HSL interpolation is
    perceptually non-uniform, so generators never use it.
    """
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.s <= 100.0:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0.0 <= self.l <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")


# =============================================================================
# Scheme & Gradient Selectors
# =============================================================================


class ColorScheme(Enum):
    """
    Color-theory scheme used to pick related hues from a seed hue.

    The set is closed. Unrecognised tags fall back to TRIADIC via parse().
    """
    DICHROMATIC = "dichromatic"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    ANALOGOUS = "analogous"
    MONOCHROMATIC = "monochromatic"

    @classmethod
    def parse(cls, tag: Union[ColorScheme, str, None]) -> ColorScheme:
        """Resolve a scheme tag, falling back to TRIADIC when unrecognised."""
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            normalized = tag.strip().lower().replace("_", "-")
            for member in cls:
                if member.value == normalized:
                    return member
        logger.debug("Unrecognised color scheme %r, using triadic", tag)
        return cls.TRIADIC


class GradientKind(Enum):
    """Which tonal dimension a gradient varies."""
    VALUE = "value"            # lightness
    SATURATION = "saturation"  # chroma
    BOTH = "both"              # lightness and chroma together

    @classmethod
    def parse(cls, kind: Union[GradientKind, str]) -> GradientKind:
        """Resolve a gradient kind. Unlike schemes there is no fallback."""
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind.strip().lower())
            except ValueError:
                pass
        raise InvalidParameter(
            f"Gradient kind must be one of "
            f"{[k.value for k in cls]}, got {kind!r}"
        )


# =============================================================================
# Gradient Stops
# =============================================================================


@dataclass(frozen=True, slots=True)
class GradientStop:
    """
    A single sampled stop of a smooth gradient.

    Attributes:
        position: Normalized position along the gradient (0.0-1.0)
        hex: Color at this position
    """
    position: float
    hex: str

    def __post_init__(self) -> None:
        """Validate position is in range."""
        if not 0.0 <= self.position <= 1.0:
            raise ValueError(f"Position must be 0-1, got {self.position}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"position": self.position, "hex": self.hex}

    @classmethod
    def from_dict(cls, data: dict) -> GradientStop:
        """Deserialize from dictionary."""
        return cls(position=data["position"], hex=data["hex"])
