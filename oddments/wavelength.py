"""Approximate RGB colours for wavelengths of visible light."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

VIOLET_WAVELENGTH = 380.0
BLUE_WAVELENGTH = 440.0
CYAN_WAVELENGTH = 490.0
GREEN_WAVELENGTH = 510.0
YELLOW_WAVELENGTH = 580.0
RED_MIN_WAVELENGTH = 645.0
RED_MAX_WAVELENGTH = 780.0

MIN_WAVELENGTH = VIOLET_WAVELENGTH
MAX_WAVELENGTH = RED_MAX_WAVELENGTH

DEFAULT_GAMMA = 0.8


@dataclass(frozen=True)
class FadingOptions:
    """Dimming of colours towards the limits of visibility."""

    unfaded_lower_bound: float = 420.0
    unfaded_upper_bound: float = 700.0
    factor_at_visibility_limits: float = 0.3


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int


BLACK = Color(0, 0, 0)


def remap(value: float, from_range: tuple[float, float], to_range: tuple[float, float]) -> float:
    """Linearly map ``value`` from ``from_range`` onto ``to_range``."""
    from_start, from_end = from_range
    to_start, to_end = to_range
    return to_start + (to_end - to_start) * (value - from_start) / (from_end - from_start)


def _adjust(value: float) -> int:
    scaled = 255.0 * value
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return 255 if scaled > 0 else 0
    rounded = math.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1
    return min(max(int(rounded), 0), 255)


@dataclass(frozen=True)
class Converter:
    """Converts wavelengths in nanometres to colours."""

    fading: FadingOptions | None = field(default_factory=FadingOptions)
    gamma: float | None = DEFAULT_GAMMA

    def with_fading(self, fading: FadingOptions | None) -> Converter:
        return replace(self, fading=fading)

    def with_gamma(self, gamma: float | None) -> Converter:
        return replace(self, gamma=gamma)

    def wavelength_to_rgb(self, wavelength: float) -> Color:
        """Return the colour for ``wavelength``; black outside the visible range."""
        if not (VIOLET_WAVELENGTH <= wavelength <= RED_MAX_WAVELENGTH):
            return BLACK

        if wavelength < BLUE_WAVELENGTH:
            red = remap(wavelength, (VIOLET_WAVELENGTH, BLUE_WAVELENGTH), (1.0, 0.0))
            green, blue = 0.0, 1.0
        elif wavelength < CYAN_WAVELENGTH:
            red, blue = 0.0, 1.0
            green = remap(wavelength, (BLUE_WAVELENGTH, CYAN_WAVELENGTH), (0.0, 1.0))
        elif wavelength < GREEN_WAVELENGTH:
            red, green = 0.0, 1.0
            blue = remap(wavelength, (CYAN_WAVELENGTH, GREEN_WAVELENGTH), (1.0, 0.0))
        elif wavelength < YELLOW_WAVELENGTH:
            red = remap(wavelength, (GREEN_WAVELENGTH, YELLOW_WAVELENGTH), (0.0, 1.0))
            green, blue = 1.0, 0.0
        elif wavelength < RED_MIN_WAVELENGTH:
            red, blue = 1.0, 0.0
            green = remap(wavelength, (YELLOW_WAVELENGTH, RED_MIN_WAVELENGTH), (1.0, 0.0))
        else:
            red, green, blue = 1.0, 0.0, 0.0

        if self.fading is not None:
            fading = self.fading
            if wavelength < fading.unfaded_lower_bound:
                factor = remap(
                    wavelength,
                    (MIN_WAVELENGTH, fading.unfaded_lower_bound),
                    (fading.factor_at_visibility_limits, 1.0),
                )
            elif wavelength > fading.unfaded_upper_bound:
                factor = remap(
                    wavelength,
                    (fading.unfaded_upper_bound, MAX_WAVELENGTH),
                    (1.0, fading.factor_at_visibility_limits),
                )
            else:
                factor = 1.0
            red, green, blue = red * factor, green * factor, blue * factor

        if self.gamma is not None:
            red, green, blue = red**self.gamma, green**self.gamma, blue**self.gamma

        return Color(_adjust(red), _adjust(green), _adjust(blue))