"""Print a table of wavelengths with their colours as terminal swatches."""

from __future__ import annotations

import argparse
from typing import Iterator, Sequence

from oddments import wavelength as wl

STEP = 10.0
PADDING = 10.0
MIN_WAVELENGTH = wl.MIN_WAVELENGTH - PADDING
MAX_WAVELENGTH = wl.MAX_WAVELENGTH + PADDING


def format_color(wavelength: float, color: wl.Color) -> str:
    """Render one colour swatch with a true-colour background escape."""
    r, g, b = color.r, color.g, color.b
    return (
        f"\x1b[1;48;2;{r};{g};{b}m {wavelength:.1f} nm = #{r:02x}{g:02x}{b:02x} \x1b[0m"
    )


def table_lines() -> Iterator[str]:
    """Yield one line per wavelength: the default colour beside the raw one."""
    converter = wl.Converter()
    raw_converter = wl.Converter().with_fading(None).with_gamma(None)

    wavelength = MIN_WAVELENGTH
    while True:
        yield (
            format_color(wavelength, converter.wavelength_to_rgb(wavelength))
            + "  "
            + format_color(wavelength, raw_converter.wavelength_to_rgb(wavelength))
        )
        wavelength += STEP
        if wavelength > MAX_WAVELENGTH:
            break


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show the colours of visible wavelengths, faded and raw."
    )
    parser.parse_args(argv)
    for line in table_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())