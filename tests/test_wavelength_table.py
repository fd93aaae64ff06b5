from oddments.wavelength import Color, Converter
from oddments.wavelength_table import (
    MAX_WAVELENGTH,
    MIN_WAVELENGTH,
    STEP,
    format_color,
    main,
    table_lines,
)


def test_format_color_layout():
    text = format_color(500.0, Color(1, 2, 255))
    assert text == "\x1b[1;48;2;1;2;255m 500.0 nm = #0102ff \x1b[0m"


def test_table_covers_padded_range():
    lines = list(table_lines())
    assert len(lines) == int((MAX_WAVELENGTH - MIN_WAVELENGTH) / STEP) + 1
    assert f"{MIN_WAVELENGTH:.1f} nm" in lines[0]
    assert f"{MAX_WAVELENGTH:.1f} nm" in lines[-1]


def test_first_line_is_black_twice():
    first = next(table_lines())
    black = format_color(MIN_WAVELENGTH, Color(0, 0, 0))
    assert first == black + "  " + black


def test_line_pairs_default_and_raw_colours():
    lines = list(table_lines())
    wavelength = MIN_WAVELENGTH + STEP * 10
    faded = Converter().wavelength_to_rgb(wavelength)
    raw = Converter().with_fading(None).with_gamma(None).wavelength_to_rgb(wavelength)
    assert lines[10] == format_color(wavelength, faded) + "  " + format_color(wavelength, raw)


def test_main_prints_table(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == list(table_lines())