"""Terminal demo comparing a scrolling list with a scrolled paragraph."""

from __future__ import annotations

import curses
import re
import sys
from typing import Any, Optional, Sequence

from oddments.scrolling import App, scrollbar_position_from_offset

PANEL_WIDTH = 15
VALUES_X = PANEL_WIDTH + 1 + PANEL_WIDTH + 1
_ESCAPE = 27
_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def parse_items_count(argv: Sequence[str]) -> int:
    """Read the number of items from the first command-line argument."""
    if not argv:
        raise ValueError("Expected argument for number of items")
    text = argv[0]
    if not _COUNT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid number of items: {text!r}")
    return int(text)


def status_lines(app: App, viewport_len: int) -> list[str]:
    """The labelled values shown beside the panels."""
    values = [("Count", app.items_count), ("Viewport", viewport_len), ("Offset", app.offset)]
    return [f"{label}: {value}" for label, value in values]


def _put(screen: Any, y: int, x: int, text: str, attr: int = 0) -> None:
    height, width = screen.getmaxyx()
    if y < 0 or y >= height or x >= width or not text:
        return
    text = text[: width - x]
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


def _box(screen: Any, x: int, width: int, height: int, title: str) -> None:
    if height < 2 or width < 2:
        return
    inner = width - 2
    _put(screen, 0, x, "┌" + title[:inner].ljust(inner, "─") + "┐")
    for y in range(1, height - 1):
        _put(screen, y, x, "│")
        _put(screen, y, x + width - 1, "│")
    _put(screen, height - 1, x, "└" + "─" * inner + "┘")


def _draw_scrollbar(
    screen: Any, x: int, top: int, length: int, content: int, viewport: int, position: int
) -> None:
    if length < 3:
        return
    _put(screen, top, x, "▲")
    _put(screen, top + length - 1, x, "▼")
    track_top, track_len = top + 1, length - 2
    thumb_len = max(1, min(track_len, round(track_len * viewport / content)))
    thumb_start = round(position * (track_len - thumb_len) / max(content - 1, 1))
    for row in range(track_len):
        inside = thumb_start <= row < thumb_start + thumb_len
        _put(screen, track_top + row, x, "█" if inside else "║")


def draw(screen: Any, app: App) -> None:
    """Render the list, its scrollbar, the paragraph and the values onto ``screen``."""
    height, _ = screen.getmaxyx()
    screen.erase()

    viewport_len = max(height - 2, 0)
    offset = app.scroll_into_view(viewport_len)
    labels = [str(n) for n in range(offset + 1, min(offset + viewport_len, app.items_count) + 1)]
    text_width = PANEL_WIDTH - 4

    _box(screen, 0, PANEL_WIDTH, height, "List")
    for row, label in enumerate(labels):
        attr = curses.A_REVERSE if offset + row == app.selected else 0
        _put(screen, 1 + row, 2, label.ljust(text_width)[:text_width], attr)

    position = scrollbar_position_from_offset(app.items_count, viewport_len, offset)
    if position is not None:
        _draw_scrollbar(
            screen, PANEL_WIDTH, 1, height - 2, app.items_count, viewport_len, position
        )

    paragraph_x = PANEL_WIDTH + 1
    _box(screen, paragraph_x, PANEL_WIDTH, height, "Paragraph")
    for row, label in enumerate(labels):
        _put(screen, 1 + row, paragraph_x + 2, label[:text_width])

    for row, line in enumerate(status_lines(app, viewport_len), start=1):
        _put(screen, row, VALUES_X, line)

    screen.refresh()


def _run(screen: Any, app: App) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)

    actions = {
        curses.KEY_UP: lambda: app.select_up(1),
        curses.KEY_DOWN: lambda: app.select_down(1),
        curses.KEY_PPAGE: lambda: app.select_up(app.page_size - 1),
        curses.KEY_NPAGE: lambda: app.select_down(app.page_size - 1),
        curses.KEY_HOME: app.select_first,
        curses.KEY_END: app.select_last,
    }
    while True:
        draw(screen, app)
        key = screen.getch()
        if key == _ESCAPE:
            break
        action = actions.get(key)
        if action is not None:
            action()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        items_count = parse_items_count(args)
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    curses.wrapper(_run, App(items_count))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())