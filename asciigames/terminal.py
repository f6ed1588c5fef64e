"""A small character-cell console, key input and the loop that drives a game on it."""

from __future__ import annotations

import abc
import enum
import math
import sys
import time
from dataclasses import dataclass
from typing import Optional

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
YELLOW: Color = (255, 255, 0)
RED: Color = (255, 0, 0)
CYAN: Color = (0, 255, 255)
GREEN: Color = (0, 255, 0)
NAVY: Color = (0, 0, 128)
NAVY_BLUE: Color = NAVY

BLANK_GLYPH = 32

# Pictures that code page 437 shows for the control-character positions.
_LOW_GLYPHS = " ☺☻♥♦♣♠•◘○◙♂♀♪♫☼►◄↕‼¶§▬↨↑↓→←∟↔▲▼"


class Key(enum.Enum):
    """Keys the games react to."""

    P = "p"
    Q = "q"
    SPACE = "space"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Point:
    """An integer position on the console grid."""

    x: int
    y: int

    @staticmethod
    def zero() -> Point:
        return Point(0, 0)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Cell:
    """One character cell: a code page 437 glyph with its colours."""

    glyph: int
    fg: Color
    bg: Color


def to_cp437(ch: str) -> int:
    """Return the code page 437 glyph for a character, or 0 if it has none."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    try:
        encoded = ch.encode("cp437")
    except UnicodeEncodeError:
        return 0
    return encoded[0]


def _glyph_char(glyph: int) -> str:
    if 0 <= glyph < len(_LOW_GLYPHS):
        return _LOW_GLYPHS[glyph]
    if glyph == 127:
        return "⌂"
    return bytes([glyph & 0xFF]).decode("cp437")


_Layer = list[list[Optional[Cell]]]


class Console:
    """A stack of character grids; layer 0 is opaque, higher layers start transparent."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("console dimensions must be positive")
        self.width = width
        self.height = height
        self.key: Optional[Key] = None
        self.frame_time_ms = 0.0
        self.quitting = False
        self._layers: list[_Layer] = [self._filled(Cell(BLANK_GLYPH, WHITE, BLACK))]
        self._active = 0

    def _filled(self, cell: Optional[Cell]) -> _Layer:
        return [[cell] * self.width for _ in range(self.height)]

    @property
    def _layer(self) -> _Layer:
        return self._layers[self._active]

    def set_active_console(self, index: int) -> None:
        """Direct drawing to layer ``index``, creating transparent layers as needed."""
        if index < 0:
            raise IndexError("console layer index must not be negative")
        while len(self._layers) <= index:
            self._layers.append(self._filled(None))
        self._active = index

    def cls(self) -> None:
        blank = Cell(BLANK_GLYPH, WHITE, BLACK) if self._active == 0 else None
        self._layers[self._active] = self._filled(blank)

    def cls_bg(self, bg: Color) -> None:
        self._layers[self._active] = self._filled(Cell(BLANK_GLYPH, WHITE, bg))

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: int) -> None:
        """Place a glyph; positions off the console are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._layer[y][x] = Cell(glyph, fg, bg)

    def set_fancy(self, x: float, y: float, fg: Color, bg: Color, glyph: int) -> None:
        """Place a glyph at a fractional position, snapped to the cell it falls in."""
        self.set(math.floor(x), math.floor(y), fg, bg, glyph)

    def print(self, x: int, y: int, text: str) -> None:
        """Write text keeping the colours already under it."""
        if not 0 <= y < self.height:
            return
        row = self._layer[y]
        for column, ch in enumerate(text, start=x):
            if 0 <= column < self.width:
                under = row[column]
                fg, bg = (under.fg, under.bg) if under else (WHITE, BLACK)
                row[column] = Cell(to_cp437(ch), fg, bg)

    def _centered_x(self, text: str) -> int:
        return self.width // 2 - len(text) // 2

    def print_centered(self, y: int, text: str) -> None:
        self.print(self._centered_x(text), y, text)

    def print_color_centered(self, y: int, fg: Color, bg: Color, text: str) -> None:
        for column, ch in enumerate(text, start=self._centered_x(text)):
            self.set(column, y, fg, bg, to_cp437(ch))

    def glyph_at(self, x: int, y: int) -> Optional[int]:
        """Glyph on the active layer, or None where that layer is transparent."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside the console")
        cell = self._layer[y][x]
        return cell.glyph if cell else None

    def row_text(self, y: int) -> str:
        """The active layer's row as text; transparent cells read as spaces."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the console")
        return "".join(_glyph_char(cell.glyph) if cell else " " for cell in self._layer[y])

    def _composite(self) -> list[list[Cell]]:
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                row.append(next(layer[y][x] for layer in reversed(self._layers) if layer[y][x]))
            rows.append(row)
        return rows


class GameState(abc.ABC):
    """Something that draws a frame and reacts to input each tick."""

    @abc.abstractmethod
    def tick(self, ctx: Console) -> None:
        """Advance one frame, drawing on ``ctx``."""


class _Palette:
    def __init__(self, curses) -> None:
        self._curses = curses
        self._pairs: dict[tuple[int, int], int] = {}
        self._enabled = curses.has_colors()
        self._basic: dict[int, Color] = {}
        if self._enabled:
            curses.start_color()
            self._basic = {
                curses.COLOR_BLACK: BLACK,
                curses.COLOR_RED: RED,
                curses.COLOR_GREEN: GREEN,
                curses.COLOR_YELLOW: YELLOW,
                curses.COLOR_BLUE: (0, 0, 255),
                curses.COLOR_MAGENTA: (255, 0, 255),
                curses.COLOR_CYAN: CYAN,
                curses.COLOR_WHITE: WHITE,
            }

    def _nearest(self, color: Color) -> int:
        return min(
            self._basic,
            key=lambda code: sum((a - b) ** 2 for a, b in zip(self._basic[code], color)),
        )

    def attr(self, fg: Color, bg: Color) -> int:
        if not self._enabled:
            return 0
        key = (self._nearest(fg), self._nearest(bg))
        if key not in self._pairs:
            number = len(self._pairs) + 1
            if number >= self._curses.COLOR_PAIRS:
                return 0
            self._curses.init_pair(number, *key)
            self._pairs[key] = number
        return self._curses.color_pair(self._pairs[key])


def _read_key(curses, screen) -> Optional[Key]:
    code = screen.getch()
    if code == -1:
        return None
    special = {
        curses.KEY_LEFT: Key.LEFT,
        curses.KEY_RIGHT: Key.RIGHT,
        curses.KEY_UP: Key.UP,
        curses.KEY_DOWN: Key.DOWN,
    }
    if code in special:
        return special[code]
    if 0 <= code < 256:
        return {"p": Key.P, "q": Key.Q, " ": Key.SPACE}.get(chr(code).lower())
    return None


def _loop(screen, curses, state: GameState, console: Console, fps_cap: Optional[float]) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.nodelay(True)
    screen.keypad(True)
    palette = _Palette(curses)
    frame_budget = 1.0 / fps_cap if fps_cap else 0.0
    last = time.perf_counter()
    while not console.quitting:
        start = time.perf_counter()
        console.frame_time_ms = (start - last) * 1000.0
        last = start
        console.key = _read_key(curses, screen)
        state.tick(console)
        for y, row in enumerate(console._composite()):
            for x, cell in enumerate(row):
                try:
                    screen.addstr(y, x, _glyph_char(cell.glyph), palette.attr(cell.fg, cell.bg))
                except curses.error:
                    pass
        screen.refresh()
        remaining = frame_budget - (time.perf_counter() - start)
        if remaining > 0:
            time.sleep(remaining)


def run(
    state: GameState,
    width: int = 80,
    height: int = 50,
    title: str = "",
    fps_cap: Optional[float] = None,
) -> None:
    """Drive ``state`` in the terminal until it sets ``quitting`` on the console."""
    import curses

    console = Console(width, height)
    if title:
        sys.stdout.write(f"\x1b]0;{title}\x07")
        sys.stdout.flush()
    curses.wrapper(_loop, curses, state, console, fps_cap)