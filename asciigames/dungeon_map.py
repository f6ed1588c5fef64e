"""The dungeon map: a grid of wall and floor tiles."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field

from asciigames.terminal import BLACK, GREEN, YELLOW, Console, GameState, Point, run, to_cp437

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 60
NUM_TILES = SCREEN_WIDTH * SCREEN_HEIGHT


class TileType(enum.Enum):
    WALL = enum.auto()
    FLOOR = enum.auto()


def map_idx(x: int, y: int) -> int:
    """Index of tile (x, y) in the row-major tile list."""
    return y * SCREEN_WIDTH + x


@dataclass
class Map:
    """A row-major list of tiles covering the whole screen."""

    tiles: list[TileType] = field(default_factory=lambda: [TileType.FLOOR] * NUM_TILES)

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < SCREEN_WIDTH and 0 <= point.y < SCREEN_HEIGHT

    def can_enter_tile(self, point: Point) -> bool:
        return self.in_bounds(point) and self.tiles[map_idx(point.x, point.y)] is TileType.FLOOR

    def render(self, ctx: Console) -> None:
        appearance = {
            TileType.WALL: (GREEN, to_cp437("#")),
            TileType.FLOOR: (YELLOW, to_cp437(".")),
        }
        for y in range(SCREEN_HEIGHT):
            for x in range(SCREEN_WIDTH):
                fg, glyph = appearance[self.tiles[map_idx(x, y)]]
                ctx.set(x, y, fg, BLACK, glyph)


@dataclass
class MapState(GameState):
    """Shows the map every frame."""

    map: Map = field(default_factory=Map)

    def tick(self, ctx: Console) -> None:
        ctx.cls()
        self.map.render(ctx)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Show the dungeon map.").parse_args(argv)
    run(MapState(), 80, 50, "Dungeon Crawler", 30.0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())