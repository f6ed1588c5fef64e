"""A player walking around the dungeon map with the arrow keys."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from asciigames.dungeon_map import SCREEN_HEIGHT, SCREEN_WIDTH, Map
from asciigames.terminal import BLACK, WHITE, Console, GameState, Key, Point, run, to_cp437

_MOVES = {
    Key.LEFT: Point(-1, 0),
    Key.RIGHT: Point(1, 0),
    Key.UP: Point(0, -1),
    Key.DOWN: Point(0, 1),
}


@dataclass
class Player:
    """The adventurer's position on the map."""

    position: Point

    def render(self, ctx: Console) -> None:
        ctx.set(self.position.x, self.position.y, WHITE, BLACK, to_cp437("@"))

    def update(self, ctx: Console, map: Map) -> None:
        """Step one tile in the pressed arrow direction if the map allows it."""
        if ctx.key is None:
            return
        new_position = self.position + _MOVES.get(ctx.key, Point.zero())
        if map.can_enter_tile(new_position):
            self.position = new_position


@dataclass
class CrawlerState(GameState):
    """The map and the player, updated and drawn each frame."""

    map: Map = field(default_factory=Map)
    player: Player = field(
        default_factory=lambda: Player(Point(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2))
    )

    def tick(self, ctx: Console) -> None:
        ctx.cls()
        self.player.update(ctx, self.map)
        self.map.render(ctx)
        self.player.render(ctx)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Walk around the dungeon.").parse_args(argv)
    run(CrawlerState(), 80, 50, "Dungeon Crawler", 30.0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())