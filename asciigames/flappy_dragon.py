"""Flappy Dragon: fly through the gaps in the walls to score points."""

from __future__ import annotations

import itertools
import random
from collections.abc import Sequence

from asciigames import flappy_player
from asciigames.flappy_states import GameMode
from asciigames.hello import launch
from asciigames.terminal import BLACK, NAVY, RED, Console, to_cp437

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 60
FRAME_DURATION = 75.0


class Player(flappy_player.Player):
    """The dragon, with stronger gravity and flaps that add up."""

    gravity = 0.2

    def gravity_and_move(self) -> None:
        """Fall a little faster, move by the whole part of the velocity and step right."""
        super().gravity_and_move()

    def flap(self) -> None:
        self.velocity -= 2.0

    def render(self, ctx: Console) -> None:
        """Draw the dragon in the leftmost column."""
        super().render(ctx)


class Obstacle:
    """A wall at world column ``x`` with a gap centred on ``gap_y``."""

    gap_range = (10, 40)
    base_size = 20
    wall_glyph = to_cp437("|")
    wall_colors = (RED, BLACK)
    wall_bottom = SCREEN_HEIGHT

    def __init__(self, x: int, score: int, rng: random.Random | None = None) -> None:
        source = rng if rng is not None else random
        self.x = x
        self.gap_y = source.randrange(*self.gap_range)
        self.size = max(2, self.base_size - score)

    def render(self, ctx: Console, player_x: int) -> None:
        screen_x = self.x - player_x
        half_size = self.size // 2
        rows = itertools.chain(
            range(0, self.gap_y - half_size),
            range(self.gap_y + half_size, self.wall_bottom),
        )
        for y in rows:
            ctx.set(screen_x, y, *self.wall_colors, self.wall_glyph)

    def hit_obstacle(self, player: Player) -> bool:
        half_size = self.size // 2
        height = int(player.y)
        in_gap = self.gap_y - half_size <= height <= self.gap_y + half_size
        return player.x == self.x and not in_gap


class State(flappy_player.State):
    """Menu, play and game-over screens with scoring obstacles."""

    player_type: type = Player
    obstacle_type: type = Obstacle
    screen_width = SCREEN_WIDTH
    screen_height = SCREEN_HEIGHT
    background = NAVY

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        super().__init__()
        self.obstacle = self.obstacle_type(self.screen_width, 0, self._rng)
        self.score = 0

    def restart(self) -> None:
        super().restart()
        self.obstacle = self.obstacle_type(self.screen_width, 0, self._rng)
        self.score = 0

    def main_menu(self, ctx: Console) -> None:
        """Show the title menu and react to P or Q."""
        super().main_menu(ctx)

    def dead(self, ctx: Console) -> None:
        """Show the game-over screen with the score and react to P or Q."""
        super().dead(ctx)

    def play(self, ctx: Console) -> None:
        self._fly(ctx)
        ctx.print(0, 1, f"Score: {self.score}")

        self.obstacle.render(ctx, self.player.x)
        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = self.obstacle_type(
                self.player.x + self.screen_width, self.score, self._rng
            )
        if int(self.player.y) > self.screen_height or self.obstacle.hit_obstacle(self.player):
            self.mode = GameMode.END

    def tick(self, ctx: Console) -> None:
        """Run the screen that belongs to the current mode."""
        super().tick(ctx)

    def _dead_report(self) -> Sequence[tuple[int, str, tuple[object, object] | None]]:
        return [(6, f"You earned {self.score} points", None)]


def main(argv: Sequence[str] | None = None) -> int:
    return launch(argv, "Play Flappy Dragon.", State(), banner="Hello, world!")


if __name__ == "__main__":
    raise SystemExit(main())