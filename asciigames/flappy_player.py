"""Flappy Dragon with a falling, flapping player and nothing to dodge yet."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from asciigames import flappy_states
from asciigames.flappy_states import GameMode
from asciigames.hello import launch
from asciigames.terminal import BLACK, NAVY_BLUE, YELLOW, Console, Key, to_cp437

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
FRAME_DURATION = 75.0


@dataclass
class Player:
    """The dragon: a world position and a vertical velocity."""

    x: int
    y: int
    velocity: float = 0.0

    gravity: ClassVar[float] = 0.1

    def render(self, ctx: Console) -> None:
        ctx.set(0, self.y, YELLOW, BLACK, to_cp437("@"))

    def gravity_and_move(self) -> None:
        """Fall a little faster, move by the whole part of the velocity and step right."""
        if self.velocity < 2.0:
            self.velocity += self.gravity
        self.y = max(0, self.y + int(self.velocity))
        self.x += 1

    def flap(self) -> None:
        self.velocity = -2.0


class State(flappy_states.State):
    """Menu, play and game-over screens around a single player."""

    routes = {
        GameMode.MENU: "main_menu",
        GameMode.END: "dead",
        GameMode.PLAYING: "play",
    }
    player_type: type = Player
    screen_height = SCREEN_HEIGHT
    background = NAVY_BLUE
    start_y = 25
    restart_y = 25

    def __init__(self) -> None:
        super().__init__()
        self.player = self.player_type(5, self.start_y)
        self.frame_time = 0.0

    def restart(self) -> None:
        super().restart()
        self.player = self.player_type(5, self.restart_y)
        self.frame_time = 0.0

    def main_menu(self, ctx: Console) -> None:
        """Show the title menu and react to P or Q."""
        super().main_menu(ctx)

    def dead(self, ctx: Console) -> None:
        """Show the game-over screen and react to P or Q."""
        super().dead(ctx)

    def play(self, ctx: Console) -> None:
        self._fly(ctx)
        if int(self.player.y) > self.screen_height:
            self.mode = GameMode.END

    def tick(self, ctx: Console) -> None:
        """Run the screen that belongs to the current mode."""
        if self.mode is GameMode.MENU:
            self.main_menu(ctx)
        elif self.mode is GameMode.END:
            self.dead(ctx)
        else:
            self.play(ctx)

    def _fly(self, ctx: Console) -> None:
        """Advance the player once a frame has elapsed, handle flapping and draw it."""
        ctx.cls_bg(self.background)
        self.frame_time += ctx.frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.gravity_and_move()
        if ctx.key is Key.SPACE:
            self.player.flap()
        self.player.render(ctx)
        ctx.print(0, 0, "Press SPACE to flap.")


def main(argv: Sequence[str] | None = None) -> int:
    return launch(argv, "Flappy Dragon with a flapping player.", State(), banner="Hello, world!")


if __name__ == "__main__":
    raise SystemExit(main())