"""Flappy Dragon Enhanced: an animated dragon, a ground line and shrinking gaps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from asciigames import flappy_dragon
from asciigames.hello import launch
from asciigames.terminal import BLACK, CYAN, NAVY, RED, WHITE, YELLOW, Console, to_cp437

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 25
FRAME_DURATION = 75.0
DRAGON_FRAMES = (64, 1, 2, 3, 2, 1)
WALL_GLYPH = 179


@dataclass
class Player:
    """The dragon: a world column, a fractional height, a velocity and an animation frame."""

    x: int
    y: float
    velocity: float = 0.0
    frame: int = 0

    def __post_init__(self) -> None:
        self.y = float(self.y)

    def gravity_and_move(self) -> None:
        """Fall a little faster, move by the velocity, step right and advance the animation."""
        if self.velocity < 2.0:
            self.velocity += 0.1
        self.y = max(0.0, self.y + self.velocity)
        self.x += 1
        self.frame = (self.frame + 1) % len(DRAGON_FRAMES)

    def flap(self) -> None:
        self.velocity -= 1.0

    def render(self, ctx: Console) -> None:
        """Draw the current dragon frame on layer 1, then return drawing to layer 0."""
        ctx.set_active_console(1)
        ctx.cls()
        ctx.set_fancy(0.0, self.y, WHITE, NAVY, DRAGON_FRAMES[self.frame])
        ctx.set_active_console(0)


class Obstacle(flappy_dragon.Obstacle):
    """A wall above a ground line, with a gap centred on ``gap_y``."""

    gap_range = (5, 20)
    base_size = 10
    wall_glyph = WALL_GLYPH
    wall_colors = (WHITE, NAVY)
    wall_bottom = SCREEN_HEIGHT - 1

    def render(self, ctx: Console, player_x: int) -> None:
        ground = to_cp437("#")
        for x in range(SCREEN_WIDTH):
            ctx.set(x, SCREEN_HEIGHT - 1, WHITE, WHITE, ground)
        super().render(ctx, player_x)

    def hit_obstacle(self, player: Player) -> bool:
        """Whether the player shares the wall's column outside the gap."""
        half_size = self.size // 2
        height = int(player.y)
        in_gap = self.gap_y - half_size <= height <= self.gap_y + half_size
        return player.x == self.x and not in_gap


class State(flappy_dragon.State):
    """Menu, play and game-over screens with the animated dragon."""

    player_type: type = Player
    obstacle_type: type = Obstacle
    screen_width = SCREEN_WIDTH
    screen_height = SCREEN_HEIGHT
    restart_y = SCREEN_WIDTH // 2
    title_colors = (YELLOW, BLACK)
    option_colors = (CYAN, BLACK)
    dead_colors = (RED, BLACK)

    def restart(self) -> None:
        """Start a fresh game with the dragon at mid-height."""
        super().restart()

    def main_menu(self, ctx: Console) -> None:
        """Show the coloured title menu and react to P or Q."""
        super().main_menu(ctx)

    def dead(self, ctx: Console) -> None:
        """Show the coloured game-over screen with the score and react to P or Q."""
        super().dead(ctx)

    def play(self, ctx: Console) -> None:
        """Advance the dragon, draw the walls and ground, and score or end the game."""
        super().play(ctx)

    def tick(self, ctx: Console) -> None:
        """Run the screen that belongs to the current mode."""
        super().tick(ctx)


def main(argv: Sequence[str] | None = None) -> int:
    return launch(
        argv,
        "Play Flappy Dragon Enhanced.",
        State(),
        width=SCREEN_WIDTH,
        height=SCREEN_HEIGHT,
        title="Flappy Dragon Enhanced",
    )


if __name__ == "__main__":
    raise SystemExit(main())