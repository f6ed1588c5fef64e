"""The game-mode skeleton: a menu, a play mode and a game-over screen."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence

from asciigames.hello import launch
from asciigames.terminal import Console, GameState, Key


class GameMode(enum.Enum):
    MENU = enum.auto()
    PLAYING = enum.auto()
    END = enum.auto()


class State(GameState):
    """Switches between menu, play and game-over screens.

    The Flappy Dragon games build on this class; ``routes`` maps each mode
    to the method that runs it, and the ``*_colors`` attributes colour the
    screen text (``None`` prints with the console's default colours).
    """

    # In the skeleton, Playing shows the game-over screen and End goes back to playing.
    routes = {
        GameMode.MENU: "main_menu",
        GameMode.PLAYING: "dead",
        GameMode.END: "play",
    }
    title_colors: tuple[object, object] | None = None
    option_colors: tuple[object, object] | None = None
    dead_colors: tuple[object, object] | None = None

    def __init__(self) -> None:
        self.mode = GameMode.MENU

    def restart(self) -> None:
        self.mode = GameMode.PLAYING

    def main_menu(self, ctx: Console) -> None:
        self._show(
            ctx,
            [
                (5, "Welcome to Flappy Dragon", self.title_colors),
                (8, "(P) Play Game", self.option_colors),
                (9, "(Q) Quit Game", self.option_colors),
            ],
        )

    def dead(self, ctx: Console) -> None:
        self._show(
            ctx,
            [
                (5, "You are dead!", self.dead_colors),
                *self._dead_report(),
                (8, "(P) Play Again", self.option_colors),
                (9, "(Q) Quit Game", self.option_colors),
            ],
        )

    def play(self, ctx: Console) -> None:
        self.mode = GameMode.PLAYING

    def tick(self, ctx: Console) -> None:
        getattr(self, self.routes[self.mode])(ctx)

    def _dead_report(self) -> Sequence[tuple[int, str, tuple[object, object] | None]]:
        return ()

    def _show(
        self,
        ctx: Console,
        lines: Iterable[tuple[int, str, tuple[object, object] | None]],
    ) -> None:
        """Draw a centred text screen, then act on P (play) or Q (quit)."""
        ctx.cls()
        for row, text, colors in lines:
            if colors is None:
                ctx.print_centered(row, text)
            else:
                ctx.print_color_centered(row, *colors, text)
        if ctx.key is Key.P:
            self.restart()
        elif ctx.key is Key.Q:
            ctx.quitting = True


def main(argv: Sequence[str] | None = None) -> int:
    return launch(argv, "Flappy Dragon game-mode skeleton.", State(), banner="Hello, world!")


if __name__ == "__main__":
    raise SystemExit(main())