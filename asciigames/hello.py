"""The smallest game: a greeting on the console, and the shared game launcher."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from asciigames.terminal import Console, GameState, run

GREETING = "Hello, Bracket Terminal!"


class HelloState(GameState):
    """Clears the screen and prints a greeting every frame."""

    def tick(self, ctx: Console) -> None:
        ctx.cls()
        ctx.print(1, 1, GREETING)


def launch(
    argv: Sequence[str] | None,
    description: str,
    state: GameState,
    *,
    width: int = 80,
    height: int = 50,
    title: str = "Flappy Dragon",
    banner: str | None = None,
) -> int:
    """Parse a command line that takes no arguments, then run ``state`` until it quits."""
    argparse.ArgumentParser(description=description).parse_args(argv)
    if banner is not None:
        print(banner)
    run(state, width, height, title)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    return launch(argv, "Print a greeting on the terminal console.", HelloState())


if __name__ == "__main__":
    raise SystemExit(main())