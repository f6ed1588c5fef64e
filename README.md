# asciigames

A handful of small games that draw with characters in your terminal.
Each game is a state object ticked once per frame against a character
console; the console, keys and the main loop live in `asciigames.terminal`.

The games run through the standard library's `curses` module, so they need a
Python that ships it (Linux, macOS and other POSIX systems). There are no
other dependencies.

## Installing

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Games

| Command | What it does |
| --- | --- |
| `asciigames-hello` | Prints "Hello, Bracket Terminal!" on a cleared screen. |
| `asciigames-flappy-states` | Only the mode screens: P on the menu switches to the game-over screen, where P and Q keep working. There is no game yet. |
| `asciigames-flappy-player` | A dragon (`@`) that falls under gravity; press SPACE to flap. Falling off the bottom ends the game. |
| `asciigames-flappy-dragon` | Flappy Dragon: fly through the gaps in the walls and score a point for each one. |
| `asciigames-flappy-bonus` | Flappy Dragon on a 40×25 screen with coloured menus, a ground line, finer falling and an animated dragon. |
| `asciigames-dungeon-map` | Draws the dungeon map, capped at 30 frames a second. |
| `asciigames-dungeon-player` | Walk an `@` around the dungeon map with the arrow keys. |

None of the commands take arguments beyond `--help`.

In the Flappy Dragon games, press **P** on the menu to play and **Q** to quit;
on the game-over screen **P** plays again. Each wall passed scores a point and
makes the next gap smaller, down to a size of 2. Fall off the bottom of the
screen or hit a wall and the game is over; the game-over screen shows the
score in `flappy-dragon` and `flappy-bonus`.

## Using the pieces

Every game exposes a state class with a `tick(ctx)` method that takes a
`Console`, so a game can be driven and inspected without a real terminal:

```python
from asciigames.terminal import Console, Key
from asciigames.flappy_dragon import State

console = Console(80, 60)
state = State()
console.key = Key.P
state.tick(console)          # leaves the menu and starts playing
console.key = None
state.tick(console)
print(console.row_text(0))   # "Press SPACE to flap." ...
```

A test or script sets `console.key` and `console.frame_time_ms` before each
tick, and reads back `console.quitting`, `console.glyph_at(x, y)` and
`console.row_text(y)`. The Flappy Dragon `State` classes in `flappy_dragon`
and `flappy_bonus` accept a `random.Random` so wall gaps can be reproduced.

`asciigames.terminal.run(state, width, height, title, fps_cap)` drives any
`GameState` in the terminal until it sets `quitting` on the console.

The dungeon map (`asciigames.dungeon_map.Map`) offers `in_bounds(point)` and
`can_enter_tile(point)` for movement checks, with `map_idx(x, y)` mapping a
tile position to its index in `Map.tiles`.

## What it does not do

- There is no graphical window: everything is drawn as code page 437
  characters in the terminal, so the animated dragon in `flappy-bonus` shows
  as changing characters rather than sprite pictures.
- The dungeon map is all floor; there are no walls, rooms, monsters or items
  yet. The map is 60 rows tall while the window is 50, so its bottom rows are
  off screen.
- The Flappy Dragon games have no frame-rate cap and run as fast as the
  terminal allows.