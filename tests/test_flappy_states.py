import pytest

from asciigames.flappy_states import GameMode, State
from asciigames.terminal import Console, Key


def _tick(mode=GameMode.MENU, key=None):
    state = State()
    state.mode = mode
    ctx = Console(80, 50)
    ctx.key = key
    state.tick(ctx)
    return state, ctx


@pytest.mark.parametrize(
    "mode, row, text",
    [
        (GameMode.MENU, 5, "Welcome to Flappy Dragon"),
        (GameMode.MENU, 8, "(P) Play Game"),
        (GameMode.MENU, 9, "(Q) Quit Game"),
        (GameMode.PLAYING, 5, "You are dead!"),
        (GameMode.PLAYING, 8, "(P) Play Again"),
        (GameMode.PLAYING, 9, "(Q) Quit Game"),
    ],
)
def test_screen_text(mode, row, text):
    _, ctx = _tick(mode)
    assert ctx.row_text(row).strip() == text


@pytest.mark.parametrize(
    "key, mode, quitting",
    [
        (None, GameMode.MENU, False),
        (Key.P, GameMode.PLAYING, False),
        (Key.Q, GameMode.MENU, True),
        (Key.SPACE, GameMode.MENU, False),
    ],
)
def test_menu_keys(key, mode, quitting):
    state, ctx = _tick(GameMode.MENU, key)
    assert state.mode is mode
    assert ctx.quitting is quitting


def test_restart_switches_to_playing():
    state = State()
    state.restart()
    assert state.mode is GameMode.PLAYING


def test_end_mode_returns_to_playing():
    state, _ = _tick(GameMode.END)
    assert state.mode is GameMode.PLAYING