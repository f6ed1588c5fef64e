import random

import pytest

from asciigames.flappy_dragon import (
    FRAME_DURATION,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Obstacle,
    Player,
    State,
)
from asciigames.flappy_states import GameMode
from asciigames.terminal import BLANK_GLYPH, Console, Key, to_cp437


def _tick(state, key=None, frame_ms=0.0):
    ctx = Console(80, 60)
    ctx.key = key
    ctx.frame_time_ms = frame_ms
    state.tick(ctx)
    return ctx


def _playing_state(seed=1):
    state = State(random.Random(seed))
    state.restart()
    return state


def _obstacle(x, gap_y, size):
    obstacle = Obstacle(x, 0, random.Random(0))
    obstacle.gap_y = gap_y
    obstacle.size = size
    return obstacle


@pytest.mark.parametrize(
    "start_y, flaps, expected_y, expected_velocity",
    [(25, 0, 25, 0.2), (1, 2, 0, -3.8)],
)
def test_one_gravity_step(start_y, flaps, expected_y, expected_velocity):
    player = Player(5, start_y)
    for _ in range(flaps):
        player.flap()
    player.gravity_and_move()
    assert (player.x, player.y) == (6, expected_y)
    assert player.velocity == pytest.approx(expected_velocity)


def test_flaps_accumulate():
    player = Player(5, 25)
    player.flap()
    player.flap()
    assert player.velocity == -4.0


def test_render_draws_player_at_left_column():
    ctx = Console(80, 60)
    Player(50, 7).render(ctx)
    assert ctx.glyph_at(0, 7) == to_cp437("@")


@pytest.mark.parametrize("seed", range(50))
def test_obstacle_gap_in_range(seed):
    assert 10 <= Obstacle(80, 0, random.Random(seed)).gap_y < 40


@pytest.mark.parametrize("score, size", [(0, 20), (1, 19), (18, 2), (25, 2)])
def test_obstacle_size_shrinks_with_score_but_not_below_two(score, size):
    assert Obstacle(80, score, random.Random(0)).size == size


@pytest.mark.parametrize(
    "x, y, hit",
    [(10, 19, True), (10, 20, False), (10, 30, False), (10, 40, False), (10, 41, True), (9, 0, False)],
)
def test_hit_obstacle(x, y, hit):
    assert _obstacle(10, 30, 20).hit_obstacle(Player(x, y)) is hit


@pytest.mark.parametrize(
    "y, walled",
    [(0, True), (19, True), (20, False), (39, False), (40, True), (SCREEN_HEIGHT - 1, True)],
)
def test_obstacle_render_leaves_gap(y, walled):
    ctx = Console(80, 60)
    ctx.cls()
    _obstacle(20, 30, 20).render(ctx, 17)
    assert ctx.glyph_at(3, y) == (to_cp437("|") if walled else BLANK_GLYPH)


@pytest.mark.parametrize(
    "key, mode, quitting",
    [(None, GameMode.MENU, False), (Key.P, GameMode.PLAYING, False), (Key.Q, GameMode.MENU, True)],
)
def test_menu(key, mode, quitting):
    state = State(random.Random(0))
    ctx = _tick(state, key)
    assert "Welcome to Flappy Dragon" in ctx.row_text(5)
    assert state.mode is mode
    assert ctx.quitting is quitting


def test_play_moves_after_frame_duration():
    state = _playing_state()
    _tick(state, frame_ms=FRAME_DURATION + 1)
    assert state.player.x == 6
    assert state.frame_time == 0.0


def test_play_shows_score():
    state = _playing_state()
    state.score = 7
    ctx = _tick(state)
    assert ctx.row_text(0).startswith("Press SPACE to flap.")
    assert ctx.row_text(1).startswith("Score: 7")


def test_passing_obstacle_scores_and_spawns_next():
    state = _playing_state()
    state.obstacle.x = state.player.x - 1
    _tick(state)
    assert state.score == 1
    assert state.obstacle.x == state.player.x + SCREEN_WIDTH
    assert state.obstacle.size == 19
    assert state.mode is GameMode.PLAYING


@pytest.mark.parametrize("crash", ["wall", "floor"])
def test_crashing_ends_game(crash):
    state = _playing_state()
    if crash == "wall":
        state.obstacle = _obstacle(state.player.x, 10, 2)
    else:
        state.player.y = SCREEN_HEIGHT + 1
    _tick(state)
    assert state.mode is GameMode.END


def test_dead_screen_reports_score_and_restarts():
    state = _playing_state()
    state.mode = GameMode.END
    state.score = 3
    ctx = _tick(state)
    assert "You are dead!" in ctx.row_text(5)
    assert "You earned 3 points" in ctx.row_text(6)
    _tick(state, Key.P)
    assert state.mode is GameMode.PLAYING
    assert state.score == 0
    assert state.obstacle.x == SCREEN_WIDTH