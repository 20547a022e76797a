"""Game session tests — history recording and replay."""

from __future__ import annotations

import random
import threading

from backend.engine.gameplay import (
    NO_TILE_NOTICE,
    GameSession,
    NullPresenter,
    new_game,
    replay,
)
from backend.engine.gamestate import MoveHistory
from backend.models.board import Direction, solved_board

UP_FROM_SOLVED = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 13, 14, 15, 12)


# -- new game -----------------------------------------------------------------


def test_new_game_presents_initial_board(presenter) -> None:
    game = new_game(presenter, random.Random(3))
    assert presenter.events[0] == (
        "board",
        (game.initial_board, game.initial_board.is_solved()),
    )
    assert len(presenter.notices) == 1
    assert game.history == ()


def test_new_game_without_instructions(presenter) -> None:
    new_game(presenter, random.Random(3), instructions="")
    assert presenter.notices == []


def test_new_game_defaults_to_null_presenter() -> None:
    game = new_game()
    assert isinstance(game.presenter, NullPresenter)
    game.request_move(Direction.UP)
    assert len(game.history) == 1


def test_seeded_games_share_initial_board() -> None:
    first = GameSession(rng=random.Random(11))
    second = GameSession(rng=random.Random(11))
    assert first.initial_board == second.initial_board


# -- request_move -------------------------------------------------------------


def test_up_then_down(presenter) -> None:
    game = GameSession.from_board(solved_board(), presenter)

    game.request_move(Direction.UP)
    assert presenter.events == [("board", (game.current_board(), False))]
    assert game.current_board().tiles == UP_FROM_SOLVED

    game.request_move(Direction.DOWN)
    assert game.current_board() == solved_board()
    assert game.is_won
    # The second request replays both steps.
    assert presenter.boards[1:] == [
        solved_board().swap(15, 11),
        solved_board(),
    ]
    assert presenter.events[-1] == ("board", (solved_board(), True))


def test_illegal_move_is_reported_not_raised(presenter) -> None:
    game = GameSession.from_board(solved_board(), presenter)
    game.request_move(Direction.DOWN)
    assert presenter.events == [("notice", NO_TILE_NOTICE)]
    assert game.current_board() == solved_board()


def test_illegal_move_stays_in_history(presenter) -> None:
    game = GameSession.from_board(solved_board(), presenter)
    game.request_move(Direction.RIGHT)
    game.request_move(Direction.LEFT)

    assert game.history == (Direction.RIGHT, Direction.LEFT)
    # First call: one notice. Second call: the notice again, then a board.
    assert [kind for kind, _ in presenter.events] == ["notice", "notice", "board"]
    assert game.current_board() == solved_board().swap(15, 14)


def test_unrecognised_direction_is_recorded(presenter) -> None:
    game = GameSession.from_board(solved_board(), presenter)
    game.request_move("diagonal")
    assert game.history == ("diagonal",)
    assert presenter.notices == [NO_TILE_NOTICE]
    assert game.current_board() == solved_board()


def test_every_replayed_step_is_presented(presenter) -> None:
    game = GameSession.from_board(solved_board(), presenter)
    moves = [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT]
    for direction in moves:
        game.request_move(direction)
    # 1 + 2 + 3 + 4 presentations, one per replayed step.
    assert len(presenter.events) == 10


def test_solved_board_remains_playable(presenter) -> None:
    game = GameSession.from_board(solved_board(), presenter)
    game.request_move(Direction.LEFT)
    game.request_move(Direction.RIGHT)
    assert game.is_won
    game.request_move(Direction.UP)
    assert not game.is_won


# -- replay -------------------------------------------------------------------


def test_replay_is_deterministic() -> None:
    game = GameSession(rng=random.Random(5))
    rng = random.Random(99)
    for _ in range(40):
        game.request_move(rng.choice(list(Direction)))
    assert game.replay() == game.replay()
    assert game.current_board() == game.current_board()


def test_replay_keeps_board_on_illegal_step() -> None:
    steps = replay(solved_board(), [Direction.DOWN, Direction.UP])
    assert steps[0].legal is False
    assert steps[0].board == solved_board()
    assert steps[1].legal is True
    assert steps[1].board.tiles == UP_FROM_SOLVED


def test_current_board_without_moves() -> None:
    game = GameSession(rng=random.Random(1))
    assert game.current_board() == game.initial_board


# -- history ------------------------------------------------------------------


def test_history_append_returns_snapshot() -> None:
    history = MoveHistory()
    assert history.append(Direction.UP) == (Direction.UP,)
    snapshot = history.append(Direction.LEFT)
    history.append(Direction.DOWN)
    assert snapshot == (Direction.UP, Direction.LEFT)
    assert len(history) == 3


def test_concurrent_requests_each_recorded_once() -> None:
    game = GameSession.from_board(solved_board())
    barrier = threading.Barrier(8)

    def worker(direction: Direction) -> None:
        barrier.wait()
        for _ in range(5):
            game.request_move(direction)

    threads = [
        threading.Thread(target=worker, args=(d,))
        for d in list(Direction) * 2
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    history = game.history
    assert len(history) == 40
    for direction in Direction:
        assert history.count(direction) == 10
