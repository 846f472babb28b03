"""
Tests for main.py - the game session driver and CLI.
"""

import json
import os
import random
import sys
import threading
from argparse import Namespace
from dataclasses import replace

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main  # noqa: E402
from main import GameSession, run_simulation, tick_interval_ms  # noqa: E402
from domain.constants import UP, LEFT, RIGHT, WALLS, PASSTHROUGH, SPEED, POINTS, GRID_SIZE  # noqa: E402
from domain.entities import ActiveBoost  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from players import AutoplayPlayer, HumanPlayer  # noqa: E402


def doomed_state() -> GameState:
    """A snake one step from the left wall, heading left."""
    return GameState(
        snake=((0, 5), (1, 5), (2, 5)),
        direction=LEFT,
        food=(10, 10),
        score=30,
        game_over=False,
        mode=WALLS,
        grid_size=GRID_SIZE,
    )


class TestTickInterval:
    def test_base_interval(self):
        state = doomed_state()
        assert tick_interval_ms(state) == 150

    def test_speed_boost_halves_interval(self):
        state = replace(doomed_state(), active_boosts=(ActiveBoost(SPEED, 3),))
        assert tick_interval_ms(state) == 75

    def test_points_boost_keeps_interval(self):
        state = replace(doomed_state(), active_boosts=(ActiveBoost(POINTS, 3),))
        assert tick_interval_ms(state, base_ms=200) == 200


class TestGameSession:
    def test_initialization(self):
        session = GameSession(PASSTHROUGH, rng=random.Random(0))
        assert session.mode == PASSTHROUGH
        assert session.tick_count == 0
        assert list(session.history) == [session.state]
        assert session.game_id
        assert session.game_over is False

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Unknown game mode"):
            GameSession("lava")

    def test_tick_records_history(self):
        session = GameSession(WALLS, rng=random.Random(1))
        session.tick(UP)
        assert session.tick_count == 1
        assert len(session.history) == 2
        assert session.state.direction == UP

    def test_tick_asks_the_player(self):
        player = HumanPlayer()
        player.request(UP)
        session = GameSession(WALLS, player=player, rng=random.Random(2))
        session.tick()
        assert session.state.direction == UP

    def test_explicit_direction_overrides_player(self):
        player = HumanPlayer()
        player.request(UP)
        session = GameSession(WALLS, player=player, rng=random.Random(2))
        session.tick(RIGHT)
        assert session.state.direction == RIGHT

    def test_game_over_callback_fires_once(self):
        finished = []
        session = GameSession(
            WALLS, rng=random.Random(3), state=doomed_state(), on_game_over=finished.append
        )
        session.tick()
        session.tick()
        assert finished == [30]
        assert session.game_over is True
        assert session.tick_count == 1

    def test_ticks_after_game_over_are_no_ops(self):
        session = GameSession(WALLS, rng=random.Random(3), state=doomed_state())
        over = session.tick()
        assert session.tick(UP) is over
        assert len(session.history) == 2

    def test_score_callback(self):
        scores = []
        state = replace(doomed_state(), direction=UP, food=(0, 4))
        session = GameSession(WALLS, rng=random.Random(4), state=state, on_score_change=scores.append)
        session.tick()
        assert scores == [40]

    def test_run_stops_at_max_ticks_and_sleeps_between(self):
        sleeps = []
        session = GameSession(PASSTHROUGH, rng=random.Random(5), sleep=sleeps.append)
        session.run(max_ticks=4)
        assert session.tick_count == 4
        assert len(sleeps) == 4
        assert all(s in (0.15, 0.075) for s in sleeps)

    def test_run_until_game_over(self):
        sleeps = []
        session = GameSession(WALLS, player=AutoplayPlayer(), rng=random.Random(6), sleep=sleeps.append)
        session.run(max_ticks=5000)
        assert session.game_over or session.tick_count == 5000
        assert len(sleeps) == session.tick_count - (1 if session.game_over else 0)

    def test_reset(self):
        session = GameSession(WALLS, rng=random.Random(7), state=doomed_state())
        session.tick()
        fresh = session.reset()
        assert fresh.game_over is False
        assert fresh.snake == ((12, 12), (11, 12), (10, 12))
        assert session.tick_count == 0
        assert list(session.history) == [fresh]

    def test_summary(self):
        session = GameSession(WALLS, rng=random.Random(8), state=doomed_state(), game_id="g-1")
        session.tick()
        assert session.summary() == {
            "game_id": "g-1",
            "mode": WALLS,
            "ticks": 1,
            "score": 30,
            "length": 3,
            "game_over": True,
        }

    def test_serialize_history_is_json_friendly(self):
        session = GameSession(PASSTHROUGH, rng=random.Random(9))
        session.tick()
        payload = json.dumps(session.serialize_history())
        rounds = json.loads(payload)
        assert len(rounds) == 2
        assert rounds[0]["snake"][0] == {"x": 12, "y": 12}
        assert rounds[1]["snake"][0] == {"x": 13, "y": 12}

    def test_print_board(self, capsys):
        session = GameSession(WALLS, rng=random.Random(10))
        session.print_board()
        out = capsys.readouterr().out
        assert "H" in out
        assert "F" in out

    def test_history_keeps_only_the_latest_states(self):
        session = GameSession(PASSTHROUGH, rng=random.Random(11), history_limit=5)
        for _ in range(20):
            session.tick()
        assert session.tick_count == 20
        assert len(session.history) == 5
        assert session.history[-1] is session.state
        assert len(session.serialize_history()) == 5

    def test_default_history_is_bounded(self):
        session = GameSession(PASSTHROUGH, rng=random.Random(12))
        assert session.history.maxlen == main.HISTORY_LIMIT

    def test_reset_keeps_history_limit(self):
        session = GameSession(PASSTHROUGH, rng=random.Random(13), history_limit=3)
        session.tick()
        session.reset()
        assert session.history.maxlen == 3

    def test_explicit_player_overrides_session_player(self):
        held = HumanPlayer()
        held.request(UP)
        session = GameSession(WALLS, player=HumanPlayer(), rng=random.Random(14))
        session.tick(player=held)
        assert session.state.direction == UP


class TestConcurrentTicks:
    def test_each_tick_advances_from_the_previous_state(self):
        session = GameSession(PASSTHROUGH, rng=random.Random(15), history_limit=None)

        def worker():
            for _ in range(50):
                session.tick()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        history = list(session.history)
        assert session.tick_count == len(history) - 1
        if not session.game_over:
            assert session.tick_count == 400
        for earlier, later in zip(history, history[1:]):
            if not later.game_over:
                assert later.snake[1] == earlier.snake[0]


class TestRunSimulation:
    def test_autoplay_game_finishes(self):
        result = run_simulation(Namespace(mode=WALLS, player="autoplay", max_ticks=3000, seed=1,
                                          delay_ms=0, show_board=False))
        assert result["mode"] == WALLS
        assert result["score"] >= 0
        assert result["ticks"] <= 3000

    def test_same_seed_same_game(self):
        params = Namespace(mode=PASSTHROUGH, player="random", max_ticks=200, seed=42,
                           delay_ms=0, show_board=False)
        first = run_simulation(params)
        second = run_simulation(params)
        first.pop("game_id")
        second.pop("game_id")
        assert first == second

    def test_human_player_rejected(self):
        with pytest.raises(ValueError):
            run_simulation(Namespace(mode=WALLS, player="human", max_ticks=1, seed=0,
                                     delay_ms=0, show_board=False))


class TestCli:
    def test_main_prints_summary(self, monkeypatch, capsys):
        monkeypatch.setattr(main, "load_dotenv", lambda: None)
        monkeypatch.setattr(sys, "argv", ["main.py", "--mode", "passthrough", "--max-ticks", "20", "--seed", "3"])
        main.main()
        out = capsys.readouterr().out
        summary = json.loads(out.split("Simulation Result Summary:")[1])
        assert summary["mode"] == PASSTHROUGH
        assert summary["ticks"] <= 20
