"""Tests for the headless simulation driver."""

import json

import numpy as np
import pytest

from snek.config import GameConfig
from snek.game import Game, Key
from snek.headless import (
    SimulationResult,
    key_generator,
    render_ascii,
    run_simulation,
)


class TestSimulationResult:
    def test_summary_format(self):
        result = SimulationResult(
            frames=100,
            steps=20,
            deaths=1,
            restarts=0,
            max_length=4,
            final_state={},
        )
        summary = result.summary()
        assert "100 frames" in summary
        assert "20 steps" in summary
        assert "1 death(s)" in summary
        assert "max length 4" in summary


class TestRunSimulation:
    def test_no_keys_runs_into_wall(self):
        cfg = GameConfig(width=10, height=10, seed=0)
        result = run_simulation(cfg, frames=10, delta_time=0.1, keys={})
        assert result.steps == 4
        assert result.deaths == 1
        assert result.restarts == 0
        assert result.final_state["game_over"] is True

    def test_restart_counted(self):
        cfg = GameConfig(width=10, height=10, seed=0)
        # 5 frames to die, then 11 more frames of 0.1s to exceed 1.0s.
        result = run_simulation(cfg, frames=17, delta_time=0.1, keys={})
        assert result.deaths == 1
        assert result.restarts == 1
        assert result.final_state["game_over"] is False

    def test_scripted_turn_steps_immediately(self):
        cfg = GameConfig(width=10, height=10, seed=0)
        result = run_simulation(
            cfg, frames=1, delta_time=0.01, keys={0: Key.DOWN},
        )
        assert result.steps == 1
        assert result.final_state["snake"]["body"][0] == [4, 3]

    def test_random_keys_deterministic(self):
        cfg = GameConfig(width=15, height=15, seed=3)
        a = run_simulation(cfg, frames=300, key_rate=0.2)
        b = run_simulation(cfg, frames=300, key_rate=0.2)
        assert a == b
        assert a.steps > 0
        json.dumps(a.final_state)

    def test_uses_given_game(self):
        game = Game(GameConfig(width=10, height=10, seed=0))
        run_simulation(frames=1, delta_time=0.1, keys={}, game=game)
        assert game.snake.head_position() == (5, 2)

    @pytest.mark.parametrize(
        "kwargs", [{"frames": -1}, {"key_rate": 1.5}],
    )
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(ValueError):
            run_simulation(GameConfig(), **kwargs)


class TestKeyGenerator:
    def test_deterministic_per_seed(self):
        assert key_generator(7).random() == key_generator(7).random()

    def test_independent_of_food_stream(self):
        keys = key_generator(7).integers(1000, size=8)
        food = np.random.default_rng(7).integers(1000, size=8)
        assert keys.tolist() != food.tolist()


class TestRenderAscii:
    def test_initial_board(self):
        game = Game(GameConfig(width=8, height=6, food_x=6, food_y=4))
        lines = render_ascii(game).splitlines()
        assert lines[0] == "########"
        assert lines[2] == "# oo@  #"
        assert lines[4] == "#     *#"
        assert lines[5] == "########"

    def test_game_over_overlay(self):
        game = Game(GameConfig(width=8, height=6, food_x=6, food_y=4))
        game.update_snake()
        game.update_snake()
        game.update_snake()
        assert game.game_over
        assert render_ascii(game).splitlines()[1] == "#xxxxxx#"
