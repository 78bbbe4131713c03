"""Headless event loop: drive a game with fixed frame deltas."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from snek.config import GameConfig
from snek.game import Game, Key
from snek.render import AsciiCanvas

logger = logging.getLogger(__name__)

_ARROW_KEYS = (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT)


@dataclass
class SimulationResult:
    """Counters collected over a headless run."""

    frames: int
    steps: int
    deaths: int
    restarts: int
    max_length: int
    final_state: dict

    def summary(self) -> str:
        return (
            f"Simulation: {self.frames} frames, {self.steps} steps, "
            f"{self.deaths} death(s), {self.restarts} restart(s), "
            f"max length {self.max_length}"
        )


def key_generator(seed: int | None) -> np.random.Generator:
    """Return a key-press RNG independent of the game's food RNG."""
    return np.random.default_rng(np.random.SeedSequence(seed).spawn(1)[0])


def render_ascii(game: Game) -> str:
    """Draw *game* onto a character grid."""
    canvas = AsciiCanvas(game.width, game.height)
    game.draw(canvas)
    return canvas.render()


def run_simulation(
    config: GameConfig | None = None,
    *,
    frames: int = 1_000,
    delta_time: float = 1 / 60,
    key_rate: float = 0.05,
    keys: Mapping[int, Key] | None = None,
    game: Game | None = None,
) -> SimulationResult:
    """Feed *frames* ticks of *delta_time* seconds into a game.

    Before each tick a key is pressed: the scripted ``keys[frame]`` when
    *keys* is given, otherwise a random arrow key with probability
    *key_rate*.
    """
    if frames < 0:
        raise ValueError("frames must be non-negative.")
    if not 0.0 <= key_rate <= 1.0:
        raise ValueError("key_rate must be between 0 and 1.")

    if game is None:
        game = Game(config or GameConfig())
    cfg = game.config
    key_rng = key_generator(cfg.seed)

    steps = deaths = restarts = 0
    max_length = len(game.snake)

    for frame in range(frames):
        if keys is not None:
            key = keys.get(frame)
        elif key_rng.random() < key_rate:
            key = _ARROW_KEYS[int(key_rng.integers(len(_ARROW_KEYS)))]
        else:
            key = None

        # Input is handled before the frame tick, as a window loop would.
        for stimulus, arg in ((game.key_pressed, key), (game.update, delta_time)):
            if arg is None:
                continue
            snake = game.snake
            head = snake.head_position()
            was_over = game.game_over
            stimulus(arg)
            if game.snake is not snake:
                restarts += 1
            elif snake.head_position() != head:
                steps += 1
            if game.game_over and not was_over:
                deaths += 1
            max_length = max(max_length, len(game.snake))

    result = SimulationResult(
        frames=frames,
        steps=steps,
        deaths=deaths,
        restarts=restarts,
        max_length=max_length,
        final_state=game.get_state(),
    )
    logger.info(result.summary())
    return result
