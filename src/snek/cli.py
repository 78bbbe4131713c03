"""Command-line entry point for headless snek runs."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snek",
        description="Headless runner for the snek grid snake engine.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log food spawns and other debug events.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run the game loop without a window.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--frames", type=int, default=1_000)
    sim_p.add_argument(
        "--dt", type=float, default=1 / 60,
        help="Seconds of game time per frame.",
    )
    sim_p.add_argument(
        "--key-rate", type=float, default=0.05,
        help="Probability of a random arrow key press each frame.",
    )
    sim_p.add_argument(
        "--show", action="store_true",
        help="Print the final board as text.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Print or save the default config.")
    cfg_p.add_argument(
        "--output", type=str, default=None,
        help="Write the config JSON here instead of printing it.",
    )

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from snek.config import GameConfig
    from snek.game import Game
    from snek.headless import render_ascii, run_simulation

    overrides = {
        name: getattr(args, name)
        for name in ("width", "height", "seed")
        if getattr(args, name) is not None
    }
    try:
        config = (
            GameConfig.load(args.config) if args.config else GameConfig()
        )
        if overrides:
            d = config.to_dict()
            d.update(overrides)
            config = GameConfig(**d)
        game = Game(config)
        result = run_simulation(
            frames=args.frames,
            delta_time=args.dt,
            key_rate=args.key_rate,
            game=game,
        )
    except ValueError as exc:
        logger.error("Invalid simulation settings: %s", exc)
        return 2

    print(result.summary())  # noqa: T201
    if args.show:
        print(render_ascii(game))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from snek.config import GameConfig

    config = GameConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snek`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
