from __future__ import annotations

import argparse
import logging
import random

from . import config
from .game import Game
from .state import DIRECTIONS
from .steering import Steering

logger = logging.getLogger("snaketick")


def main(argv: list[str] | None = None) -> int:
    settings = config.load_settings()

    parser = argparse.ArgumentParser(
        prog="snaketick",
        description="Run the snake simulation headless and log each snapshot.",
    )
    parser.add_argument("--ticks", type=int, default=None, help="Stop after this many ticks (default: run until Ctrl-C).")
    parser.add_argument("--tick-ms", type=int, default=settings.tick_ms, help="Tick period in milliseconds.")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Seed for food placement.")
    parser.add_argument("--wander", action="store_true", help="Steer randomly instead of holding the start direction.")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (DEBUG, INFO, ...).")
    args = parser.parse_args(argv)

    if args.ticks is not None and args.ticks < 0:
        parser.error("--ticks must be >= 0")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = Game(rng=random.Random(args.seed), tick_ms=args.tick_ms)
    steering = Steering(game.direction)
    driver = random.Random(args.seed)

    game.start()
    try:
        for snapshot in game.snapshots.subscribe():
            if snapshot is None:
                continue
            logger.info(
                "tick=%d score=%d length=%d head=%s food=%s",
                game.ticks,
                snapshot.score,
                len(snapshot.snake),
                snapshot.snake[0],
                snapshot.food,
            )
            if args.ticks is not None and game.ticks >= args.ticks:
                break
            if args.wander:
                steering.request(driver.choice(DIRECTIONS))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        game.stop()

    logger.info("Final score: %d", game.state.score)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
