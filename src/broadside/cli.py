"""Run automated matches from the command line and log the tally."""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from collections import Counter

from . import config as _cfg
from .catalog import ShipCatalog
from .match import play_match
from .players import PLAYER_KINDS, create_player

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Broadside automated match runner")
    parser.add_argument("p1", choices=PLAYER_KINDS, help="Kind of the first player")
    parser.add_argument("p2", choices=PLAYER_KINDS, help="Kind of the second player")
    parser.add_argument("-n", "--games", type=int, default=1, help="Number of matches to play")
    parser.add_argument("--rows", type=int, default=_cfg.BOARD_ROWS)
    parser.add_argument("--cols", type=int, default=_cfg.BOARD_COLS)
    parser.add_argument("--seed", type=int, default=_cfg.SEED, help="Seed for a reproducible run")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)

    # Set the BROADSIDE_DEBUG environment variable based on the --debug flag
    if args.debug:
        os.environ["BROADSIDE_DEBUG"] = "1"
    logging.basicConfig(
        level=logging.DEBUG if (args.debug or _cfg.DEBUG) else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        catalog = ShipCatalog.standard(args.rows, args.cols)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    rng = random.Random(args.seed)
    wins: Counter[str] = Counter()
    for game in range(args.games):
        first = create_player(args.p1, f"{args.p1.capitalize()} 1", catalog, rng)
        second = create_player(args.p2, f"{args.p2.capitalize()} 2", catalog, rng)
        winner = play_match(first, second, catalog, rng=rng)
        wins[winner.name if winner else "no result"] += 1
        logger.debug("Game %d finished: %s", game + 1, winner.name if winner else "no result")

    for name, count in wins.most_common():
        logger.info("%s: %d of %d", name, count, args.games)
    return 0


if __name__ == "__main__":
    sys.exit(main())
