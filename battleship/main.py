# main.py
import argparse
import logging
import random
import sys

from . import settings
from .console import ConsoleController, ConsoleView
from .errors import PlacementError
from .game import BattleshipModel

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="battleship", description="Play single-player Battleship.")
    parser.add_argument("--ui", choices=["console", "gui", "web"], default="console",
                        help="Front end to run")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible ship placement")
    parser.add_argument("--verbose", action="store_true", help="Also log to the terminal")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--log-dir", default=str(settings.LOG_DIR), help="Directory for battleship.log")
    parser.add_argument("--host", default=settings.WEB_HOST, help="Web front end host")
    parser.add_argument("--port", type=int, default=settings.WEB_PORT, help="Web front end port")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings.setup_logging(args.log_level, args.log_dir, verbose=args.verbose)

    model = BattleshipModel(random.Random(args.seed))
    logger.info("Launching %s front end (seed=%s)", args.ui, args.seed)

    try:
        if args.ui == "gui":
            from . import gui
            gui.run(model)
        elif args.ui == "web":
            from . import web
            web.run(model, args.host, args.port)
        else:
            ConsoleController(sys.stdin, ConsoleView(sys.stdout)).play_game(model)
    except PlacementError as e:
        logger.error("Ship placement failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
