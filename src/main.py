import logging
import sys
import time

from termcolor import colored

from config import parse_args
from game_of_life import ConfigError, generate_board
from rendering import ConsoleRenderer

logger = logging.getLogger(__name__)


def run(board, render, delay_ms=250, boundary="reference", generations=None, sleep=None):
    """Render, advance and pause until `generations` steps are done, or forever if None."""
    sleep = sleep or time.sleep
    start = board.generation
    while generations is None or board.generation - start < generations:
        render(board)
        board.step(boundary)
        logger.debug("Generation %d: %d alive", board.generation, board.count_alive())
        sleep(delay_ms / 1000)
    return board


def setup_logging(config):
    if config.log_file:
        logging.basicConfig(filename=config.log_file, level=config.log_level_value)
    else:
        logging.basicConfig(level=config.log_level_value)


def main(argv=None):
    config = parse_args(argv)
    try:
        config.validate()
    except ConfigError as e:
        print(colored("ERROR:", "red", attrs=["bold"]) + f" {e}", file=sys.stderr)
        return 2

    setup_logging(config)
    logger.info("Starting %dx%d board, %d ms per generation, %s boundary",
                config.rows, config.cols, config.delay_ms, config.boundary)

    board = generate_board(config.rows, config.cols, config.seed)
    render = ConsoleRenderer(alive=config.alive, dead=config.dead,
                             color=config.color, clear=config.clear)
    try:
        run(board, render, config.delay_ms, config.boundary, config.generations)
    except KeyboardInterrupt:
        logger.info("Interrupted after %d generations", board.generation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
