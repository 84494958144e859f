import argparse
import logging
from dataclasses import dataclass
from typing import Optional

from termcolor import COLORS

from game_of_life import BOUNDARIES, ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class LifeConfig:
    rows: int = 20
    cols: int = 40
    delay_ms: int = 250
    boundary: str = "reference"
    seed: Optional[int] = None
    generations: Optional[int] = None  # None runs forever
    alive: str = "@"
    dead: str = " "
    color: Optional[str] = None
    clear: bool = True
    log_file: Optional[str] = None
    log_level: str = "WARNING"

    def validate(self):
        """Raise ConfigError if the simulation cannot start with these settings."""
        if self.rows < 1 or self.cols < 1:
            raise ConfigError(f"rows and cols must be at least 1, got {self.rows}x{self.cols}")
        if self.delay_ms < 0:
            raise ConfigError(f"delay must not be negative, got {self.delay_ms} ms")
        if self.generations is not None and self.generations < 0:
            raise ConfigError(f"generations must not be negative, got {self.generations}")
        if self.boundary not in BOUNDARIES:
            raise ConfigError(f"unknown boundary policy {self.boundary!r}, expected one of {BOUNDARIES}")
        for name in ("alive", "dead"):
            if len(getattr(self, name)) != 1:
                raise ConfigError(f"{name} glyph must be a single character, got {getattr(self, name)!r}")
        if self.color is not None and self.color not in COLORS:
            raise ConfigError(f"unknown color {self.color!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"unknown log level {self.log_level!r}")
        return self

    @property
    def log_level_value(self):
        return getattr(logging, self.log_level.upper())


def build_parser():
    defaults = LifeConfig()
    p = argparse.ArgumentParser(description="Conway's Game of Life in the terminal.")
    p.add_argument('-r', '--rows', type=int, default=defaults.rows)
    p.add_argument('-c', '--cols', type=int, default=defaults.cols)
    p.add_argument('-d', '--delay', type=int, default=defaults.delay_ms, dest='delay_ms',
                   help="pause between generations in milliseconds")
    p.add_argument('-b', '--boundary', default=defaults.boundary,
                   help="neighbor policy at the grid edge: %s" % ", ".join(BOUNDARIES))
    p.add_argument('-s', '--seed', type=int, default=None)
    p.add_argument('-g', '--generations', type=int, default=None,
                   help="stop after this many generations (default: run forever)")
    p.add_argument('--alive', default=defaults.alive)
    p.add_argument('--dead', default=defaults.dead)
    p.add_argument('--color', default=None)
    p.add_argument('--no-clear', action='store_false', default=True, dest='clear')
    p.add_argument('--log-file', default=None)
    p.add_argument('--log-level', default=defaults.log_level)
    return p


def parse_args(argv=None):
    """Parse command-line arguments into an unvalidated LifeConfig."""
    ns = build_parser().parse_args(argv)
    return LifeConfig(**vars(ns))
