"""Command-line entry point for the Keyrush typing game core."""

import argparse
import dataclasses
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from keyrush.core.dictionary import load_dictionary
from keyrush.core.game import TypingGame
from keyrush.core.options import GameOptions, load_options

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyrush",
        description="Generate a typing practice paragraph.",
    )
    parser.add_argument("--config", type=Path, help="YAML file with game options")
    parser.add_argument("--dictionary", type=Path, help="YAML word list to draw from")
    parser.add_argument("--length", type=int, help="approximate paragraph length")
    parser.add_argument("--no-uppercase", action="store_true", help="keep every word lowercase")
    parser.add_argument("--no-special", action="store_true", help="no punctuation, commas or hyphens")
    parser.add_argument("--seed", type=int, help="seed for reproducible text")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def resolve_options(args: argparse.Namespace) -> GameOptions:
    """Merge the options file (if any) with command-line overrides."""
    options = load_options(args.config) if args.config else GameOptions()
    overrides = {}
    if args.length is not None:
        if args.length < 0:
            raise ValueError("--length must not be negative")
        overrides["approximate_text_length"] = args.length
    if args.no_uppercase:
        overrides["generate_uppercase_letters"] = False
    if args.no_special:
        overrides["generate_special_characters"] = False
    return dataclasses.replace(options, **overrides)


def create_game(
    options: GameOptions,
    dictionary: Optional[Path] = None,
    seed: Optional[int] = None,
) -> TypingGame:
    """Build a game, loading the word list only when text has to be generated."""
    words = load_dictionary(dictionary) if options.text is None else None
    rng = random.Random(seed) if seed is not None else None
    return TypingGame(options, words=words, rng=rng)


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        options = resolve_options(args)
        game = create_game(options, dictionary=args.dictionary, seed=args.seed)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.warning("Could not set up game: %s", e)
        return 1

    print(game.text)
    return 0


def main() -> None:
    sys.exit(run())
