from __future__ import annotations

import argparse
import curses
import logging
import sys

from . import config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cellsnake",
        description="Snake on a character grid, in the terminal or a pygame window.",
    )
    parser.add_argument(
        "--frontend",
        choices=("term", "pygame"),
        default="term",
        help="Display backend (term=curses in this terminal, pygame=resizable window).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=config.TICK_HZ,
        help="Simulation ticks per second.",
    )
    parser.add_argument(
        "--font-size",
        type=int,
        default=config.FONT_SIZE,
        help="Font size in points for the pygame window.",
    )
    parser.add_argument("--log-file", help="Write log records to this file.")
    parser.add_argument("--debug", action="store_true", help="Log collision diagnostics.")
    return parser


def configure_logging(log_file: str | None, debug: bool) -> None:
    # The display owns the terminal, so records only go to a file.
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    if ns.fps <= 0:
        print("error: --fps must be positive", file=sys.stderr)
        return 2

    configure_logging(ns.log_file, ns.debug)
    tick_interval = 1.0 / ns.fps

    try:
        if ns.frontend == "pygame":
            import pygame

            from .game import run as run_pygame

            try:
                return run_pygame(tick_interval, ns.font_size)
            except pygame.error as e:
                print(f"error: {e}", file=sys.stderr)
                return 1

        from .term import run as run_term

        return run_term(tick_interval)
    except curses.error as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
