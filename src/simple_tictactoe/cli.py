from __future__ import annotations

import argparse
import csv
import logging
import sys

from .exceptions import BoardFormatError
from .game import play
from .game_basics import Cell, parse_board, serialize_board
from .render import render_board
from .state import from_board, new_game


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Two-player tic-tac-toe on the console")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--first",
        choices=["X", "O"],
        default="X",
        help="Mark that moves first in an interactive game (default: X)",
    )

    p_an = sub.add_parser("analyze", help="Classify a board (9 chars of X/O/_, e.g. XXXOO__O_)")
    p_an.add_argument("--board", help="Board string, e.g., XXXOO__O_ (omit with --stdin)")
    p_an.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    return p


def _analyze_stream(stdin, stdout) -> int:
    w = csv.writer(stdout)
    w.writerow(["board", "status"])
    for lineno, line in enumerate(stdin, start=1):
        raw = line.rstrip("\r\n")
        if not raw.strip():
            continue
        try:
            board = parse_board(raw)
        except BoardFormatError as e:
            logging.warning("line %d skipped: %s", lineno, e)
            continue
        w.writerow([serialize_board(board), from_board(board).status.label])
    return 0


def _analyze_one(raw: str) -> int:
    try:
        state = from_board(parse_board(raw))
    except BoardFormatError as e:
        logging.error("%s", e)
        return 2
    for line in render_board(state.board):
        print(line)
    print(state.status.label)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import PackageNotFoundError, version as _ver

            print(_ver("simple-tictactoe"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    if ns.cmd == "analyze":
        if ns.stdin:
            return _analyze_stream(sys.stdin, sys.stdout)
        if ns.board is None:
            logging.error("Provide --board or --stdin.")
            return 2
        return _analyze_one(ns.board)

    try:
        play(input, print, new_game(first=Cell[ns.first]))
    except (EOFError, KeyboardInterrupt):
        logging.warning("Input closed before the game finished.")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
