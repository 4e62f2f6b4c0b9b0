from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from falling_blocks.game import GameConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="falling-blocks")
    p.add_argument("--frontend", choices=["terminal", "pygame"], default="terminal")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--fps", type=int, default=20)
    p.add_argument("--log-file", type=str, default=None)
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING"], default="INFO")
    return p


def configure_logging(log_file: Optional[str], level: str) -> None:
    # The terminal belongs to curses while playing, so logs only go to a file
    if log_file is None:
        logging.getLogger("falling_blocks").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    try:
        config = GameConfig(width=args.width, height=args.height, random_seed=args.seed)
    except ValueError as exc:
        raise SystemExit(f"falling-blocks: {exc}")

    if args.frontend == "pygame":
        from falling_blocks.visualization.human_play import run
    else:
        from falling_blocks.visualization.terminal_play import run

    score = run(config, fps=args.fps)
    print(f"Game Over! Score: {score}")


if __name__ == "__main__":  # pragma: no cover
    main()
