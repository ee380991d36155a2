#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from autocuber.config import CoreConfig
from autocuber.host import init
from autocuber.sequence import MoveSequence


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply a move formula to a solved cube and print the unfolded net."
    )
    parser.add_argument("--formula", required=True, help="Moves in Singmaster notation, e.g. \"R U R' U'\"")
    parser.add_argument("--layers", type=int, help="Cube size (default: AUTOCUBER_LAYERS or 3)")
    parser.add_argument("--canonical", action="store_true", help="Simplify the formula before applying it")
    parser.add_argument("--inverse", action="store_true", help="Apply the inverse of the formula")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = CoreConfig.from_env()
        if args.layers is not None:
            config = CoreConfig(layers=args.layers, log_level=config.log_level)
        universe = init(config=config)

        sequence = MoveSequence.parse(args.formula, layers=config.layers)
        if args.inverse:
            sequence = sequence.inverse()
        if args.canonical:
            sequence = sequence.canonicalise()

        cube = universe.new_cube().perform_all(sequence)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(sequence.notation(config.layers))
    print(cube.render(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
