from __future__ import annotations

import logging
import re
from collections import defaultdict
from dataclasses import dataclass, field
from itertools import groupby
from operator import attrgetter
from typing import Iterable, Iterator, Optional

from autocuber.formula import DEFAULT_LAYERS, Move
from autocuber.group import InverseSemigroup
from autocuber.models import Axis, RotationType

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(r"\S+")


@dataclass(frozen=True)
class MoveSequence(InverseSemigroup):
    """Moves in application order.

    Composition is free: ``a.op(b)`` means "do b, then a" and keeps every
    move. Use `canonicalise` to cancel and merge.
    """

    moves: tuple[Move, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "moves", tuple(self.moves))

    @classmethod
    def identity(cls) -> MoveSequence:
        return cls()

    @classmethod
    def parse(cls, formula: str, layers: int = DEFAULT_LAYERS) -> MoveSequence:
        moves = [
            Move.parse(match.group(), layers=layers, offset=match.start())
            for match in _TOKEN_PATTERN.finditer(formula)
        ]
        return cls(tuple(moves))

    def notation(self, layers: int = DEFAULT_LAYERS) -> str:
        return " ".join(move.notation(layers) for move in self.moves)

    def __str__(self) -> str:
        return self.notation()

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __add__(self, other: MoveSequence) -> MoveSequence:
        if not isinstance(other, MoveSequence):
            return NotImplemented
        return MoveSequence(self.moves + other.moves)

    def op(self, other: MoveSequence) -> MoveSequence:
        return MoveSequence(other.moves + self.moves)

    def inverse(self) -> MoveSequence:
        return MoveSequence(tuple(move.inverse() for move in reversed(self.moves)))

    def repeat(self, count: int) -> MoveSequence:
        if count < 0:
            raise ValueError("repeat must be >= 0")
        return MoveSequence(self.moves * count)

    def canonicalise(self) -> MoveSequence:
        """Shortest equivalent sequence, merging moves that share an axis.

        Moves on one axis commute, so each run of same-axis moves is replaced
        by one move per block of adjacent layers turned by the same amount.
        Moves are never reordered across an axis change.
        """
        runs: list[list[Move]] = []
        for axis, group in groupby(self.moves, key=attrgetter("axis")):
            run = list(group)
            # A run that cancelled out can leave two runs on one axis adjacent.
            if runs and runs[-1][0].axis is axis:
                run = runs.pop() + run
            reduced = _canonicalise_axis_run(axis, run)
            if reduced:
                runs.append(reduced)

        result = MoveSequence(tuple(move for run in runs for move in run))
        if len(result) != len(self):
            logger.debug("Canonicalised %d moves into %d", len(self), len(result))
        return result


def _canonicalise_axis_run(axis: Axis, moves: Iterable[Move]) -> list[Move]:
    turns_by_layer: defaultdict[int, int] = defaultdict(int)
    for move in moves:
        for layer in move.depths:
            turns_by_layer[layer] += move.rotation_type.rotations()

    result: list[Move] = []
    block_start: Optional[int] = None
    next_layer = 0
    block_rotation: Optional[RotationType] = None

    def flush() -> None:
        if block_start is not None and block_rotation is not None:
            result.append(
                Move(
                    axis=axis,
                    rotation_type=block_rotation,
                    start_depth=block_start,
                    end_depth=next_layer,
                )
            )

    for layer in sorted(turns_by_layer):
        rotation = RotationType.from_rotations(turns_by_layer[layer])
        if block_start is not None and layer == next_layer and rotation is block_rotation:
            next_layer += 1
            continue
        flush()
        block_start, next_layer, block_rotation = layer, layer + 1, rotation
    flush()

    return result
