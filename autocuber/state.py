from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Mapping, Optional, Sequence

import numpy as np

from autocuber.formula import Move
from autocuber.models import Axis, Colour, FaceType, RotationType
from autocuber.sequence import MoveSequence

logger = logging.getLogger(__name__)

F, R, U, B, L, D = (FaceType.F, FaceType.R, FaceType.U, FaceType.B, FaceType.L, FaceType.D)

_NET_MIDDLE_ROW = (L, F, R, B)


class InvalidMoveError(ValueError):
    """Raised when a move's depth range does not fit the cube."""


class FaceSegment(Enum):
    TOP = "Top"
    RIGHT = "Right"
    BOTTOM = "Bottom"
    LEFT = "Left"

    @property
    def clockwise(self) -> bool:
        """True if the line index grows when going clockwise around the face."""
        return self in (FaceSegment.TOP, FaceSegment.RIGHT)

    def line_index(self, depth: int, size: int) -> tuple:
        far = size - 1 - depth
        if self is FaceSegment.TOP:
            return np.s_[depth, :]
        if self is FaceSegment.RIGHT:
            return np.s_[:, far]
        if self is FaceSegment.BOTTOM:
            return np.s_[far, :]
        return np.s_[:, depth]


TOP, RIGHT, BOTTOM, LEFT = (
    FaceSegment.TOP,
    FaceSegment.RIGHT,
    FaceSegment.BOTTOM,
    FaceSegment.LEFT,
)


class Face:
    """N×N stickers of one face, row 0 being the top edge seen head-on.

    Stored as a read-only array of colour indices.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: np.ndarray) -> None:
        grid = np.array(grid, dtype=np.uint8)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.shape[0] == 0:
            raise ValueError(f"Face grid must be a non-empty square, got shape {grid.shape}")
        if grid.max() >= Colour.count():
            raise ValueError("Face grid contains an unknown colour index")
        grid.setflags(write=False)
        self._grid = grid

    @classmethod
    def solved(cls, face_type: FaceType, size: int) -> Face:
        if size < 1:
            raise ValueError("Face size must be >= 1")
        return cls(np.full((size, size), face_type.colour.index(), dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Colour]]) -> Face:
        return cls(np.array([[colour.index() for colour in row] for row in rows], dtype=np.uint8))

    @property
    def size(self) -> int:
        return self._grid.shape[0]

    def _check_line(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"Line {index} out of range for a {self.size}x{self.size} face")

    def _colours(self, line: np.ndarray) -> tuple[Colour, ...]:
        return tuple(Colour.from_index(int(value)) for value in line)

    def __getitem__(self, position: tuple[int, int]) -> Colour:
        row, col = position
        self._check_line(row)
        self._check_line(col)
        return Colour.from_index(int(self._grid[row, col]))

    def rows(self) -> tuple[tuple[Colour, ...], ...]:
        return tuple(self._colours(line) for line in self._grid)

    def row(self, row: int) -> tuple[Colour, ...]:
        self._check_line(row)
        return self._colours(self._grid[row, :])

    def row_rev(self, row: int) -> tuple[Colour, ...]:
        self._check_line(row)
        return self._colours(self._grid[row, ::-1])

    def col(self, col: int) -> tuple[Colour, ...]:
        self._check_line(col)
        return self._colours(self._grid[:, col])

    def col_rev(self, col: int) -> tuple[Colour, ...]:
        self._check_line(col)
        return self._colours(self._grid[::-1, col])

    def is_uniform(self) -> bool:
        return bool(np.all(self._grid == self._grid[0, 0]))

    def rotate_cw(self) -> Face:
        return Face(np.rot90(self._grid, k=-1))

    def rotate_ccw(self) -> Face:
        return Face(np.rot90(self._grid, k=1))

    def rotate_double(self) -> Face:
        return Face(np.rot90(self._grid, k=2))

    def rotate(self, rotation_type: RotationType) -> Face:
        if rotation_type is RotationType.NORMAL:
            return self.rotate_cw()
        if rotation_type is RotationType.INVERSE:
            return self.rotate_ccw()
        return self.rotate_double()

    def overwrite_from(
        self,
        start_depth: int,
        end_depth: int,
        target_segment: FaceSegment,
        source: Face,
        source_segment: FaceSegment,
    ) -> Face:
        """Copy of this face with the `target_segment` lines at each depth
        replaced by `source`'s `source_segment` lines.

        A line is reversed on the way over when the two segments run in
        opposite senses around their faces.
        """
        size = self.size
        if source.size != size:
            raise ValueError(f"Cannot copy a {source.size}-wide line onto a {size}-wide face")
        if not 0 <= start_depth <= end_depth <= size:
            raise IndexError(f"Depth range [{start_depth}, {end_depth}) out of range for size {size}")

        reverse = source_segment.clockwise != target_segment.clockwise
        grid = self._grid.copy()
        for depth in range(start_depth, end_depth):
            line = source._grid[source_segment.line_index(depth, size)]
            grid[target_segment.line_index(depth, size)] = line[::-1] if reverse else line
        return Face(grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return np.array_equal(self._grid, other._grid)

    def __hash__(self) -> int:
        return hash((self._grid.shape, self._grid.tobytes()))

    def __repr__(self) -> str:
        letters = ["".join(colour.letter for colour in row) for row in self.rows()]
        return f"Face({'/'.join(letters)})"


# (target, target segment, source, source segment) for the four side faces.
# The perpendicular faces turn as wholes and are handled in Cube.perform.
_SIDE_TRANSFERS: dict[
    tuple[Axis, RotationType], tuple[tuple[FaceType, FaceSegment, FaceType, FaceSegment], ...]
] = {
    (Axis.FB, RotationType.NORMAL): (
        (R, LEFT, U, BOTTOM),
        (U, BOTTOM, L, RIGHT),
        (L, RIGHT, D, TOP),
        (D, TOP, R, LEFT),
    ),
    (Axis.FB, RotationType.DOUBLE): (
        (R, LEFT, L, RIGHT),
        (U, BOTTOM, D, TOP),
        (L, RIGHT, R, LEFT),
        (D, TOP, U, BOTTOM),
    ),
    (Axis.FB, RotationType.INVERSE): (
        (R, LEFT, D, TOP),
        (U, BOTTOM, R, LEFT),
        (L, RIGHT, U, BOTTOM),
        (D, TOP, L, RIGHT),
    ),
    (Axis.RL, RotationType.NORMAL): (
        (F, RIGHT, D, RIGHT),
        (U, RIGHT, F, RIGHT),
        (B, LEFT, U, RIGHT),
        (D, RIGHT, B, LEFT),
    ),
    (Axis.RL, RotationType.DOUBLE): (
        (F, RIGHT, B, LEFT),
        (U, RIGHT, D, RIGHT),
        (B, LEFT, F, RIGHT),
        (D, RIGHT, U, RIGHT),
    ),
    (Axis.RL, RotationType.INVERSE): (
        (F, RIGHT, U, RIGHT),
        (U, RIGHT, B, LEFT),
        (B, LEFT, D, RIGHT),
        (D, RIGHT, F, RIGHT),
    ),
    (Axis.UD, RotationType.NORMAL): (
        (F, TOP, R, TOP),
        (R, TOP, B, TOP),
        (B, TOP, L, TOP),
        (L, TOP, F, TOP),
    ),
    (Axis.UD, RotationType.DOUBLE): (
        (F, TOP, B, TOP),
        (R, TOP, L, TOP),
        (B, TOP, F, TOP),
        (L, TOP, R, TOP),
    ),
    (Axis.UD, RotationType.INVERSE): (
        (F, TOP, L, TOP),
        (R, TOP, F, TOP),
        (B, TOP, R, TOP),
        (L, TOP, B, TOP),
    ),
}


class Cube:
    """Six faces of an N×N cube, indexed by FaceType.

    Only the shape is validated; sticker counts per colour are not checked.
    """

    __slots__ = ("_faces",)

    def __init__(self, faces: Mapping[FaceType, Face]) -> None:
        missing = [face_type.value for face_type in FaceType if face_type not in faces]
        if missing or len(faces) != FaceType.count():
            raise ValueError(f"Cube needs exactly six faces (missing: {','.join(missing) or '-'})")
        sizes = {faces[face_type].size for face_type in FaceType}
        if len(sizes) != 1:
            raise ValueError(f"Cube faces must all be the same size, got {sorted(sizes)}")
        self._faces = tuple(faces[face_type] for face_type in FaceType.enumerate())

    @classmethod
    def solved(cls, size: int = 3) -> Cube:
        return cls({face_type: Face.solved(face_type, size) for face_type in FaceType})

    @property
    def size(self) -> int:
        return self._faces[0].size

    def face(self, face_type: FaceType) -> Face:
        return self._faces[face_type.index()]

    def faces(self) -> dict[FaceType, Face]:
        return dict(zip(FaceType.enumerate(), self._faces))

    def is_solved(self) -> bool:
        return all(face.is_uniform() for face in self._faces)

    def validate_move(self, move: Move) -> None:
        if not 0 <= move.start_depth < move.end_depth <= self.size:
            logger.debug("Rejected move %r on a %d-layer cube", move, self.size)
            raise InvalidMoveError(
                f"Depth range [{move.start_depth}, {move.end_depth}) "
                f"is not valid for a {self.size}-layer cube"
            )

    def perform(self, move: Move) -> Cube:
        self.validate_move(move)

        faces = self.faces()
        turned = dict(faces)
        positive = move.axis.positive_face
        negative = move.axis.negative_face
        # A turn seen clockwise from one side is anticlockwise from the other.
        if move.start_depth == 0:
            turned[positive] = faces[positive].rotate(move.rotation_type)
        if move.end_depth == self.size:
            turned[negative] = faces[negative].rotate(move.rotation_type.inverse())

        for target, target_segment, source, source_segment in _SIDE_TRANSFERS[
            (move.axis, move.rotation_type)
        ]:
            turned[target] = faces[target].overwrite_from(
                move.start_depth,
                move.end_depth,
                target_segment,
                faces[source],
                source_segment,
            )
        return Cube(turned)

    def perform_all(self, moves: Iterable[Move]) -> Cube:
        cube = self
        for move in moves:
            cube = cube.perform(move)
        return cube

    def apply(self, formula: str, layers: Optional[int] = None) -> Cube:
        sequence = MoveSequence.parse(formula, layers=self.size if layers is None else layers)
        return self.perform_all(sequence)

    def render(self) -> str:
        size = self.size
        padding = "  " * size
        lines: list[str] = []

        for i in range(size):
            lines.append(padding + _render_line(self.face(U).row(i)))
        for i in range(size):
            lines.append(
                "".join(_render_line(self.face(face_type).row(i)) for face_type in _NET_MIDDLE_ROW)
            )
        for i in range(size):
            lines.append(padding + _render_line(self.face(D).row(i)))

        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self._faces == other._faces

    def __hash__(self) -> int:
        return hash(self._faces)

    def __repr__(self) -> str:
        return f"Cube(size={self.size}, solved={self.is_solved()})"


def _render_line(colours: Iterable[Colour]) -> str:
    return "".join(f"{colour.letter} " for colour in colours)
