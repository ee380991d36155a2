from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Optional

from autocuber.group import Enumerable


class NotationError(ValueError):
    """Raised when a face, piece, axis or move name cannot be parsed."""


class Colour(Enumerable, Enum):
    GREEN = "g"
    RED = "r"
    WHITE = "w"
    BLUE = "b"
    ORANGE = "o"
    YELLOW = "y"

    @property
    def letter(self) -> str:
        return self.value


class FaceType(Enumerable, Enum):
    """A face slot on the cube, in Singmaster notation."""

    F = "F"
    R = "R"
    U = "U"
    B = "B"
    L = "L"
    D = "D"

    @classmethod
    def parse(cls, text: str) -> FaceType:
        try:
            return cls(text)
        except ValueError:
            raise NotationError(f"Unknown face '{text}'") from None

    def __str__(self) -> str:
        return self.value

    @property
    def colour(self) -> Colour:
        return _FACE_TO_COLOUR[self]

    @classmethod
    def from_colour(cls, colour: Colour) -> FaceType:
        return _COLOUR_TO_FACE[colour]

    @property
    def axis(self) -> Axis:
        return _FACE_TO_AXIS[self]

    @property
    def opposite(self) -> FaceType:
        return _OPPOSITE_FACE[self]


_FACE_TO_COLOUR = {
    FaceType.F: Colour.GREEN,
    FaceType.R: Colour.RED,
    FaceType.U: Colour.WHITE,
    FaceType.B: Colour.BLUE,
    FaceType.L: Colour.ORANGE,
    FaceType.D: Colour.YELLOW,
}

_COLOUR_TO_FACE = {colour: face for face, colour in _FACE_TO_COLOUR.items()}

_OPPOSITE_FACE = {
    FaceType.F: FaceType.B,
    FaceType.B: FaceType.F,
    FaceType.R: FaceType.L,
    FaceType.L: FaceType.R,
    FaceType.U: FaceType.D,
    FaceType.D: FaceType.U,
}


@total_ordering
class Axis(Enumerable, Enum):
    FB = "FB"
    RL = "RL"
    UD = "UD"

    @classmethod
    def parse(cls, text: str) -> Axis:
        try:
            return cls(text)
        except ValueError:
            raise NotationError(f"Unknown axis '{text}'") from None

    def __str__(self) -> str:
        return self.value

    @property
    def positive_face(self) -> FaceType:
        return _AXIS_FACES[self][0]

    @property
    def negative_face(self) -> FaceType:
        return _AXIS_FACES[self][1]

    def __lt__(self, other: Axis) -> bool:
        if not isinstance(other, Axis):
            return NotImplemented
        return self.index() < other.index()


_AXIS_FACES = {
    Axis.FB: (FaceType.F, FaceType.B),
    Axis.RL: (FaceType.R, FaceType.L),
    Axis.UD: (FaceType.U, FaceType.D),
}

_FACE_TO_AXIS = {
    face: axis for axis, faces in _AXIS_FACES.items() for face in faces
}


@total_ordering
class RotationType(Enum):
    """Quarter-turn amount, seen from the positive face of the move's axis."""

    NORMAL = "Normal"
    DOUBLE = "Double"
    INVERSE = "Inverse"

    def inverse(self) -> RotationType:
        if self is RotationType.NORMAL:
            return RotationType.INVERSE
        if self is RotationType.INVERSE:
            return RotationType.NORMAL
        return RotationType.DOUBLE

    def rotations(self) -> int:
        return _ROTATION_COUNTS[self]

    @classmethod
    def from_rotations(cls, n: int) -> Optional[RotationType]:
        """Returns None when `n` quarter turns are a no-op."""
        return _ROTATIONS_BY_RESIDUE[n % 4]

    @property
    def suffix(self) -> str:
        return _ROTATION_SUFFIX[self]

    def __str__(self) -> str:
        return self.suffix

    def __lt__(self, other: RotationType) -> bool:
        if not isinstance(other, RotationType):
            return NotImplemented
        order = tuple(RotationType)
        return order.index(self) < order.index(other)


_ROTATION_COUNTS = {
    RotationType.NORMAL: 1,
    RotationType.DOUBLE: 2,
    RotationType.INVERSE: -1,
}

_ROTATIONS_BY_RESIDUE = {
    0: None,
    1: RotationType.NORMAL,
    2: RotationType.DOUBLE,
    3: RotationType.INVERSE,
}

_ROTATION_SUFFIX = {
    RotationType.NORMAL: "",
    RotationType.DOUBLE: "2",
    RotationType.INVERSE: "'",
}
