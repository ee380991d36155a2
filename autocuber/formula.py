from __future__ import annotations

from dataclasses import dataclass, replace

from autocuber.models import Axis, FaceType, NotationError, RotationType

DEFAULT_LAYERS = 3

_SLICE_FACES = {
    "M": FaceType.L,
    "E": FaceType.D,
    "S": FaceType.F,
}
_FACE_LETTERS = set("FRUBLD")
_WIDE_LETTERS = set("frubld")


class FormulaSyntaxError(NotationError):
    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at index {position}")
        self.position = position


@dataclass(frozen=True, order=True)
class Move:
    """Turn of the layers `[start_depth, end_depth)` about `axis`.

    Depth 0 is the layer next to the axis's positive face (F, R or U).
    """

    axis: Axis
    rotation_type: RotationType
    start_depth: int
    end_depth: int

    def inverse(self) -> Move:
        return replace(self, rotation_type=self.rotation_type.inverse())

    @property
    def depths(self) -> range:
        return range(self.start_depth, self.end_depth)

    @classmethod
    def parse(cls, token: str, layers: int = DEFAULT_LAYERS, offset: int = 0) -> Move:
        """Parses one notation token such as ``R``, ``Uw2``, ``r'`` or ``M``.

        `offset` is the token's index in a longer formula, used in errors.
        """
        if not token:
            raise FormulaSyntaxError("Empty move token", offset)

        letter = token[0]
        if letter in _SLICE_FACES:
            face = _SLICE_FACES[letter]
            start_depth, end_depth = 1, 2
        elif letter in _FACE_LETTERS or letter in _WIDE_LETTERS:
            face = FaceType(letter.upper())
            start_depth = 0
            end_depth = 2 if letter in _WIDE_LETTERS else 1
        else:
            raise FormulaSyntaxError(f"Unknown move letter '{letter}'", offset)

        rotation_type = RotationType.NORMAL
        for index, modifier in enumerate(token[1:], start=1):
            if modifier == "w":
                end_depth = 2
            elif modifier == "2":
                rotation_type = RotationType.DOUBLE
            elif modifier == "'":
                # U2' is written interchangeably with U2.
                if rotation_type is not RotationType.DOUBLE:
                    rotation_type = RotationType.INVERSE
            else:
                raise FormulaSyntaxError(
                    f"Unknown modifier '{modifier}' in move '{token}'", offset + index
                )

        if end_depth > layers:
            raise FormulaSyntaxError(
                f"Move '{token}' needs at least {end_depth} layers, cube has {layers}",
                offset,
            )

        axis = face.axis
        if face is axis.negative_face:
            rotation_type = rotation_type.inverse()
            start_depth, end_depth = layers - end_depth, layers - start_depth

        return cls(
            axis=axis,
            rotation_type=rotation_type,
            start_depth=start_depth,
            end_depth=end_depth,
        )

    def notation(self, layers: int = DEFAULT_LAYERS) -> str:
        positive = self.axis.positive_face.value
        negative = self.axis.negative_face.value
        suffix = self.rotation_type.suffix
        inverse_suffix = self.rotation_type.inverse().suffix
        span = (self.start_depth, self.end_depth)

        if span == (0, 1):
            return f"{positive}{suffix}"
        if span == (layers - 1, layers):
            return f"{negative}{inverse_suffix}"
        if span == (0, 2):
            return f"{positive}w{suffix}"
        if span == (layers - 2, layers):
            return f"{negative}w{inverse_suffix}"
        if self.axis is Axis.FB and span == (1, 2):
            return f"S{suffix}"
        if self.axis is Axis.RL and span == (layers - 2, layers - 1):
            return f"M{inverse_suffix}"
        if self.axis is Axis.UD and span == (layers - 2, layers - 1):
            return f"E{inverse_suffix}"

        # No standard name for this depth range.
        return f"{self.axis.value}{self.start_depth}-{self.end_depth}{suffix}"

    def __str__(self) -> str:
        return self.notation()
