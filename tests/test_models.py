from __future__ import annotations

import pytest

from autocuber.models import Axis, Colour, FaceType, NotationError, RotationType


def test_face_order_and_solved_colours() -> None:
    assert [face.value for face in FaceType.enumerate()] == ["F", "R", "U", "B", "L", "D"]
    assert [face.colour.letter for face in FaceType.enumerate()] == ["g", "r", "w", "b", "o", "y"]


def test_colour_face_mapping_is_bijective() -> None:
    for face in FaceType:
        assert FaceType.from_colour(face.colour) is face
    assert {face.colour for face in FaceType} == set(Colour)


def test_face_parse_and_display() -> None:
    assert FaceType.parse("U") is FaceType.U
    assert str(FaceType.L) == "L"
    with pytest.raises(NotationError):
        FaceType.parse("X")
    with pytest.raises(NotationError):
        FaceType.parse("u")


def test_axis_parse_and_faces() -> None:
    assert Axis.parse("RL") is Axis.RL
    assert Axis.UD.positive_face is FaceType.U
    assert Axis.UD.negative_face is FaceType.D
    assert FaceType.B.axis is Axis.FB
    assert FaceType.L.opposite is FaceType.R
    with pytest.raises(NotationError):
        Axis.parse("LR")


def test_axis_ordering_follows_declaration() -> None:
    assert sorted([Axis.UD, Axis.FB, Axis.RL]) == [Axis.FB, Axis.RL, Axis.UD]


def test_rotation_inverse_and_counts() -> None:
    assert RotationType.NORMAL.inverse() is RotationType.INVERSE
    assert RotationType.INVERSE.inverse() is RotationType.NORMAL
    assert RotationType.DOUBLE.inverse() is RotationType.DOUBLE
    assert [rotation.rotations() for rotation in RotationType] == [1, 2, -1]
    assert [str(rotation) for rotation in RotationType] == ["", "2", "'"]


def test_from_rotations_fixed_points() -> None:
    assert RotationType.from_rotations(0) is None
    assert RotationType.from_rotations(4) is None
    assert RotationType.from_rotations(-1) is RotationType.INVERSE
    assert RotationType.from_rotations(1) is RotationType.NORMAL
    assert RotationType.from_rotations(2) is RotationType.DOUBLE
    assert RotationType.from_rotations(-2) is RotationType.DOUBLE
    assert RotationType.from_rotations(3) is RotationType.INVERSE


@pytest.mark.parametrize("n", range(-9, 10))
def test_from_rotations_has_period_four(n: int) -> None:
    assert RotationType.from_rotations(n) is RotationType.from_rotations(n + 4)


@pytest.mark.parametrize("rotation", list(RotationType))
def test_from_rotations_inverts_rotations(rotation: RotationType) -> None:
    assert RotationType.from_rotations(rotation.rotations()) is rotation
    assert RotationType.from_rotations(rotation.rotations() + rotation.inverse().rotations()) is None
