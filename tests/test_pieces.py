from __future__ import annotations

import itertools

import pytest

from autocuber.group import CyclicGroup
from autocuber.models import FaceType, NotationError
from autocuber.pieces import CornerType, EdgeType

F, R, U, B, L, D = (FaceType.F, FaceType.R, FaceType.U, FaceType.B, FaceType.L, FaceType.D)


def test_edge_from_faces_tracks_parity() -> None:
    assert EdgeType.from_faces(U, R) == (EdgeType.UR, CyclicGroup(2, 0))
    assert EdgeType.from_faces(R, U) == (EdgeType.UR, CyclicGroup(2, 1))
    assert EdgeType.from_faces(F, L) == (EdgeType.FL, 0)
    assert EdgeType.from_faces(L, F) == (EdgeType.FL, 1)


def test_edge_from_faces_ordered_requires_key_sticker_first() -> None:
    assert EdgeType.from_faces_ordered(D, B) is EdgeType.DB
    assert EdgeType.from_faces_ordered(B, D) is None


def test_edge_from_faces_rejects_non_adjacent_faces() -> None:
    assert EdgeType.from_faces(U, D) is None
    assert EdgeType.from_faces(F, F) is None


def test_every_adjacent_face_pair_names_one_edge() -> None:
    seen: dict[EdgeType, list[int]] = {}
    for f1, f2 in itertools.permutations(FaceType, 2):
        if f1.opposite is f2:
            continue
        edge, parity = EdgeType.from_faces(f1, f2)
        seen.setdefault(edge, []).append(int(parity))
    assert set(seen) == set(EdgeType)
    assert all(sorted(parities) == [0, 1] for parities in seen.values())


def test_edge_parse_and_display() -> None:
    assert EdgeType.parse("BR") is EdgeType.BR
    assert str(EdgeType.DF) == "DF"
    assert EdgeType.UL.faces == (U, L)
    with pytest.raises(NotationError):
        EdgeType.parse("RU")


def test_corner_from_faces_ordered() -> None:
    assert CornerType.from_faces_ordered(F, U, R) is CornerType.FUR
    assert CornerType.from_faces_ordered(B, D, L) is CornerType.BDL
    assert CornerType.from_faces_ordered(U, F, R) is None
    assert CornerType.from_faces_ordered(F, B, R) is None


def test_corner_faces_follow_axis_order() -> None:
    for corner in CornerType:
        fb, ud, rl = corner.faces
        assert fb in (F, B)
        assert ud in (U, D)
        assert rl in (R, L)
        assert CornerType.from_faces_ordered(fb, ud, rl) is corner


def test_corner_parse_and_display() -> None:
    assert CornerType.parse("BUL") is CornerType.BUL
    assert str(CornerType.FDR) == "FDR"
    with pytest.raises(NotationError):
        CornerType.parse("URF")
