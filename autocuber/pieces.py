from __future__ import annotations

from enum import Enum
from typing import Optional

from autocuber.group import CyclicGroup, Enumerable
from autocuber.models import FaceType, NotationError

F, R, U, B, L, D = (FaceType.F, FaceType.R, FaceType.U, FaceType.B, FaceType.L, FaceType.D)


class EdgeType(Enumerable, Enum):
    """One of the twelve edge pieces.

    The name lists the key sticker's face first.
    """

    UR = "UR"
    UF = "UF"
    UL = "UL"
    UB = "UB"
    DR = "DR"
    DF = "DF"
    DL = "DL"
    DB = "DB"
    FR = "FR"
    FL = "FL"
    BR = "BR"
    BL = "BL"

    @classmethod
    def parse(cls, text: str) -> EdgeType:
        try:
            return cls(text)
        except ValueError:
            raise NotationError(f"Unknown edge '{text}'") from None

    def __str__(self) -> str:
        return self.value

    @property
    def faces(self) -> tuple[FaceType, FaceType]:
        return FaceType(self.value[0]), FaceType(self.value[1])

    @classmethod
    def from_faces_ordered(cls, f1: FaceType, f2: FaceType) -> Optional[EdgeType]:
        """Only matches when `f1` is the key sticker's face."""
        return _EDGES_BY_FACES.get((f1, f2))

    @classmethod
    def from_faces(
        cls, f1: FaceType, f2: FaceType
    ) -> Optional[tuple[EdgeType, CyclicGroup]]:
        """Edge at the intersection of two faces, with its parity.

        Parity is 1 when the faces are given in reverse key-sticker order.
        """
        edge = cls.from_faces_ordered(f1, f2)
        if edge is not None:
            return edge, CyclicGroup(2, 0)
        edge = cls.from_faces_ordered(f2, f1)
        if edge is not None:
            return edge, CyclicGroup(2, 1)
        return None


_EDGES_BY_FACES = {edge.faces: edge for edge in EdgeType}


class CornerType(Enumerable, Enum):
    """One of the eight corner pieces, named by its FB, UD and RL faces."""

    FUR = "FUR"
    FUL = "FUL"
    FDR = "FDR"
    FDL = "FDL"
    BUR = "BUR"
    BUL = "BUL"
    BDR = "BDR"
    BDL = "BDL"

    @classmethod
    def parse(cls, text: str) -> CornerType:
        try:
            return cls(text)
        except ValueError:
            raise NotationError(f"Unknown corner '{text}'") from None

    def __str__(self) -> str:
        return self.value

    @property
    def faces(self) -> tuple[FaceType, FaceType, FaceType]:
        return FaceType(self.value[0]), FaceType(self.value[1]), FaceType(self.value[2])

    @classmethod
    def from_faces_ordered(
        cls, f1: FaceType, f2: FaceType, f3: FaceType
    ) -> Optional[CornerType]:
        """Faces must be given in FB, UD, RL order."""
        return _CORNERS_BY_FACES.get((f1, f2, f3))


_CORNERS_BY_FACES = {corner.faces: corner for corner in CornerType}
