from autocuber.config import CoreConfig
from autocuber.formula import FormulaSyntaxError, Move
from autocuber.group import CyclicGroup, Enumerable, InverseSemigroup, Magma, Semigroup
from autocuber.host import DiagnosticSink, SinkHandler, Universe, init
from autocuber.models import Axis, Colour, FaceType, NotationError, RotationType
from autocuber.pieces import CornerType, EdgeType
from autocuber.records import MoveRecord, moves_from_records, moves_to_records
from autocuber.sequence import MoveSequence
from autocuber.state import Cube, Face, FaceSegment, InvalidMoveError

__all__ = [
    "Axis",
    "Colour",
    "CoreConfig",
    "CornerType",
    "Cube",
    "CyclicGroup",
    "DiagnosticSink",
    "EdgeType",
    "Enumerable",
    "Face",
    "FaceSegment",
    "FaceType",
    "FormulaSyntaxError",
    "InvalidMoveError",
    "InverseSemigroup",
    "Magma",
    "Move",
    "MoveRecord",
    "MoveSequence",
    "NotationError",
    "RotationType",
    "Semigroup",
    "SinkHandler",
    "Universe",
    "init",
    "moves_from_records",
    "moves_to_records",
]
