from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from autocuber.formula import Move
from autocuber.models import Axis, RotationType
from autocuber.sequence import MoveSequence


class MoveRecord(BaseModel):
    """Host-side shape of a move, e.g. ``{"axis": "RL", "rotationType": "Normal", ...}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    axis: Axis
    rotation_type: RotationType = Field(alias="rotationType")
    start_depth: int = Field(alias="startDepth", ge=0)
    end_depth: int = Field(alias="endDepth", ge=0)

    @field_validator("axis", mode="before")
    @classmethod
    def _parse_axis(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Axis.parse(value.strip().upper())
        return value

    @field_validator("rotation_type", mode="before")
    @classmethod
    def _parse_rotation(cls, value: Any) -> Any:
        if isinstance(value, str):
            normalized = value.strip().capitalize()
            for rotation_type in RotationType:
                if rotation_type.value == normalized:
                    return rotation_type
            raise ValueError(f"Unknown rotation type '{value}'")
        return value

    @field_serializer("axis", "rotation_type")
    def _serialize_enum(self, value: Axis | RotationType) -> str:
        return value.value

    @classmethod
    def from_move(cls, move: Move) -> MoveRecord:
        return cls(
            axis=move.axis,
            rotation_type=move.rotation_type,
            start_depth=move.start_depth,
            end_depth=move.end_depth,
        )

    def to_move(self) -> Move:
        return Move(
            axis=self.axis,
            rotation_type=self.rotation_type,
            start_depth=self.start_depth,
            end_depth=self.end_depth,
        )


def moves_to_records(moves: Iterable[Move]) -> list[dict[str, Any]]:
    return [MoveRecord.from_move(move).model_dump(by_alias=True) for move in moves]


def moves_from_records(records: Iterable[Mapping[str, Any]]) -> MoveSequence:
    return MoveSequence(tuple(MoveRecord.model_validate(record).to_move() for record in records))
