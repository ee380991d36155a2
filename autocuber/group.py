from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, TypeVar

T = TypeVar("T", bound="Magma")
E = TypeVar("E", bound="Enumerable")


class Enumerable:
    """Mixin for enums with a fixed, indexable domain.

    Index order is the declaration order of the enum members.
    """

    @classmethod
    def count(cls) -> int:
        return len(cls.enumerate())

    @classmethod
    def enumerate(cls: type[E]) -> tuple[E, ...]:
        return tuple(cls)  # type: ignore[call-overload]

    @classmethod
    def from_index(cls: type[E], idx: int) -> E:
        members = cls.enumerate()
        if not 0 <= idx < len(members):
            raise IndexError(f"{cls.__name__} index out of range: {idx}")
        return members[idx]

    def index(self) -> int:
        return type(self).enumerate().index(self)


class Magma(ABC):
    @abstractmethod
    def op(self: T, other: T) -> T:
        ...

    def __matmul__(self: T, other: T) -> T:
        return self.op(other)


class Semigroup(Magma):
    """A magma whose `op` is associative."""

    @classmethod
    def fold(cls, items: Iterable[T]) -> T:
        values = list(items)
        if not values:
            raise ValueError("Cannot fold an empty collection without an identity")
        return reduce(lambda acc, item: acc.op(item), values)


class InverseSemigroup(Semigroup):
    @abstractmethod
    def inverse(self: T) -> T:
        ...


@dataclass(frozen=True)
class CyclicGroup(InverseSemigroup):
    """Element of Z/order, written additively."""

    order: int
    value: int = 0

    def __post_init__(self) -> None:
        if self.order < 1:
            raise ValueError("Cyclic group order must be >= 1")
        object.__setattr__(self, "value", self.value % self.order)

    @classmethod
    def identity(cls, order: int) -> CyclicGroup:
        return cls(order, 0)

    def op(self, other: CyclicGroup) -> CyclicGroup:
        if other.order != self.order:
            raise ValueError(
                f"Cannot combine elements of Z/{self.order} and Z/{other.order}"
            )
        return CyclicGroup(self.order, self.value + other.value)

    def inverse(self) -> CyclicGroup:
        return CyclicGroup(self.order, -self.value)

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CyclicGroup):
            return self.order == other.order and self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other % self.order
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.order, self.value))
