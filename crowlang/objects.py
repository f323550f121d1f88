"""Runtime values produced by the evaluator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class ObjectType(str, Enum):
    """The kind of a runtime value."""

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    RETURN_VALUE = "RETURN"

    def __str__(self) -> str:
        return self.value


class Object(ABC):
    """Any runtime value."""

    @property
    @abstractmethod
    def type(self) -> ObjectType:
        """The kind of this value."""

    @abstractmethod
    def inspect(self) -> str:
        """Return the value as the user sees it."""


@dataclass(frozen=True)
class Integer(Object):
    value: int

    @property
    def type(self) -> ObjectType:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean(Object):
    value: bool

    @property
    def type(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Null(Object):
    @property
    def type(self) -> ObjectType:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"


@dataclass(frozen=True)
class ReturnValue(Object):
    """A value on its way out of the enclosing blocks through ``return``."""

    value: Object | None

    @property
    def type(self) -> ObjectType:
        return ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        if self.value is None:
            raise ValueError("return value carries no object")
        return self.value.inspect()