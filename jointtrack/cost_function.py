"""Cost function descriptions and their typed, named parameters."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Union

Value = Union[float, int, bool]


class Stage(Enum):
    """Stage of the DIRECT optimizer a cost function serves."""

    TRUNK = "trunk"
    BRANCH = "branch"
    LEAF = "leaf"


class SearchStageFlag(IntEnum):
    """Numeric flag for the current search stage."""

    TRUNK = 0
    BRANCH = 1
    LEAF = 2


class ParameterKind(Enum):
    """Value type of a cost function parameter."""

    DOUBLE = "DOUBLE"
    INT = "INT"
    BOOL = "BOOL"

    def coerce(self, value: Value) -> Value:
        """Convert ``value`` to what a parameter of this kind stores."""
        if self is ParameterKind.DOUBLE:
            # Double parameters are held with integer precision.
            return float(int(value))
        if self is ParameterKind.INT:
            return int(value)
        return bool(value)


@dataclass
class Parameter:
    """A named parameter with a value of one kind."""

    name: str = "Nameless Parameter"
    value: Value = 0
    kind: ParameterKind = ParameterKind.DOUBLE

    def __post_init__(self) -> None:
        self.kind = ParameterKind(self.kind)
        self.value = self.kind.coerce(self.value)

    def set_value(self, value: Value) -> None:
        self.value = self.kind.coerce(value)


class CostFunction:
    """A named cost function and its parameters, grouped by kind."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._parameters: dict[ParameterKind, list[Parameter]] = {
            kind: [] for kind in ParameterKind
        }

    def __repr__(self) -> str:
        return f"CostFunction(name={self.name!r})"

    def add_parameter(self, parameter: Parameter) -> None:
        """Store a copy of ``parameter`` under its kind."""
        self._parameters[parameter.kind].append(replace(parameter))

    def _find(self, name: str, kind: ParameterKind) -> Parameter:
        kind = ParameterKind(kind)
        for parameter in self._parameters[kind]:
            if parameter.name == name:
                return parameter
        raise KeyError(f"no {kind.value} parameter named {name!r} in {self.name!r}")

    def set_value(self, name: str, kind: ParameterKind, value: Value) -> None:
        """Set a parameter's value; KeyError if there is none of that name and kind."""
        self._find(name, kind).set_value(value)

    def get_value(self, name: str, kind: ParameterKind) -> Value:
        """Value of a parameter; KeyError if there is none of that name and kind."""
        return self._find(name, kind).value

    def parameters_of(self, kind: ParameterKind) -> list[Parameter]:
        """Copies of all parameters of ``kind`` in the order they were added."""
        return [replace(parameter) for parameter in self._parameters[ParameterKind(kind)]]