"""Wire-level data: operators, instruction kinds and the JSON shapes of requests and replies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class Operator(str, Enum):
    """Arithmetic operators a ``calc`` instruction may use."""

    ADD = "+"
    SUB = "-"
    MUL = "*"


class InstructionType(str, Enum):
    """Kinds of instruction a request may hold."""

    CALCULATE = "calc"
    PRINT = "print"


_STRING_FIELDS = (("type", "type"), ("variable", "var"), ("operator", "op"))


@dataclass
class Instruction:
    """One instruction as it arrives from a client.

    ``left`` and ``right`` hold whatever the client sent: a number,
    a variable name, or nothing at all.
    """

    type: str = ""
    variable: str = ""
    operator: str = ""
    left: Any = None
    right: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Instruction":
        """Build an instruction from its JSON object form.

        Missing keys take their empty defaults. Raises ``TypeError`` when
        ``data`` is not an object or a textual field is not a string.
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                f"instruction must be a JSON object, got {type(data).__name__}"
            )
        fields: dict[str, Any] = {}
        for attr, key in _STRING_FIELDS:
            value = data.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise TypeError(
                    f"field '{key}' must be a string, got {type(value).__name__}"
                )
            fields[attr] = value
        return cls(left=data.get("left"), right=data.get("right"), **fields)


@dataclass(frozen=True)
class VarValue:
    """A printed variable and its computed value."""

    var: str
    value: int

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return {"var": self.var, "value": self.value}