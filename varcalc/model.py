"""Computation model: expressions over numbers and variables, and their results."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

Operand = Union[int, str]


@dataclass(frozen=True)
class KeyValuePair:
    """A computed variable and its value."""

    key: str
    value: int


def _check_operand(side: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(
            f"{side} operand must be int or str, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Expression:
    """``variable = left operator right`` where each operand is a number or a variable name."""

    operator: str
    variable: str
    left: Operand
    right: Operand

    def __post_init__(self) -> None:
        _check_operand("left", self.left)
        _check_operand("right", self.right)

    def is_ready(self) -> bool:
        """True when both operands are numbers, so the expression can be computed."""
        return isinstance(self.left, int) and isinstance(self.right, int)

    def dependencies(self) -> tuple[str, ...]:
        """Names of the variables this expression still waits on, without repeats."""
        names = [op for op in (self.left, self.right) if isinstance(op, str)]
        return tuple(dict.fromkeys(names))

    def substitute(self, result: KeyValuePair) -> "Expression":
        """Return the expression with every operand named ``result.key`` replaced by its value."""
        left = result.value if self.left == result.key else self.left
        right = result.value if self.right == result.key else self.right
        if left is self.left and right is self.right:
            return self
        return replace(self, left=left, right=right)