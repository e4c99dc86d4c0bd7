"""Checks that an instruction is well formed before it is turned into an expression."""

from __future__ import annotations

from typing import Any

from .dto import Instruction, InstructionType, Operator


class ValidationError(ValueError):
    """An instruction is not well formed."""


def is_supported_operand(value: Any) -> bool:
    """True for operand values an instruction may carry: integers, floats and strings."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, str))


class Validator:
    """Validates instructions against the supported types and operators."""

    def __init__(self) -> None:
        self.operators = frozenset(op.value for op in Operator)

    def check(self, instruction: Instruction) -> None:
        """Raise ``ValidationError`` if ``instruction`` is not well formed."""
        if instruction.variable == "":
            raise ValidationError("both operands are required")

        kinds = {kind.value for kind in InstructionType}
        if instruction.type not in kinds:
            raise ValidationError("instruction type must be 'calc' or 'print'")

        if instruction.type != InstructionType.CALCULATE:
            return

        if instruction.operator not in self.operators:
            raise ValidationError(f"unsupported operator: '{instruction.operator}'")

        for side, operand in (("left", instruction.left), ("right", instruction.right)):
            if not is_supported_operand(operand):
                raise ValidationError(
                    f"unsupported {side} operand type: {type(operand).__name__} "
                    "(must be int or string)"
                )

        for operand in (instruction.left, instruction.right):
            if operand == "":
                raise ValidationError("both operands are required")