"""Turns validated instructions into expressions and the set of variables to print."""

from __future__ import annotations

from typing import Iterable

from .dto import Instruction, InstructionType
from .model import Expression
from .validator import Validator


def instruction_to_expression(instruction: Instruction) -> Expression:
    """Return the expression a ``calc`` instruction describes.

    Raises ``TypeError`` when an operand is neither an integer nor a name.
    """
    return Expression(
        operator=instruction.operator,
        variable=instruction.variable,
        left=instruction.left,
        right=instruction.right,
    )


class ExpressionBuilder:
    """Validates a batch of instructions and splits it into work and output."""

    def __init__(self, validator: Validator) -> None:
        self.validator = validator

    def build(
        self, instructions: Iterable[Instruction]
    ) -> tuple[set[str], list[Expression]]:
        """Return the variables to print and the expressions to compute.

        Every instruction is checked before any is converted, so one bad
        instruction rejects the whole batch with ``ValidationError``.
        """
        batch = list(instructions)
        for instruction in batch:
            self.validator.check(instruction)

        print_vars: set[str] = set()
        expressions: list[Expression] = []
        for instruction in batch:
            if instruction.type == InstructionType.CALCULATE:
                expressions.append(instruction_to_expression(instruction))
            elif instruction.type == InstructionType.PRINT:
                print_vars.add(instruction.variable)
        return print_vars, expressions