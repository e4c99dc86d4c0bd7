"""Evaluates ready expressions, alone or as a worker pulling jobs from a queue."""

from __future__ import annotations

import operator
import queue
import threading
import time
from typing import Callable, Optional

from .dto import Operator
from .model import Expression, KeyValuePair

_POLL_INTERVAL = 0.01

_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    Operator.ADD.value: operator.add,
    Operator.SUB.value: operator.sub,
    Operator.MUL.value: operator.mul,
}


def _as_number(operand: object) -> int:
    return operand if isinstance(operand, int) else 0


class Calculator:
    """Computes expressions, pausing ``delay`` seconds before each one."""

    def __init__(self, delay: float = 0.0) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.delay = delay

    def perform(self, expression: Expression) -> int:
        """Return the value of ``expression``.

        Operands that are still variable names count as zero and an
        unknown operator yields zero.
        """
        time.sleep(self.delay)
        operation = _OPERATIONS.get(expression.operator)
        if operation is None:
            return 0
        return operation(_as_number(expression.left), _as_number(expression.right))

    def worker(
        self,
        jobs: "queue.Queue[Optional[Expression]]",
        results: "queue.Queue[KeyValuePair]",
        cancelled: threading.Event,
    ) -> None:
        """Compute expressions from ``jobs`` and put their results on ``results``.

        Returns when ``cancelled`` is set or when ``None`` is taken from
        ``jobs``; the ``None`` is put back so that sibling workers stop too.
        A result computed after cancellation is dropped.
        """
        while not cancelled.is_set():
            try:
                expression = jobs.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                continue
            if expression is None:
                jobs.put(None)
                return
            value = self.perform(expression)
            if cancelled.is_set():
                return
            results.put(KeyValuePair(key=expression.variable, value=value))