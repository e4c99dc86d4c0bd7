"""Runs a batch of instructions on a pool of calculator workers."""

from __future__ import annotations

import queue
import threading
from collections import defaultdict
from typing import Iterable, Optional

from .builder import ExpressionBuilder
from .calculator import Calculator
from .dto import Instruction
from .model import Expression, KeyValuePair


class ConcurrentProcessor:
    """Evaluates expressions concurrently, feeding each result to the expressions waiting on it."""

    def __init__(
        self, builder: ExpressionBuilder, calculator: Calculator, workers: int
    ) -> None:
        if workers < 1:
            raise ValueError("at least one worker is required")
        self.builder = builder
        self.calculator = calculator
        self.workers = workers

    def process(self, instructions: Iterable[Instruction]) -> list[KeyValuePair]:
        """Compute the batch and return the printed variables in completion order.

        Work stops as soon as every printed variable has a value, or when
        nothing more can be computed. Raises ``ValidationError`` for a
        malformed batch.
        """
        print_vars, expressions = self.builder.build(instructions)

        jobs: "queue.Queue[Optional[Expression]]" = queue.Queue()
        results: "queue.Queue[KeyValuePair]" = queue.Queue()
        cancelled = threading.Event()

        for _ in range(self.workers):
            threading.Thread(
                target=self.calculator.worker,
                args=(jobs, results, cancelled),
                daemon=True,
            ).start()

        pending = list(expressions)
        waiting: dict[str, list[int]] = defaultdict(list)
        in_flight = 0
        for index, expression in enumerate(pending):
            for name in expression.dependencies():
                waiting[name].append(index)
            if expression.is_ready():
                jobs.put(expression)
                in_flight += 1

        reported: list[KeyValuePair] = []
        seen: set[str] = set()
        try:
            while in_flight and not cancelled.is_set():
                result = results.get()
                in_flight -= 1

                if result.key in print_vars:
                    reported.append(result)
                    seen.add(result.key)
                if seen >= print_vars:
                    cancelled.set()

                for index in waiting.pop(result.key, ()):
                    updated = pending[index].substitute(result)
                    pending[index] = updated
                    if updated.is_ready() and not cancelled.is_set():
                        jobs.put(updated)
                        in_flight += 1
        finally:
            cancelled.set()
            jobs.put(None)

        return reported