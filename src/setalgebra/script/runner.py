"""
Script runner for SetAlgebra.

Loads the definitions of a parsed script into a ``SetRegistry`` and
executes its commands one by one, rendering each result to an output
stream. Every command maps onto exactly one registry call. Failures are
reported per command and never abort the run.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, TextIO

from setalgebra.runtime.dataset import DataSet, format_element
from setalgebra.runtime.registry import BinaryOperation, SetRegistry
from setalgebra.script.reader import Command, Script
from setalgebra.utils.errors import SetAlgebraError
from setalgebra.utils.suggestions import suggest_similar

logger = logging.getLogger("setalgebra.script")


@dataclass(slots=True)
class RunResult:
    """Counts of commands executed by a run."""

    succeeded: int = 0
    failed: int = 0

    @property
    def ok(self) -> bool:
        return self.failed == 0


def _yes_no(value: bool) -> str:
    return "Yes ✅" if value else "No ❌"


class ScriptRunner:
    """
    Executes scripts against a registry of integer sets.

    Args:
        registry: Registry to load sets into (a fresh one by default)
        out: Stream for results (default stdout)
        err: Stream for error reports (default stderr)
    """

    def __init__(
        self,
        registry: Optional[SetRegistry[int]] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.registry: SetRegistry[int] = registry if registry is not None else SetRegistry()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

        # command -> (argument count, handler)
        self._handlers: dict[str, tuple[int, Callable[..., None]]] = {
            "print": (1, self._print),
            "issubset": (2, self._issubset),
            "isequal": (2, self._isequal),
            "size": (1, self._size),
            "powerset": (1, self._powerset),
            "cartesian": (2, self._cartesian),
        }
        for operation in BinaryOperation:
            self._handlers[operation.value] = (2, self._binary(operation.value))

    @property
    def command_names(self) -> list[str]:
        return list(self._handlers)

    def _emit(self, text: str) -> None:
        print(text, file=self.out)

    def _report(self, text: str) -> None:
        print(text, file=self.err)

    # -------------------------------------------------------------------------
    # Running
    # -------------------------------------------------------------------------

    def load(self, script: Script) -> None:
        """Register every set defined by the script."""
        for definition in script.definitions:
            data_set = DataSet(definition.name, definition.values)
            logger.debug(
                "Loaded set '%s' from line %d: %d declared, %d unique element(s)",
                definition.name,
                definition.line,
                definition.declared_count,
                data_set.size(),
            )
            self.registry.add_set(data_set)

    def run(self, script: Script) -> RunResult:
        """Load the script's sets and execute all of its commands."""
        self.load(script)
        result = RunResult()
        for command in script.commands:
            if self.execute(command):
                result.succeeded += 1
            else:
                result.failed += 1
        logger.info("Ran %d command(s), %d failed", result.succeeded + result.failed, result.failed)
        return result

    def execute(self, command: Command) -> bool:
        """
        Execute a single command.

        Returns:
            True if the command succeeded, False if it was reported as failed
        """
        entry = self._handlers.get(command.name)
        if entry is None:
            message = f"Unknown operation: {command.name}"
            hints = suggest_similar(command.name, self.command_names)
            if hints:
                message += f" (did you mean '{hints[0]}'?)"
            self._report(message)
            return False

        arity, handler = entry
        if len(command.args) != arity:
            logger.debug("Rejected '%s' on line %d", command.text, command.line)
            self._report(
                f"Error: line {command.line}: '{command.name}' expects "
                f"{arity} argument(s), got {len(command.args)}"
            )
            return False

        try:
            handler(*command.args)
        except SetAlgebraError as e:
            logger.debug("Command '%s' on line %d failed: %s", command.text, command.line, e)
            self._report(f"Error: {e}")
            return False
        return True

    # -------------------------------------------------------------------------
    # Command handlers
    # -------------------------------------------------------------------------

    def _print(self, name: str) -> None:
        self._emit(self.registry.get_set(name).render())

    def _binary(self, op: str) -> Callable[[str, str], None]:
        def handler(name_a: str, name_b: str) -> None:
            self._emit(self.registry.operate(name_a, op, name_b).render())

        return handler

    def _issubset(self, name_a: str, name_b: str) -> None:
        result = self.registry.is_subset(name_a, name_b)
        self._emit(f"Is {name_a} ⊆ {name_b}? {_yes_no(result)}")

    def _isequal(self, name_a: str, name_b: str) -> None:
        result = self.registry.is_equal(name_a, name_b)
        self._emit(f"Are {name_a} and {name_b} equal? {_yes_no(result)}")

    def _size(self, name: str) -> None:
        self._emit(f"Size of set {name}: {self.registry.size_of(name)} element(s)")

    def _powerset(self, name: str) -> None:
        result = self.registry.operate_unary(name, "powerset")
        self._emit(f"Power set of {name} contains {result.size()} subsets:")
        for subset in result.elements():
            self._emit(subset.render())

    def _cartesian(self, name_a: str, name_b: str) -> None:
        result = self.registry.cartesian_product(name_a, name_b)
        self._emit(f"Cartesian product {name_a} × {name_b} ({result.size()} pairs):")
        self._emit("{" + ", ".join(format_element(pair) for pair in result.elements()) + "}")
