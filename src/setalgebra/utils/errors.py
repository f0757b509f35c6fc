"""
Error types and source location tracking for SetAlgebra.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a location in a script.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
        filename: Optional filename for error reporting
    """

    line: int
    column: int = 1
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


class SetAlgebraError(Exception):
    """Base exception for all SetAlgebra errors."""

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"[{self.location}] {self.message}"
        return self.message

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message
        return self._format_message()


class SetNotFoundError(SetAlgebraError, KeyError):
    """Raised when a referenced set name is absent from the registry."""

    def __init__(
        self,
        name: str,
        suggestions: Optional[list[str]] = None,
        location: Optional[SourceLocation] = None,
    ) -> None:
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(f"Set '{name}' not found.", location)

    def _format_message(self) -> str:
        message = super()._format_message()
        if self.suggestions:
            hints = ", ".join(f"'{s}'" for s in self.suggestions)
            message += f" Did you mean {hints}?"
        return message


class InvalidOperationError(SetAlgebraError, ValueError):
    """Raised when a binary operation token is not a recognized algebra operation."""

    def __init__(self, operation: str, location: Optional[SourceLocation] = None) -> None:
        self.operation = operation
        super().__init__(f"Invalid operation: '{operation}'", location)


class UnsupportedOperationError(SetAlgebraError, ValueError):
    """Raised when a unary operation token is anything other than ``powerset``."""

    def __init__(self, operation: str, location: Optional[SourceLocation] = None) -> None:
        self.operation = operation
        super().__init__(f"Unsupported unary operation: '{operation}'", location)


class ScriptSyntaxError(SetAlgebraError):
    """
    Raised when the set-definition block of a script is malformed.

    This error is raised when:
    - A header line is not of the form ``<name> <count>``
    - The count is not a non-negative integer
    - An element token is not an integer
    """

    pass
