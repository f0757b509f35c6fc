"""
Script reader for SetAlgebra.

Parses the line-oriented script format into set definitions and commands.

Format:
    A 3             # header: <name> <count>
    1 2 3           # element line, only present when count > 0
    B 0
    Q               # end of the definition block
    union A B       # one command per line
    print A
    Q               # optional end of the command block

Blank lines and lines starting with ``#`` are skipped in both blocks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from setalgebra.utils.errors import ScriptSyntaxError, SourceLocation

logger = logging.getLogger("setalgebra.script")


@dataclass(frozen=True, slots=True)
class ScriptConfig:
    """
    Lexical conventions of a script.

    Attributes:
        terminator: Line that ends a block
        comment_prefix: Lines starting with this are ignored
    """

    terminator: str = "Q"
    comment_prefix: str = "#"


@dataclass(slots=True)
class SetDefinition:
    """A set declared in the definition block."""

    name: str
    values: list[int]
    declared_count: int
    line: int


@dataclass(slots=True)
class Command:
    """A single line of the command block."""

    name: str
    args: list[str]
    line: int

    @property
    def text(self) -> str:
        return " ".join([self.name, *self.args])


@dataclass(slots=True)
class Script:
    """A parsed script."""

    definitions: list[SetDefinition] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    filename: Optional[str] = None


class ScriptReader:
    """
    Reads script text into a ``Script``.

    Errors in the definition block are fatal and raise
    ``ScriptSyntaxError``. The command block is only tokenized here;
    validating commands is left to the runner so one bad command never
    stops the rest.
    """

    def __init__(
        self,
        source: str,
        filename: Optional[str] = None,
        config: Optional[ScriptConfig] = None,
    ) -> None:
        self.source = source
        self.filename = filename
        self.config = config or ScriptConfig()

    def _location(self, line: int, column: int = 1) -> SourceLocation:
        return SourceLocation(line, column, self.filename)

    def _is_skipped(self, line: str) -> bool:
        return not line or line.startswith(self.config.comment_prefix)

    def read(self) -> Script:
        """
        Parse the whole source.

        Returns:
            The parsed script

        Raises:
            ScriptSyntaxError: If the definition block is malformed
        """
        script = Script(filename=self.filename)
        lines = enumerate(self.source.splitlines(), start=1)

        self._read_definitions(lines, script)
        self._read_commands(lines, script)

        logger.debug(
            "Read %d set(s) and %d command(s)", len(script.definitions), len(script.commands)
        )
        return script

    def _read_definitions(self, lines: Iterator[tuple[int, str]], script: Script) -> None:
        for lineno, raw in lines:
            line = raw.strip()
            if self._is_skipped(line):
                continue
            if line == self.config.terminator:
                return

            name, count = self._parse_header(line, lineno)
            values: list[int] = []

            if count > 0:
                try:
                    value_lineno, value_line = next(lines)
                except StopIteration:
                    raise ScriptSyntaxError(
                        f"Set '{name}' declares {count} element(s) but the script ends",
                        self._location(lineno),
                    ) from None
                values = self._parse_values(value_line, value_lineno)

                if len(values) != count:
                    logger.warning(
                        "%s: set '%s' declares %d element(s) but lists %d",
                        self._location(value_lineno),
                        name,
                        count,
                        len(values),
                    )

            script.definitions.append(SetDefinition(name, values, count, lineno))

    def _parse_header(self, line: str, lineno: int) -> tuple[str, int]:
        parts = line.split()
        if len(parts) != 2:
            raise ScriptSyntaxError(
                f"Expected '<name> <count>', got '{line}'", self._location(lineno)
            )

        name, count_token = parts
        try:
            count = int(count_token)
        except ValueError:
            count = -1
        if count < 0:
            column = line.index(count_token, len(name)) + 1
            raise ScriptSyntaxError(
                f"Element count must be a non-negative integer, got '{count_token}'",
                self._location(lineno, column),
            )
        return name, count

    def _parse_values(self, raw: str, lineno: int) -> list[int]:
        values = []
        offset = 0
        for token in raw.split():
            offset = raw.index(token, offset)
            try:
                values.append(int(token))
            except ValueError:
                raise ScriptSyntaxError(
                    f"Element '{token}' is not an integer", self._location(lineno, offset + 1)
                ) from None
            offset += len(token)
        return values

    def _read_commands(self, lines: Iterator[tuple[int, str]], script: Script) -> None:
        for lineno, raw in lines:
            line = raw.strip()
            if self._is_skipped(line):
                continue
            if line == self.config.terminator:
                return

            name, *args = line.split()
            script.commands.append(Command(name, args, lineno))


def read_script(
    source: str,
    filename: Optional[str] = None,
    config: Optional[ScriptConfig] = None,
) -> Script:
    """Convenience wrapper around ``ScriptReader(...).read()``."""
    return ScriptReader(source, filename, config).read()
