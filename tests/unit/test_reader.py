"""
Tests for the script reader.
"""

import logging
from textwrap import dedent

import pytest

from setalgebra.script.reader import ScriptConfig, ScriptReader, read_script
from setalgebra.utils.errors import ScriptSyntaxError


class TestDefinitions:
    """Tests for the set-definition block."""

    def test_basic_definitions(self):
        """Headers are followed by element lines."""
        script = read_script("A 3\n1 2 3\nB 2\n4 5\nQ\n")
        assert [d.name for d in script.definitions] == ["A", "B"]
        assert script.definitions[0].values == [1, 2, 3]
        assert script.definitions[1].line == 3

    def test_zero_count_has_no_element_line(self):
        """A zero count consumes no element line."""
        script = read_script("E 0\nA 1\n7\nQ\n")
        assert script.definitions[0].values == []
        assert script.definitions[1].values == [7]

    def test_skips_blank_lines_and_comments(self):
        """Blank lines and comments are ignored, whitespace is trimmed."""
        source = dedent(
            """
            # sets

               A 2
             1 2
            Q
            """
        )
        script = read_script(source)
        assert script.definitions[0].name == "A"
        assert script.definitions[0].values == [1, 2]

    def test_negative_numbers(self):
        """Element tokens may be negative."""
        assert read_script("A 2\n-1 -2\nQ").definitions[0].values == [-1, -2]

    def test_missing_terminator(self):
        """Definitions may run to the end of input."""
        script = read_script("A 1\n5\n")
        assert len(script.definitions) == 1
        assert script.commands == []

    def test_count_mismatch_warns(self, caplog):
        """A count that disagrees with the tokens is only a warning."""
        with caplog.at_level(logging.WARNING, logger="setalgebra.script"):
            script = read_script("A 2\n1 2 3\nQ\n")
        assert script.definitions[0].values == [1, 2, 3]
        assert script.definitions[0].declared_count == 2
        assert "declares 2 element(s) but lists 3" in caplog.text


class TestDefinitionErrors:
    """Tests for fatal definition-block errors."""

    def test_header_without_count(self):
        """Headers need exactly two fields."""
        with pytest.raises(ScriptSyntaxError) as exc_info:
            read_script("A\n1\nQ\n", "bad.in")
        assert exc_info.value.location.line == 1
        assert str(exc_info.value).startswith("[bad.in:1:1]")

    def test_non_integer_count(self):
        """The count must be an integer."""
        with pytest.raises(ScriptSyntaxError) as exc_info:
            read_script("A x\nQ\n")
        assert exc_info.value.location.column == 3

    def test_negative_count(self):
        """The count must not be negative."""
        with pytest.raises(ScriptSyntaxError):
            read_script("A -1\nQ\n")

    def test_non_integer_element(self):
        """Element tokens must be integers."""
        with pytest.raises(ScriptSyntaxError) as exc_info:
            read_script("A 3\n1 two 3\nQ\n")
        assert exc_info.value.location.line == 2
        assert exc_info.value.location.column == 3

    def test_missing_element_line(self):
        """A positive count needs an element line."""
        with pytest.raises(ScriptSyntaxError):
            read_script("A 2")


class TestCommands:
    """Tests for the command block."""

    def test_commands_are_tokenized(self):
        """Each command line becomes name plus arguments."""
        script = read_script("A 1\n1\nQ\nunion A B\nprint A\n")
        assert [(c.name, c.args) for c in script.commands] == [
            ("union", ["A", "B"]),
            ("print", ["A"]),
        ]
        assert script.commands[0].line == 4
        assert script.commands[0].text == "union A B"

    def test_second_terminator_stops_reading(self):
        """Lines after the second terminator are ignored."""
        script = read_script("Q\nprint A\nQ\nprint B\n")
        assert [c.args for c in script.commands] == [["A"]]

    def test_unknown_commands_are_kept(self):
        """Validation is left to the runner."""
        script = read_script("Q\nfrobnicate A\n")
        assert script.commands[0].name == "frobnicate"

    def test_custom_config(self):
        """Terminator and comment prefix are configurable."""
        config = ScriptConfig(terminator="END", comment_prefix="//")
        script = ScriptReader("// c\nA 1\n1\nEND\nsize A\n", config=config).read()
        assert script.definitions[0].name == "A"
        assert script.commands[0].name == "size"
