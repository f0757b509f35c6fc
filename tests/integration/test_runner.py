"""
End-to-end tests for running set-algebra scripts.

These tests feed complete scripts through the reader and runner and check
the rendered output line by line.
"""

import logging
from io import StringIO

from setalgebra.runtime.registry import SetRegistry
from setalgebra.script.reader import Command, read_script
from setalgebra.script.runner import ScriptRunner

SETS = """\
# two overlapping sets
A 3
1 2 3
B 3
2 3 4
C 2
3 3
E 0
Q
"""


class TestScriptOutput:
    """Tests for the rendered results of each command."""

    def test_print(self, run_script):
        """print renders the named set."""
        result, out, err = run_script(SETS + "print A\n")
        assert out == "A = {1, 2, 3}\n"
        assert err == ""
        assert result.ok

    def test_duplicates_collapse(self, run_script):
        """Repeated element tokens are stored once."""
        _, out, _ = run_script(SETS + "print C\nsize C\n")
        assert out.splitlines() == ["C = {3}", "Size of set C: 1 element(s)"]

    def test_binary_operations(self, run_script):
        """The four binary operations render with canonical labels."""
        source = SETS + dedent_lines(
            "union A B",
            "intersection A B",
            "difference A B",
            "symmetric_difference A B",
        )
        _, out, _ = run_script(source)
        assert out.splitlines() == [
            "(A union B) = {1, 2, 3, 4}",
            "(A intersection B) = {2, 3}",
            "(A difference B) = {1}",
            "(A symmetric_difference B) = {1, 4}",
        ]

    def test_subset_and_equality(self, run_script):
        """issubset and isequal answer yes or no."""
        source = SETS + dedent_lines("issubset C A", "issubset A C", "isequal A A", "isequal A B")
        _, out, _ = run_script(source)
        assert out.splitlines() == [
            "Is C ⊆ A? Yes ✅",
            "Is A ⊆ C? No ❌",
            "Are A and A equal? Yes ✅",
            "Are A and B equal? No ❌",
        ]

    def test_empty_set(self, run_script):
        """The empty set prints, sizes and is a subset of everything."""
        _, out, _ = run_script(SETS + dedent_lines("print E", "size E", "issubset E A"))
        assert out.splitlines() == [
            "E = {}",
            "Size of set E: 0 element(s)",
            "Is E ⊆ A? Yes ✅",
        ]

    def test_powerset(self, run_script):
        """powerset lists every subset on its own line."""
        _, out, _ = run_script("A 2\n1 2\nQ\npowerset A\n")
        assert out.splitlines() == [
            "Power set of A contains 4 subsets:",
            "{}",
            "{1}",
            "{2}",
            "{1, 2}",
        ]

    def test_cartesian(self, run_script):
        """cartesian renders all ordered pairs."""
        _, out, _ = run_script("A 2\n1 2\nB 2\n3 4\nQ\ncartesian A B\n")
        assert out.splitlines() == [
            "Cartesian product A × B (4 pairs):",
            "{(1, 3), (1, 4), (2, 3), (2, 4)}",
        ]

    def test_redefinition_overwrites(self, run_script):
        """A repeated set name replaces the earlier definition."""
        _, out, _ = run_script("A 1\n1\nA 2\n8 9\nQ\nprint A\n")
        assert out == "A = {8, 9}\n"


class TestFaultIsolation:
    """Tests that a bad command never stops the run."""

    def test_missing_set(self, run_script):
        """A missing name is reported and the next command still runs."""
        result, out, err = run_script(SETS + dedent_lines("print X", "print A"))
        assert err == "Error: Set 'X' not found.\n"
        assert out == "A = {1, 2, 3}\n"
        assert result.failed == 1
        assert result.succeeded == 1
        assert not result.ok

    def test_missing_operand(self, run_script):
        """Binary operations report missing operands."""
        _, out, err = run_script(SETS + dedent_lines("union X A", "cartesian A Y", "size A"))
        assert err.splitlines() == ["Error: Set 'X' not found.", "Error: Set 'Y' not found."]
        assert out == "Size of set A: 3 element(s)\n"

    def test_unknown_command(self, run_script):
        """Unknown commands are reported with a hint and skipped."""
        result, out, err = run_script(SETS + dedent_lines("unoin A B", "frobnicate", "print B"))
        assert err.splitlines() == [
            "Unknown operation: unoin (did you mean 'union'?)",
            "Unknown operation: frobnicate",
        ]
        assert out == "B = {2, 3, 4}\n"
        assert result.failed == 2

    def test_wrong_argument_count(self, run_script):
        """Commands check their argument count."""
        _, out, err = run_script("A 1\n1\nQ\nunion A\nprint A\n")
        assert err == "Error: line 4: 'union' expects 2 argument(s), got 1\n"
        assert out == "A = {1}\n"

    def test_terminator_ends_commands(self, run_script):
        """Nothing after the second terminator runs."""
        _, out, _ = run_script(SETS + "print A\nQ\nprint B\n")
        assert out == "A = {1, 2, 3}\n"


class TestRunnerApi:
    """Tests for using ScriptRunner directly."""

    def test_shared_registry(self):
        """Sets loaded by a run stay in the supplied registry."""
        registry = SetRegistry()
        runner = ScriptRunner(registry, out=StringIO(), err=StringIO())
        runner.run(read_script(SETS))
        assert registry.set_names() == ["A", "B", "C", "E"]

    def test_execute_single_command(self):
        """execute() returns whether the command succeeded."""
        out = StringIO()
        runner = ScriptRunner(out=out, err=StringIO())
        runner.load(read_script(SETS))
        assert runner.execute(Command("size", ["B"], 1)) is True
        assert runner.execute(Command("size", ["Z"], 2)) is False
        assert out.getvalue() == "Size of set B: 3 element(s)\n"

    def test_load_logs_declared_and_unique_counts(self, caplog):
        """Loading logs each set's declared count next to its unique size."""
        runner = ScriptRunner(out=StringIO(), err=StringIO())
        with caplog.at_level(logging.DEBUG, logger="setalgebra.script"):
            runner.load(read_script(SETS))
        assert "Loaded set 'C' from line 6: 2 declared, 1 unique element(s)" in caplog.text

    def test_failed_command_logs_its_text(self, caplog):
        """A failing command is logged with its full text and line."""
        runner = ScriptRunner(out=StringIO(), err=StringIO())
        runner.load(read_script(SETS))
        with caplog.at_level(logging.DEBUG, logger="setalgebra.script"):
            runner.execute(Command("union", ["A", "Z"], 12))
            runner.execute(Command("size", [], 13))
        assert "Command 'union A Z' on line 12 failed" in caplog.text
        assert "Rejected 'size' on line 13" in caplog.text

    def test_command_names(self):
        """Every documented command is registered."""
        names = set(ScriptRunner(out=StringIO(), err=StringIO()).command_names)
        assert names == {
            "print",
            "union",
            "intersection",
            "difference",
            "symmetric_difference",
            "issubset",
            "isequal",
            "size",
            "powerset",
            "cartesian",
        }


def dedent_lines(*lines: str) -> str:
    return "".join(f"{line}\n" for line in lines)
