"""
Pytest configuration and shared fixtures for SetAlgebra tests.
"""

from io import StringIO

import pytest

from setalgebra.runtime.dataset import DataSet
from setalgebra.runtime.registry import SetRegistry
from setalgebra.script.reader import read_script
from setalgebra.script.runner import RunResult, ScriptRunner


@pytest.fixture
def make_set():
    """Factory fixture for creating named sets."""

    def _make_set(name: str = "", *values) -> DataSet:
        return DataSet(name, values)

    return _make_set


@pytest.fixture
def set_a(make_set) -> DataSet:
    """A = {1, 2, 3}."""
    return make_set("A", 1, 2, 3)


@pytest.fixture
def set_b(make_set) -> DataSet:
    """B = {2, 3, 4}."""
    return make_set("B", 2, 3, 4)


@pytest.fixture
def registry(set_a, set_b) -> SetRegistry:
    """Registry holding A = {1, 2, 3} and B = {2, 3, 4}."""
    reg = SetRegistry()
    reg.add_set(set_a)
    reg.add_set(set_b)
    return reg


@pytest.fixture
def run_script():
    """Fixture to run script text and capture both output streams."""

    def _run(source: str) -> tuple[RunResult, str, str]:
        out = StringIO()
        err = StringIO()
        runner = ScriptRunner(out=out, err=err)
        result = runner.run(read_script(source))
        return result, out.getvalue(), err.getvalue()

    return _run
