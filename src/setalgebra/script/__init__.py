"""
SetAlgebra Script Front End.

Reads line-oriented scripts of set definitions and commands and runs
them against a ``SetRegistry``.
"""

from setalgebra.script.reader import (
    Command,
    Script,
    ScriptConfig,
    ScriptReader,
    SetDefinition,
    read_script,
)
from setalgebra.script.runner import RunResult, ScriptRunner

__all__ = [
    "Command",
    "Script",
    "ScriptConfig",
    "ScriptReader",
    "SetDefinition",
    "read_script",
    "RunResult",
    "ScriptRunner",
]
