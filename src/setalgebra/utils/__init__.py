"""
SetAlgebra Utilities Package.

Error types, source locations, and name suggestions.
"""

from setalgebra.utils.errors import (
    InvalidOperationError,
    ScriptSyntaxError,
    SetAlgebraError,
    SetNotFoundError,
    SourceLocation,
    UnsupportedOperationError,
)
from setalgebra.utils.suggestions import distance_budget, levenshtein_distance, suggest_similar

__all__ = [
    # Errors
    "SetAlgebraError",
    "SetNotFoundError",
    "InvalidOperationError",
    "UnsupportedOperationError",
    "ScriptSyntaxError",
    "SourceLocation",
    # String similarity utilities
    "distance_budget",
    "levenshtein_distance",
    "suggest_similar",
]
