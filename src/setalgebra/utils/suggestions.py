"""
"Did you mean?" hints for mistyped set names and script commands.
"""

from typing import Optional


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Return the number of single-character insertions, deletions and
    substitutions needed to turn ``s1`` into ``s2``.
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    # costs[j] is the distance between the prefix of s1 read so far and s2[:j]
    costs = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        diagonal, costs[0] = costs[0], i
        for j, c2 in enumerate(s2, start=1):
            diagonal, costs[j] = costs[j], min(
                costs[j] + 1,
                costs[j - 1] + 1,
                diagonal + (c1 != c2),
            )
    return costs[-1]


def distance_budget(name: str) -> int:
    """
    Edit budget allowed when matching ``name``.

    Half the name's length, capped at 2. A one-letter set name gets no
    budget at all, otherwise it would match every other one-letter name.
    """
    return min(2, len(name) // 2)


def suggest_similar(
    name: str,
    candidates: list[str],
    max_distance: Optional[int] = None,
    max_suggestions: int = 3,
) -> list[str]:
    """
    Find candidates that are likely corrections of ``name``.

    Args:
        name: The unknown name
        candidates: Valid names to compare against
        max_distance: Edit budget (default ``distance_budget(name)``)
        max_suggestions: Maximum number of suggestions to return

    Returns:
        Candidates sorted closest first, alphabetical on ties. ``name``
        itself is never suggested.
    """
    if max_distance is None:
        max_distance = distance_budget(name)

    needle = name.lower()
    scored = [
        (levenshtein_distance(needle, candidate.lower()), candidate)
        for candidate in candidates
        if candidate != name and abs(len(candidate) - len(name)) <= max_distance
    ]
    return [candidate for distance, candidate in sorted(scored) if distance <= max_distance][
        :max_suggestions
    ]
