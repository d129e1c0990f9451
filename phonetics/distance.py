"""
Edit distance between a misspelled word and a dictionary candidate.

- Weighted optimal-string-alignment distance: insert, delete, substitute,
  adjacent swap, plus a cheap case-only substitution.
- Costs come from an immutable EditWeights value so callers can tune ranking
  without touching the algorithm.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditWeights:
    """Costs of the elementary edits. Deletion and insertion may differ."""

    deletion: int = 95
    insertion: int = 95
    swap: int = 90
    substitution: int = 100
    # Substituting a letter by itself in another case ("cat" -> "Cat").
    similar: int = 10

    def __post_init__(self) -> None:
        for name in ("deletion", "insertion", "swap", "substitution", "similar"):
            if getattr(self, name) < 0:
                raise ValueError(f"Edit weight {name!r} must be non-negative")


DEFAULT_WEIGHTS = EditWeights()
UNIT_WEIGHTS = EditWeights(deletion=1, insertion=1, swap=2, substitution=1, similar=1)


def weighted_edit_distance(a: str, b: str, weights: EditWeights = DEFAULT_WEIGHTS) -> int:
    """
    Cost of turning a into b. Deleting from a costs weights.deletion,
    inserting into a costs weights.insertion, so the result is only
    symmetric when the two are equal.
    """
    n, m = len(a), len(b)
    # Three rolling rows: i-2, i-1, i (swap looks two rows back).
    before = [0] * (m + 1)
    prev = [j * weights.insertion for j in range(m + 1)]
    for i in range(1, n + 1):
        curr = [i * weights.deletion] + [0] * m
        ca = a[i - 1]
        for j in range(1, m + 1):
            cb = b[j - 1]
            if ca == cb:
                cost = 0
            elif ca.lower() == cb.lower():
                cost = weights.similar
            else:
                cost = weights.substitution
            best = min(
                prev[j] + weights.deletion,
                curr[j - 1] + weights.insertion,
                prev[j - 1] + cost,
            )
            if i > 1 and j > 1 and ca == b[j - 2] and a[i - 2] == cb and ca != cb:
                best = min(best, before[j - 2] + weights.swap)
            curr[j] = best
        before, prev = prev, curr
    return prev[m]
