# src/matrixgame/outcomes.py

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """
    Failure signals returned by the engine instead of raising.

    Each member is falsy, so a caller can test results with ``if not result``
    and still tell the three cases apart by identity.
    """

    INVALID = "invalid"      # best response requested for an out-of-range move or player
    ABSENT = "absent"        # no pure-strategy Nash equilibrium exists
    UNDEFINED = "undefined"  # no unique mixed-strategy Nash equilibrium

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class MixedEquilibrium:
    """
    Mixed-strategy Nash equilibrium of a 2x2 game.

    Attributes
    ----------
    p : float
        Probability that Player 1 plays move 1 (1 - p for move 2).
    q : float
        Probability that Player 2 plays move 1 (1 - q for move 2).

    The values come straight from the indifference equations and are not clamped,
    so either may lie outside [0, 1].
    """

    p: float
    q: float

    @property
    def is_probability(self) -> bool:
        """True if both p and q are valid probabilities."""
        return 0.0 <= self.p <= 1.0 and 0.0 <= self.q <= 1.0

    def __iter__(self):
        yield self.p
        yield self.q
