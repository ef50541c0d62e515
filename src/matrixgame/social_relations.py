# src/matrixgame/social_relations.py

from dataclasses import dataclass
import numpy as np

@dataclass(frozen=True)
class SocialRelations:
    """
    Directed "helps" relation between the two players of a matrix game.

    Attributes
    ----------
    p1_helps_p2 : bool
        Player 1 can push Player 2's payoff above Player 2's average for some fixed Player 2 move.
    p2_helps_p1 : bool
        Player 2 can push Player 1's payoff above Player 1's average for some fixed Player 1 move.
    """

    p1_helps_p2: bool
    p2_helps_p1: bool

    @classmethod
    def from_payoffs(cls, p1_payoffs: np.ndarray, p2_payoffs: np.ndarray) -> "SocialRelations":
        """
        Derives the relation from the two payoff grids.

        Player 2's payoffs are compared against their column means (Player 2's move fixed,
        Player 1 choosing the row), Player 1's payoffs against their row means.
        """
        p1_helps_p2 = np.any(p2_payoffs > p2_payoffs.mean(axis=0, keepdims=True))
        p2_helps_p1 = np.any(p1_payoffs > p1_payoffs.mean(axis=1, keepdims=True))
        return cls(p1_helps_p2=bool(p1_helps_p2), p2_helps_p1=bool(p2_helps_p1))

    def render(self) -> str:
        """Renders the relation as a two-line text graph."""
        arrow_12 = "→" if self.p1_helps_p2 else "×"
        arrow_21 = "→" if self.p2_helps_p1 else "×"
        return f"Player 1 {arrow_12} Player 2\nPlayer 2 {arrow_21} Player 1"
