# src/matrixgame/factories/game_factory.py

import numpy as np

from ..game.matrix_game import MatrixGame, SUPPORTED_MOVE_COUNTS

def make_prisoners_dilemma() -> MatrixGame:
    """Prisoner's Dilemma, move 1 = cooperate, move 2 = defect."""
    return MatrixGame(2, [[3, 0], [5, 1]], [[3, 5], [0, 1]])

def make_matching_pennies() -> MatrixGame:
    """Matching Pennies, Player 1 wins on a match, Player 2 on a mismatch."""
    return MatrixGame(2, [[1, -1], [-1, 1]], [[-1, 1], [1, -1]])

def make_stag_hunt() -> MatrixGame:
    """Stag Hunt, move 1 = stag, move 2 = hare."""
    return MatrixGame(2, [[4, 0], [3, 3]], [[4, 3], [0, 3]])

def make_battle_of_sexes() -> MatrixGame:
    return MatrixGame(2, [[3, 0], [0, 2]], [[2, 0], [0, 3]])

def make_chicken() -> MatrixGame:
    """Chicken, move 1 = swerve, move 2 = straight."""
    return MatrixGame(2, [[0, -1], [1, -10]], [[0, 1], [-1, -10]])

def make_rock_paper_scissors() -> MatrixGame:
    """Zero-sum Rock Paper Scissors, moves in the order rock, paper, scissors."""
    p1_payoffs = np.array([[0, -1, 1],
                           [1, 0, -1],
                           [-1, 1, 0]])
    return MatrixGame(3, p1_payoffs, -p1_payoffs)

def make_random_matrix_game(
    move_count: int = 2,
    low: int = -10,
    high: int = 10,
    seed: int | None = None,
) -> MatrixGame:
    """
    Generates a matrix game with integer payoffs drawn uniformly from [low, high].

    Parameters
    ----------
    move_count : int
        Number of moves per player, either 2 or 3.
    low : int
        Smallest possible payoff.
    high : int
        Largest possible payoff (inclusive).
    seed : int, optional
        Random seed for reproducibility.

    Returns
    -------
    MatrixGame
        A game with random payoffs for both players.
    """
    if isinstance(move_count, bool) or not isinstance(move_count, (int, np.integer)):
        raise TypeError(f"Game Factory: Move count must be an integer, got {type(move_count).__name__}.")
    if move_count not in SUPPORTED_MOVE_COUNTS:
        raise ValueError(f"Game Factory: Invalid move count {move_count}. Has to be one of {SUPPORTED_MOVE_COUNTS}.")
    if low > high:
        raise ValueError(f"Game Factory: low ({low}) must not exceed high ({high}).")

    rng = np.random.default_rng(seed)
    p1_payoffs = rng.integers(low, high, size=(move_count, move_count), endpoint=True)
    p2_payoffs = rng.integers(low, high, size=(move_count, move_count), endpoint=True)
    return MatrixGame(move_count, p1_payoffs, p2_payoffs)
