# tests/conftest.py

import pytest
import numpy as np
import random

from matrixgame import (
    MatrixGame,
    make_prisoners_dilemma,
    make_matching_pennies,
    make_rock_paper_scissors,
)

SEED = 42

####### Global Fixtures ########

@pytest.fixture(autouse=True)
def deterministic_seed():
    random.seed(SEED)
    np.random.seed(SEED)

################################
# Fixtures: classic 2x2 games
################################

@pytest.fixture
def prisoners_dilemma() -> MatrixGame:
    """P1 [[3,0],[5,1]], P2 [[3,5],[0,1]]: unique equilibrium at (2,2)."""
    return make_prisoners_dilemma()

@pytest.fixture
def matching_pennies() -> MatrixGame:
    """No pure equilibrium, mixed equilibrium at p = q = 0.5."""
    return make_matching_pennies()

@pytest.fixture
def degenerate_game() -> MatrixGame:
    """All of Player 2's payoffs are equal, so the p-equation is degenerate."""
    return MatrixGame(2, [[2, 1], [0, 3]], [[4, 4], [4, 4]])

################################
# Fixtures: 3x3 games
################################

@pytest.fixture
def rock_paper_scissors() -> MatrixGame:
    return make_rock_paper_scissors()

@pytest.fixture
def corner_game() -> MatrixGame:
    """
    3x3 game whose only equilibrium is the bottom-right square (3,3):
    move 3 is the best response of both players to everything.
    """
    p1 = [[0, 0, 0],
          [0, 0, 0],
          [1, 1, 1]]
    p2 = [[0, 0, 1],
          [0, 0, 1],
          [0, 0, 1]]
    return MatrixGame(3, p1, p2)

@pytest.fixture
def anti_diagonal_game() -> MatrixGame:
    """
    3x3 game with equilibria at (1,3), (2,2) and (3,1).
    """
    payoffs = [[0, 0, 5],
               [0, 5, 0],
               [5, 0, 0]]
    return MatrixGame(3, payoffs, payoffs)
