# src/matrixgame/__init__.py

"""Matrixgame: Equilibrium analysis for two-player payoff matrix games."""

from .outcomes import Outcome, MixedEquilibrium
from .deviation_path import DeviationPath
from .social_relations import SocialRelations
from .game.matrix_game import MatrixGame, SUPPORTED_MOVE_COUNTS

from .factories import (
    make_prisoners_dilemma,
    make_matching_pennies,
    make_stag_hunt,
    make_battle_of_sexes,
    make_chicken,
    make_rock_paper_scissors,
    make_random_matrix_game,
)

from .solver import pure_nash_equilibria, mixed_nash_equilibrium
