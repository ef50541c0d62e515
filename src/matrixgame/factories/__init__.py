# src/matrixgame/factories/__init__.py

from .game_factory import (
    make_prisoners_dilemma,
    make_matching_pennies,
    make_stag_hunt,
    make_battle_of_sexes,
    make_chicken,
    make_rock_paper_scissors,
    make_random_matrix_game,
)
