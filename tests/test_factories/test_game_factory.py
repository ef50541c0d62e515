# tests/test_factories/test_game_factory.py

import numpy as np
import pytest

from matrixgame.factories import (
    make_battle_of_sexes,
    make_chicken,
    make_matching_pennies,
    make_prisoners_dilemma,
    make_random_matrix_game,
    make_rock_paper_scissors,
    make_stag_hunt,
)
from matrixgame import MatrixGame
from tests.conftest import SEED


@pytest.mark.parametrize("factory, move_count", [
    (make_prisoners_dilemma, 2),
    (make_matching_pennies, 2),
    (make_stag_hunt, 2),
    (make_battle_of_sexes, 2),
    (make_chicken, 2),
    (make_rock_paper_scissors, 3),
])
def test_classic_games(factory, move_count: int) -> None:
    game = factory()
    assert isinstance(game, MatrixGame)
    assert game.move_count == move_count

def test_rock_paper_scissors_is_zero_sum() -> None:
    game = make_rock_paper_scissors()
    np.testing.assert_array_equal(game.p1_payoffs + game.p2_payoffs, np.zeros((3, 3)))

@pytest.mark.parametrize("move_count", [2, 3])
def test_make_random_matrix_game_valid_configs(move_count: int) -> None:
    game = make_random_matrix_game(move_count=move_count, low=-5, high=5, seed=SEED)
    assert game.move_count == move_count
    for payoffs in (game.p1_payoffs, game.p2_payoffs):
        assert payoffs.shape == (move_count, move_count)
        assert payoffs.min() >= -5 and payoffs.max() <= 5

def test_make_random_matrix_game_is_reproducible() -> None:
    assert make_random_matrix_game(seed=SEED) == make_random_matrix_game(seed=SEED)

def test_make_random_matrix_game_single_value() -> None:
    game = make_random_matrix_game(move_count=3, low=2, high=2, seed=SEED)
    assert np.all(game.p1_payoffs == 2) and np.all(game.p2_payoffs == 2)

def test_make_random_matrix_game_invalid_configs() -> None:
    with pytest.raises(ValueError, match="Invalid move count"):
        make_random_matrix_game(move_count=4)
    with pytest.raises(ValueError, match="must not exceed"):
        make_random_matrix_game(low=3, high=1)
    with pytest.raises(TypeError, match="Game Factory: Move count must be an integer"):
        make_random_matrix_game(move_count=2.0)
