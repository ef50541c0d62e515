# tests/test_social_relations.py

import numpy as np

from matrixgame import MatrixGame, SocialRelations

def test_from_payoffs_both_help(prisoners_dilemma: MatrixGame):
    relations = SocialRelations.from_payoffs(prisoners_dilemma.p1_payoffs, prisoners_dilemma.p2_payoffs)
    assert relations == SocialRelations(p1_helps_p2=True, p2_helps_p1=True)

def test_constant_payoffs_help_nobody():
    grid = np.full((3, 3), 7)
    relations = SocialRelations.from_payoffs(grid, grid)
    assert not relations.p1_helps_p2
    assert not relations.p2_helps_p1

def test_relations_are_directed():
    # P1's payoff only depends on P1's own move, P2's payoff depends on P1's move
    game = MatrixGame(2, [[1, 1], [2, 2]], [[0, 0], [4, 4]])
    relations = game.social_relations()
    assert relations.p1_helps_p2
    assert not relations.p2_helps_p1

def test_render():
    assert SocialRelations(True, False).render() == "Player 1 → Player 2\nPlayer 2 × Player 1"
    assert SocialRelations(False, True).render() == "Player 1 × Player 2\nPlayer 2 → Player 1"
