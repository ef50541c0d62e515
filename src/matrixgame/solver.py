# src/matrixgame/solver.py

import logging

from .game.matrix_game import MatrixGame
from .outcomes import Outcome, MixedEquilibrium

logger = logging.getLogger(__name__)

def _scan_order(move_count: int) -> list[tuple[int, int]]:
    """
    Order in which squares are checked for equilibria: the 2x2 block row-major,
    then the squares added by the third move, row-major.
    """
    squares = [(r, c) for r in range(1, move_count + 1) for c in range(1, move_count + 1)]
    return sorted(squares, key=lambda square: (max(square), square))


def pure_nash_equilibria(game: MatrixGame) -> list[tuple[int, int]] | Outcome:
    """
    Enumerates the pure-strategy Nash equilibria of a matrix game.

    A square (r, c) is an equilibrium iff r is Player 1's best response to c and
    c is Player 2's best response to r. Best responses follow the lowest-index
    tie-break of MatrixGame.best_response.

    Parameters
    ----------
    game : MatrixGame
        The game to analyse.

    Returns
    -------
    list[tuple[int, int]] | Outcome
        All equilibrium squares (p1_move, p2_move) in scan order, (1,1), (1,2), (2,1), (2,2)
        and for 3x3 games then (1,3), (2,3), (3,1), (3,2), (3,3).
        Outcome.ABSENT if there is none.
    """
    moves = range(1, game.move_count + 1)
    # Best responses to every opposing move, computed once
    p1_responses = {move: game.best_response(move, 1) for move in moves}
    p2_responses = {move: game.best_response(move, 2) for move in moves}

    equilibria = [
        (r, c) for (r, c) in _scan_order(game.move_count)
        if p1_responses[c] == r and p2_responses[r] == c
    ]
    if not equilibria:
        logger.debug("No pure strategy Nash equilibrium in %dx%d game", game.move_count, game.move_count)
        return Outcome.ABSENT
    logger.debug("Pure strategy Nash equilibria: %s", equilibria)
    return equilibria


def mixed_nash_equilibrium(game: MatrixGame) -> MixedEquilibrium | Outcome:
    """
    Computes the mixed-strategy Nash equilibrium of a 2x2 game from the indifference conditions.

    q makes Player 1 indifferent between their moves and is solved from Player 1's payoffs,
    p makes Player 2 indifferent and is solved from Player 2's payoffs.

    Parameters
    ----------
    game : MatrixGame
        The game to analyse.

    Returns
    -------
    MixedEquilibrium | Outcome
        The unclamped (p, q) pair, or Outcome.UNDEFINED for 3x3 games and whenever
        an indifference equation is degenerate (zero coefficient).
    """
    if game.move_count != 2:
        return Outcome.UNDEFINED

    a = game.p1_payoffs.tolist()
    b = game.p2_payoffs.tolist()

    p_coefficient = b[0][0] - b[1][0] - b[0][1] + b[1][1]
    if p_coefficient == 0:
        logger.debug("Degenerate indifference equation for p")
        return Outcome.UNDEFINED
    q_coefficient = a[0][0] - a[0][1] - a[1][0] + a[1][1]
    if q_coefficient == 0:
        logger.debug("Degenerate indifference equation for q")
        return Outcome.UNDEFINED

    p = (b[1][1] - b[1][0]) / p_coefficient
    q = (a[1][1] - a[0][1]) / q_coefficient
    return MixedEquilibrium(p=p, q=q)
