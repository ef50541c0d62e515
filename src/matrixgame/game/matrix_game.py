# src/matrixgame/game/matrix_game.py

import logging
import numpy as np

from ..outcomes import Outcome, MixedEquilibrium
from ..deviation_path import DeviationPath
from ..social_relations import SocialRelations
from ..utils.utils import as_payoff_grid, is_move

logger = logging.getLogger(__name__)

SUPPORTED_MOVE_COUNTS = (2, 3)
ITERATION_FACTOR = 4  # deviation simulation runs at most ITERATION_FACTOR * move_count steps

class MatrixGame:
    """
    Two-player simultaneous-move game given by a pair of square payoff matrices.

    Row index is Player 1's move, column index is Player 2's move. All public methods
    use 1-based moves. Instances are immutable; editing methods return a new game.

    Attributes
    ----------
    move_count : int
        Number of moves per player, either 2 or 3.
    p1_payoffs : np.ndarray
        Player 1's payoffs, read-only int array of shape (move_count, move_count).
    p2_payoffs : np.ndarray
        Player 2's payoffs, read-only int array of shape (move_count, move_count).
    """

    def __init__(self, move_count: int, p1_payoffs: np.ndarray | list[list[int]], p2_payoffs: np.ndarray | list[list[int]]):
        if isinstance(move_count, bool) or not isinstance(move_count, (int, np.integer)):
            raise TypeError(f"MatrixGame: move_count must be an integer, got {type(move_count).__name__}")
        if move_count not in SUPPORTED_MOVE_COUNTS:
            raise ValueError(f"MatrixGame: move_count must be one of {SUPPORTED_MOVE_COUNTS}, got {move_count}")

        self._move_count = int(move_count)
        self._p1_payoffs = as_payoff_grid(p1_payoffs, self._move_count, name="p1_payoffs")
        self._p2_payoffs = as_payoff_grid(p2_payoffs, self._move_count, name="p2_payoffs")

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def p1_payoffs(self) -> np.ndarray:
        return self._p1_payoffs

    @property
    def p2_payoffs(self) -> np.ndarray:
        return self._p2_payoffs

    def payoff(self, row: int, col: int) -> tuple[int, int]:
        """
        Returns the payoff pair (Player 1, Player 2) of the square where Player 1
        plays move `row` and Player 2 plays move `col`.
        """
        if not (is_move(row, self.move_count) and is_move(col, self.move_count)):
            raise ValueError(f"MatrixGame: square ({row}, {col}) is outside the {self.move_count}x{self.move_count} matrix")
        return int(self._p1_payoffs[row - 1, col - 1]), int(self._p2_payoffs[row - 1, col - 1])

    ### Best responses ###

    def best_response(self, move: int, player: int) -> int | Outcome:
        """
        Best response of `player` to the other player's fixed `move`.

        Parameters
        ----------
        move : int
            The opponent's move, in [1, move_count].
        player : int
            The responding player, 1 or 2.

        Returns
        -------
        int | Outcome
            The 1-based move with the strictly greatest payoff, the lowest-indexed one on ties.
            Outcome.INVALID if move or player is out of range.
        """
        if not is_move(move, self.move_count) or not is_move(player, 2):
            return Outcome.INVALID
        return self._best_response(move, player)

    def _best_response(self, move: int, player: int) -> int:
        # Payoffs of the responding player over their own moves, opponent fixed at `move`
        if player == 1:
            payoffs = self._p1_payoffs[:, move - 1]
        else:
            payoffs = self._p2_payoffs[move - 1, :]
        # argmax returns the first maximal index, so ties go to the lowest move
        return int(np.argmax(payoffs)) + 1

    ### Equilibria ###

    def find_pure_equilibria(self) -> list[tuple[int, int]] | Outcome:
        """
        Pure-strategy Nash equilibria as (p1_move, p2_move) squares, or Outcome.ABSENT.
        See solver.pure_nash_equilibria.
        """
        # avoid circular import by imports here
        from ..solver import pure_nash_equilibria
        return pure_nash_equilibria(self)

    def find_mixed_equilibrium(self) -> MixedEquilibrium | Outcome:
        """
        Mixed-strategy Nash equilibrium of a 2x2 game, or Outcome.UNDEFINED.
        See solver.mixed_nash_equilibrium.
        """
        from ..solver import mixed_nash_equilibrium
        return mixed_nash_equilibrium(self)

    def expected_payoffs(self, p: float, q: float) -> np.ndarray:
        """
        Expected payoffs of both players in a 2x2 game under a mixed profile.

        Parameters
        ----------
        p : float
            Probability that Player 1 plays move 1.
        q : float
            Probability that Player 2 plays move 1.

        Returns
        -------
        np.ndarray
            Array [E_1, E_2] of expected payoffs.
        """
        if self.move_count != 2:
            raise ValueError("MatrixGame: expected payoffs under (p, q) are only defined for 2x2 games")
        row_strategy = np.array([p, 1.0 - p])
        col_strategy = np.array([q, 1.0 - q])
        return np.array([
            row_strategy @ self._p1_payoffs @ col_strategy,
            row_strategy @ self._p2_payoffs @ col_strategy,
        ], dtype=np.float64)

    ### Dynamics ###

    def simulate_deviation_path(self, start_p1_move: int, start_p2_move: int, deviating_player: int, deviation_move: int) -> DeviationPath:
        """
        Simulates alternating best-response adjustments after a forced deviation.

        Starting at square (start_p1_move, start_p2_move), `deviating_player` switches to
        `deviation_move`. Then the players alternate, the other player first, each moving
        to their best response against the opponent's current move. The trace ends when
        the acting player keeps their move (fixed point), when a joint state repeats
        (cycle), or after ITERATION_FACTOR * move_count adjustment steps.

        Parameters
        ----------
        start_p1_move, start_p2_move : int
            Starting square, both in [1, move_count].
        deviating_player : int
            The player forced to deviate, 1 or 2.
        deviation_move : int
            The move the deviating player switches to, in [1, move_count].

        Returns
        -------
        DeviationPath
            The visited states and the reason the trace ended.
        """
        for name, move in (("start_p1_move", start_p1_move), ("start_p2_move", start_p2_move), ("deviation_move", deviation_move)):
            if not is_move(move, self.move_count):
                raise ValueError(f"MatrixGame: {name} must be a move in [1, {self.move_count}], got {move!r}")
        if not is_move(deviating_player, 2):
            raise ValueError(f"MatrixGame: deviating_player must be 1 or 2, got {deviating_player!r}")

        p1_move, p2_move = int(start_p1_move), int(start_p2_move)
        states = [(p1_move, p2_move)]
        if deviating_player == 1:
            p1_move = int(deviation_move)
        else:
            p2_move = int(deviation_move)
        states.append((p1_move, p2_move))
        visited = set(states)

        active_player = 2 if deviating_player == 1 else 1
        for _ in range(ITERATION_FACTOR * self.move_count):
            if active_player == 1:
                new_move = self._best_response(p2_move, 1)
                if new_move == p1_move:
                    logger.debug("Deviation path reached fixed point %s", (p1_move, p2_move))
                    return DeviationPath(states=states, reached_fixed_point=True)
                p1_move = new_move
            else:
                new_move = self._best_response(p1_move, 2)
                if new_move == p2_move:
                    logger.debug("Deviation path reached fixed point %s", (p1_move, p2_move))
                    return DeviationPath(states=states, reached_fixed_point=True)
                p2_move = new_move

            state = (p1_move, p2_move)
            states.append(state)
            if state in visited:
                logger.debug("Deviation path cycled back to %s", state)
                return DeviationPath(states=states, cycle_detected=True)
            visited.add(state)
            active_player = 3 - active_player

        logger.debug("Deviation path stopped after %d steps", ITERATION_FACTOR * self.move_count)
        return DeviationPath(states=states)

    def social_relations(self) -> SocialRelations:
        """Which player's move choice can raise the other's payoff above average."""
        return SocialRelations.from_payoffs(self._p1_payoffs, self._p2_payoffs)

    ### Editing ###

    def with_payoff(self, player: int, row: int, col: int, value: int) -> "MatrixGame":
        """
        Returns a new game in which `player`'s payoff at square (row, col) is `value`.
        """
        if not is_move(player, 2):
            raise ValueError(f"MatrixGame: player must be 1 or 2, got {player!r}")
        if not (is_move(row, self.move_count) and is_move(col, self.move_count)):
            raise ValueError(f"MatrixGame: square ({row}, {col}) is outside the {self.move_count}x{self.move_count} matrix")
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"MatrixGame: payoff must be an integer, got {type(value).__name__}")
        p1_payoffs = self._p1_payoffs.copy()
        p2_payoffs = self._p2_payoffs.copy()
        target = p1_payoffs if player == 1 else p2_payoffs
        target[row - 1, col - 1] = value
        return MatrixGame(self.move_count, p1_payoffs, p2_payoffs)

    def resized(self, move_count: int, fill: int = 0) -> "MatrixGame":
        """
        Returns a copy of the game with `move_count` moves per player.

        Shrinking keeps the top-left block. Growing keeps the existing block and
        sets every new cell of both grids to `fill`.
        """
        if isinstance(move_count, bool) or not isinstance(move_count, (int, np.integer)):
            raise TypeError(f"MatrixGame: move_count must be an integer, got {type(move_count).__name__}")
        if move_count not in SUPPORTED_MOVE_COUNTS:
            raise ValueError(f"MatrixGame: move_count must be one of {SUPPORTED_MOVE_COUNTS}, got {move_count}")
        if isinstance(fill, bool) or not isinstance(fill, (int, np.integer)):
            raise TypeError(f"MatrixGame: fill must be an integer, got {type(fill).__name__}")

        kept = min(move_count, self.move_count)
        grids = []
        for payoffs in (self._p1_payoffs, self._p2_payoffs):
            grid = np.full((move_count, move_count), fill, dtype=np.int64)
            grid[:kept, :kept] = payoffs[:kept, :kept]
            grids.append(grid)
        return MatrixGame(move_count, *grids)

    ### Dunder methods ###

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatrixGame):
            return NotImplemented
        return (
            self.move_count == other.move_count
            and np.array_equal(self._p1_payoffs, other._p1_payoffs)
            and np.array_equal(self._p2_payoffs, other._p2_payoffs)
        )

    def __hash__(self) -> int:
        return hash((self.move_count, self._p1_payoffs.tobytes(), self._p2_payoffs.tobytes()))

    def __repr__(self) -> str:
        return (
            f"MatrixGame(move_count={self.move_count}, "
            f"p1_payoffs={self._p1_payoffs.tolist()}, p2_payoffs={self._p2_payoffs.tolist()})"
        )

    def __str__(self) -> str:
        """
        Renders the matrix as a text table with one "p1, p2" pair per cell.
        """
        header = ["P1\\P2"] + [f"Move {j + 1}" for j in range(self.move_count)]
        rows = [header]
        for i in range(self.move_count):
            cells = [f"{self._p1_payoffs[i, j]}, {self._p2_payoffs[i, j]}" for j in range(self.move_count)]
            rows.append([f"Move {i + 1}"] + cells)
        width = max(len(cell) for row in rows for cell in row)
        return "\n".join(" | ".join(cell.rjust(width) for cell in row) for row in rows)
