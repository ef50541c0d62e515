# src/matrixgame/deviation_path.py

from dataclasses import dataclass

CYCLE_MARKER = " (cycle detected)"

@dataclass
class DeviationPath:
    """
    Represents the result of a best-response deviation simulation.

    Attributes
    ----------
    states : list[tuple[int, int]]
        Visited joint states (p1_move, p2_move), 1-based. The first entry is the start
        square, the second the square after the forced deviation.
    cycle_detected : bool
        True if the trace ended because a joint state was visited a second time.
        The repeated state is the last entry of states.
    reached_fixed_point : bool
        True if the trace ended because the acting player kept their move.
    """

    states: list[tuple[int, int]]
    cycle_detected: bool = False
    reached_fixed_point: bool = False

    @staticmethod
    def label(state: tuple[int, int]) -> str:
        return f"Move{state[0]},Move{state[1]}"

    @property
    def labels(self) -> list[str]:
        """
        State labels in visiting order, the last one suffixed with the cycle marker
        if the trace ended on a repeated state.
        """
        labels = [self.label(state) for state in self.states]
        if self.cycle_detected:
            labels[-1] += CYCLE_MARKER
        return labels

    @property
    def final_state(self) -> tuple[int, int]:
        return self.states[-1]

    def __len__(self) -> int:
        return len(self.states)
