# src/matrixgame/utils/utils.py

import numpy as np


def is_move(value, move_count: int) -> bool:
    """Checks that value is an integer move in [1, move_count]."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return bool(1 <= value <= move_count)

def as_payoff_grid(values, move_count: int, name: str = "payoffs") -> np.ndarray:
    """
    Converts the given values into a read-only integer payoff grid.

    Parameters
    ----------
    values : array_like
        Nested sequence or array of payoffs, indexed [row][col].
    move_count : int
        Expected side length of the square grid.
    name : str, optional
        Name used in error messages.

    Returns
    -------
    np.ndarray
        Copy of the values as a non-writeable int64 array of shape (move_count, move_count).
    """
    try:
        grid = np.array(values)
    except ValueError as e:
        raise ValueError(f"MatrixGame: {name} must be a square grid of side {move_count}") from e

    if grid.shape != (move_count, move_count):
        raise ValueError(f"MatrixGame: {name} must have shape ({move_count}, {move_count}), got {grid.shape}")
    if grid.dtype.kind == "f":
        if not np.all(np.isfinite(grid)):
            raise ValueError(f"MatrixGame: {name} must only contain finite payoffs")
        if not np.all(grid == np.round(grid)):
            raise ValueError(f"MatrixGame: {name} must only contain integer payoffs")
    elif grid.dtype.kind not in "iu":
        raise TypeError(f"MatrixGame: {name} must contain integer payoffs, got dtype {grid.dtype}")

    # float(INT64_MAX) rounds up to 2**63, so compare floats against the exclusive bound
    bounds = np.iinfo(np.int64)
    if grid.dtype.kind == "f":
        out_of_range = np.any(grid >= 2.0**63) or np.any(grid < -2.0**63)
    else:
        out_of_range = np.any(grid > bounds.max) or np.any(grid < bounds.min)
    if out_of_range:
        raise ValueError(f"MatrixGame: {name} payoffs out of range")

    grid = grid.astype(np.int64)
    grid.flags.writeable = False
    return grid
