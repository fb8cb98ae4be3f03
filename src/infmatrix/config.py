import numpy as np
from typing import Any, Literal
from dataclasses import dataclass

from .errors import InvalidPruneModeError, UnsupportedDefaultError


PRUNE_MODES = ['immediate', 'lazy']


@dataclass(frozen=True)
class SparseConfig:
    """
    Configuration for sparse vectors and matrices.

    This class defines the value treated as "unoccupied" and how the matrix
    disposes of rows whose last occupied cell has been erased.
    """

    default: Any = 0
    """Value returned for cells that were never written. Cells holding it are not stored."""

    prune: Literal['immediate', 'lazy'] = 'immediate'
    """Row pruning policy for SparseMatrix:
    - 'immediate': drop a row in the same write that empties it, nrows() is always exact
    - 'lazy': keep emptied rows until compact() or the start of an iteration
    """

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.prune not in PRUNE_MODES:
            raise InvalidPruneModeError(self.prune, PRUNE_MODES)
        # "value == default" must be a plain truth value for the default itself
        if isinstance(self.default, np.ndarray):
            raise UnsupportedDefaultError(self.default, "array defaults compare elementwise")
        try:
            self_equal = self.default == self.default
        except Exception as e:
            raise UnsupportedDefaultError(self.default, f"default cannot be compared: {e}") from e
        if not isinstance(self_equal, (bool, np.bool_)):
            raise UnsupportedDefaultError(self.default, f"default == default returned {type(self_equal).__name__}, not bool")
        if not self_equal:
            raise UnsupportedDefaultError(self.default, "default is not equal to itself")
