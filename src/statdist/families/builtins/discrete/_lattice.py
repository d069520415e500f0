"""
Helpers shared by the integer-valued discrete families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def integer_mask(x: Any) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.bool_]]:
    """
    Split ``x`` into a float array and a mask of its finite integer entries.

    Entries outside the mask carry no probability mass.
    """
    arr = np.asarray(x, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        mask = np.isfinite(arr) & (arr == np.floor(arr))
    return arr, mask


def lattice_values(k: Any) -> npt.NDArray[Any]:
    """
    Quantile results as ``int64`` when all are finite, else as floats.

    Unbounded families map ``q = 1`` to ``inf``, which only a float array holds.
    """
    arr = np.asarray(k, dtype=np.float64)
    if np.all(np.isfinite(arr)):
        return arr.astype(np.int64)
    return arr
