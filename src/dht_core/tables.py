"""
Precomputed Tables for the Fast Hartley Transform

Two pieces of state are shared by every transform of a given size:

1. The sine table. It holds ``3*(N/4)+1`` samples of ``sin(2*pi*i/N)``;
   the butterfly stages read the sine branch from its start and the cosine
   branch a quarter period further in, so no separate cosine table is kept.
2. The bit-reversal permutation that brings the input into
   decimation-in-time order before the first stage.

Tables are cached process-wide per ``(size, dtype)`` and built exactly once,
even when several threads configure engines at the same time.
"""

import logging
import math
import threading
from typing import Dict, Tuple

import numpy as np
from numba import jit

logger = logging.getLogger(__name__)

_TABLE_LOCK = threading.Lock()
_TABLES: Dict[Tuple[int, str], np.ndarray] = {}


def table_length(size: int) -> int:
    """Number of sine samples needed by a transform of ``size`` points."""
    return 3 * (size // 4) + 1


def _build_table(size: int, dtype: np.dtype) -> np.ndarray:
    # Evaluate in double precision and round once into the target dtype.
    i = np.arange(table_length(size), dtype=np.float64)
    table = np.sin(2.0 * math.pi * i / size).astype(dtype)
    table.flags.writeable = False
    return table


def ensure_table_ready(size: int, dtype=np.float64) -> np.ndarray:
    """
    Return the shared sine table for ``size``, building it on first use.

    Parameters
    ----------
    size : int
        Transform length N (validated by the caller).
    dtype : numpy dtype
        Element type of the table; matches the engine's sample buffers.

    Returns
    -------
    np.ndarray
        Read-only array with ``table[i] == sin(2*pi*i/N)``.
    """
    dtype = np.dtype(dtype)
    key = (size, dtype.str)

    table = _TABLES.get(key)
    if table is not None:
        return table

    with _TABLE_LOCK:
        table = _TABLES.get(key)
        if table is None:
            logger.debug("Building sine table: N=%d, %d entries, dtype=%s",
                         size, table_length(size), dtype.name)
            table = _build_table(size, dtype)
            _TABLES[key] = table
    return table


@jit(nopython=True, cache=True)
def reverse_bits(x: int, n_bits: int) -> int:
    """Reverse the low ``n_bits`` bits of x."""
    result = 0
    for _ in range(n_bits):
        result = (result << 1) | (x & 1)
        x >>= 1
    return result


@jit(nopython=True, cache=True)
def permute(buffer: np.ndarray, n_bits: int) -> None:
    """
    In-place bit-reversal permutation ('perfect shuffle').

    Each pair is swapped once, from the lower index; fixed points stay put.
    Applying it twice restores the original order.
    """
    N = len(buffer)
    for i in range(N):
        r = reverse_bits(i, n_bits)
        if r > i:
            tmp = buffer[r]
            buffer[r] = buffer[i]
            buffer[i] = tmp
