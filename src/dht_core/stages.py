"""
Butterfly Stages of the Decimation-in-Time Hartley Transform

Stage s combines pairs of Hartley transforms of length 2**(s-1) into one of
length 2**s. The first two stages need no trigonometric weights (their angles
are multiples of pi/2) and are unrolled; every later stage goes through
``stage_generic``.

All stages read from ``src`` and write to ``dst``. Only ``stage_one`` may be
called with ``src is dst``.
"""

import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def stage_one(src: np.ndarray, dst: np.ndarray) -> None:
    """Size-2 butterflies: sum and difference of each pair."""
    N = len(src)
    for k in range(0, N, 2):
        f0 = src[k]
        f1 = src[k + 1]
        dst[k] = f0 + f1
        dst[k + 1] = f0 - f1


@jit(nopython=True, cache=True)
def stage_two(src: np.ndarray, dst: np.ndarray) -> None:
    """Size-4 butterflies, add/subtract only."""
    N = len(src)
    for k in range(0, N, 4):
        f0 = src[k]
        f1 = src[k + 1]
        f2 = src[k + 2]
        f3 = src[k + 3]
        dst[k] = f0 + f2
        dst[k + 1] = f1 + f3
        dst[k + 2] = f0 - f2
        dst[k + 3] = f1 - f3


@jit(nopython=True, cache=True)
def stage_generic(src: np.ndarray, dst: np.ndarray, s: int, table: np.ndarray) -> None:
    """
    Butterflies of block size 2**s for s >= 3.

    Within a block the first half holds the transform of the even samples and
    the second half that of the odd samples. Element i of the result needs
    the odd half at i (cosine weight) and at half-i (sine weight), so the
    sine source is walked backwards from the block end.

    Parameters
    ----------
    src, dst : np.ndarray
        Distinct buffers of length N.
    s : int
        Stage index, 3 <= s <= log2(N).
    table : np.ndarray
        Sine table from ``ensure_table_ready``; ``table[N/4 + k]`` is
        ``cos(2*pi*k/N)``.
    """
    N = len(src)
    block = 1 << s
    half = block >> 1
    stride = N // block
    quarter = N // 4

    for n in range(0, N, block):
        # angle 0: no weights
        a = src[n]
        b = src[n + half]
        dst[n] = a + b
        dst[n + half] = a - b

        t = 0
        for i in range(1, half):
            t += stride
            corr = src[n + half + i] * table[quarter + t] + src[n + block - i] * table[t]
            a = src[n + i]
            dst[n + i] = a + corr
            dst[n + half + i] = a - corr
