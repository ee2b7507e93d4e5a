"""
Discrete Fast Hartley Transform (DFHT)

The Hartley transform is the real-valued counterpart of the Fourier
transform. For N samples:

    H(v) = 1/N * sum_t f(t) * cas(2*pi*v*t/N)      (analysis)
    f(t) =       sum_v H(v) * cas(2*pi*v*t/N)      (synthesis)

with cas(x) = cos(x) + sin(x). Since the kernel is its own inverse, the same
butterfly cascade performs both directions; analysis only adds the 1/N
normalization at the end.

Pipeline for one call:
1. Bit-reversal permutation of the caller's buffer
2. Stage 1 and stage 2 (add/subtract only)
3. Generic stages 3..log2(N), ping-ponging between the caller's buffer and
   a scratch buffer
4. Normalization (analysis only)

The starting buffer of the ping-pong is picked from the parity of log2(N) so
the last stage always writes into the caller's buffer and no final copy is
needed.
"""

import logging
from enum import IntEnum
from typing import Optional, Tuple, Union

import numpy as np
from numba import jit

from .errors import BufferSizeError, ConfigurationError
from .stages import stage_generic, stage_one, stage_two
from .tables import ensure_table_ready, permute

logger = logging.getLogger(__name__)

MIN_SIZE = 8
MAX_SIZE = 65536

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


class Direction(IntEnum):
    """Transform direction. Integer values 0 and 1 are accepted wherever a Direction is."""
    ANALYSIS = 0
    SYNTHESIS = 1


def _validate_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ConfigurationError(f"Transform size must be an integer, got {type(size).__name__}")
    size = int(size)
    if size < MIN_SIZE or size > MAX_SIZE:
        raise ConfigurationError(f"Transform size {size} outside [{MIN_SIZE}, {MAX_SIZE}]")
    if size & (size - 1):
        raise ConfigurationError(f"Transform size {size} is not a power of two")
    return size


@jit(nopython=True, cache=True)
def _power_spectrum(coeffs: np.ndarray, out: np.ndarray) -> float:
    N = len(coeffs)
    # DC has no partner bin; doubling by addition keeps the buffer dtype
    p = coeffs[0] * coeffs[0]
    p = p + p
    out[0] = p
    maxp = p
    for v in range(1, N // 2):
        p = coeffs[v] * coeffs[v] + coeffs[N - v] * coeffs[N - v]
        out[v] = p
        if p > maxp:
            maxp = p
    return maxp


class HartleyTransform:
    """
    Fixed-size Hartley transform engine.

    The engine owns the transform size, the shared sine table and one scratch
    buffer. A single instance is not safe for concurrent calls unless every
    call passes its own ``scratch`` array.

    Parameters
    ----------
    size : int
        Power of two in [8, 65536].
    dtype : numpy dtype
        ``np.float32`` or ``np.float64``. Sample buffers must match it.

    Examples
    --------
    >>> import numpy as np
    >>> engine = HartleyTransform(64, dtype=np.float32)
    >>> x = np.sin(2 * np.pi * 4 * np.arange(64) / 64).astype(np.float32)
    >>> engine.analyze(x)
    >>> spectrum = np.empty(32, dtype=np.float32)
    >>> pmax = engine.power_spectrum(x, spectrum)
    >>> int(np.argmax(spectrum))
    4
    """

    def __init__(self, size: int, dtype=np.float64):
        self.size = _validate_size(size)
        self.n_bits = self.size.bit_length() - 1

        try:
            self.dtype = np.dtype(dtype)
        except TypeError as e:
            raise ConfigurationError(f"Unsupported dtype: {dtype!r}") from e
        if self.dtype not in SUPPORTED_DTYPES:
            raise ConfigurationError(f"Unsupported dtype: {self.dtype.name}")

        self.table = ensure_table_ready(self.size, self.dtype)
        self._scratch = np.zeros(self.size, dtype=self.dtype)

        logger.debug("Configured DFHT: N=%d, %d stages, dtype=%s",
                     self.size, self.n_bits, self.dtype.name)

    def __repr__(self) -> str:
        return f"HartleyTransform(size={self.size}, dtype={self.dtype.name})"

    # ------------------------------------------------------------------
    # Buffer checks
    # ------------------------------------------------------------------

    def _check_buffer(self, buffer, length: int, name: str, writable: bool) -> None:
        if not isinstance(buffer, np.ndarray):
            raise TypeError(f"{name} must be a numpy array, got {type(buffer).__name__}")
        if buffer.ndim != 1 or buffer.shape[0] != length:
            raise BufferSizeError(f"{name} must have shape ({length},), got {buffer.shape}")
        if buffer.dtype != self.dtype:
            raise TypeError(f"{name} dtype {buffer.dtype.name} != engine dtype {self.dtype.name}")
        if writable and not (buffer.flags.writeable and buffer.flags.c_contiguous):
            raise TypeError(f"{name} must be a writeable, contiguous array")

    # ------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------

    def transform(
        self,
        buffer: np.ndarray,
        direction: Union[Direction, int] = Direction.ANALYSIS,
        scratch: Optional[np.ndarray] = None
    ) -> None:
        """
        Hartley transform of ``buffer``, in place.

        Parameters
        ----------
        buffer : np.ndarray
            N samples (analysis) or N coefficients (synthesis). Overwritten
            with the result.
        direction : Direction or int
            ``ANALYSIS`` (0) normalizes by 1/N, ``SYNTHESIS`` (1) does not.
        scratch : np.ndarray, optional
            Work buffer of N elements. Defaults to the engine's own buffer;
            pass one per thread when sharing an engine.
        """
        direction = Direction(direction)
        self._check_buffer(buffer, self.size, "buffer", writable=True)
        if scratch is None:
            scratch = self._scratch
        else:
            self._check_buffer(scratch, self.size, "scratch", writable=True)
        if np.shares_memory(buffer, scratch):
            raise ValueError("buffer and scratch must not overlap")

        logger.debug("DFHT permute, %d elements", self.size)
        permute(buffer, self.n_bits)

        if self.n_bits & 1:
            # odd stage count: stage 1 in place
            stage_one(buffer, buffer)
            z0, z1 = scratch, buffer
        else:
            stage_one(buffer, scratch)
            z0, z1 = buffer, scratch
        stage_two(z1, z0)

        for s in range(3, self.n_bits + 1):
            logger.debug("DFHT stage %d", s)
            stage_generic(z0, z1, s, self.table)
            z0, z1 = z1, z0

        if direction == Direction.ANALYSIS:
            logger.debug("DFHT normalize %d elements", self.size)
            buffer /= self.size

    def analyze(self, buffer: np.ndarray, scratch: Optional[np.ndarray] = None) -> None:
        """Samples -> normalized Hartley coefficients, in place."""
        self.transform(buffer, Direction.ANALYSIS, scratch)

    def synthesize(self, buffer: np.ndarray, scratch: Optional[np.ndarray] = None) -> None:
        """Hartley coefficients -> samples, in place."""
        self.transform(buffer, Direction.SYNTHESIS, scratch)

    # ------------------------------------------------------------------
    # Power spectrum
    # ------------------------------------------------------------------

    def power_spectrum(self, coeffs: np.ndarray, out: np.ndarray) -> float:
        """
        Power spectrum of Hartley coefficients.

        ``out[0] = 2*H(0)**2`` and ``out[v] = H(v)**2 + H(N-v)**2`` for
        0 < v < N/2. The Nyquist bin is not included.

        Parameters
        ----------
        coeffs : np.ndarray
            N Hartley coefficients (read only).
        out : np.ndarray
            N/2 elements, overwritten with the spectrum.

        Returns
        -------
        float
            Largest value written to ``out`` (0.0 for an all-zero input).
            Useful for scaling a display.
        """
        self._check_buffer(coeffs, self.size, "coeffs", writable=False)
        self._check_buffer(out, self.size // 2, "out", writable=True)
        return float(_power_spectrum(coeffs, out))


def configure(size: int, dtype=np.float64) -> HartleyTransform:
    """Build a transform engine for ``size`` points; invalid sizes fail here."""
    return HartleyTransform(size, dtype=dtype)


# ============== Functional wrappers ==============

def _engine_for(x: np.ndarray) -> Tuple[HartleyTransform, np.ndarray]:
    x = np.asarray(x)
    if x.ndim != 1:
        raise BufferSizeError(f"Input must be 1D, got shape {x.shape}")
    dtype = np.float32 if x.dtype == np.float32 else np.float64
    engine = HartleyTransform(x.shape[0], dtype=dtype)
    return engine, np.array(x, dtype=dtype, copy=True, order='C')


def dht(x: np.ndarray) -> np.ndarray:
    """
    Normalized Hartley coefficients of ``x``; ``x`` is left untouched.

    The result is float32 for float32 input and float64 otherwise.
    """
    engine, buf = _engine_for(x)
    engine.analyze(buf)
    return buf


def idht(X: np.ndarray) -> np.ndarray:
    """Inverse of :func:`dht`: samples from Hartley coefficients."""
    engine, buf = _engine_for(X)
    engine.synthesize(buf)
    return buf


def power_spectrum(coeffs: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Power spectrum of Hartley coefficients.

    Returns
    -------
    spectrum : np.ndarray
        N/2 power values.
    max_power : float
        Largest entry of ``spectrum``.
    """
    engine, buf = _engine_for(coeffs)
    out = np.empty(engine.size // 2, dtype=engine.dtype)
    max_power = engine.power_spectrum(buf, out)
    return out, max_power
