"""
Hartley <-> Fourier coefficient mapping.

For 0 < v < N/2 the Hartley bins v and N-v carry one Fourier component:

    E(v) = H(v) + H(N-v)      (cosine weight)
    O(v) = H(v) - H(N-v)      (sine weight)

so that f(t) = sum_{v=0}^{N/2} E(v) cos(2*pi*v*t/N) + O(v) sin(2*pi*v*t/N),
with E(0) = H(0), E(N/2) = H(N/2) and O(0) = O(N/2) = 0.
"""

from typing import Tuple

import numpy as np

from .errors import BufferSizeError


def _check_coeffs(coeffs) -> np.ndarray:
    coeffs = np.asarray(coeffs)
    if coeffs.ndim != 1:
        raise BufferSizeError(f"Coefficients must be 1D, got shape {coeffs.shape}")
    N = coeffs.shape[0]
    if N < 2 or N & (N - 1):
        raise BufferSizeError(f"Coefficient count {N} is not a power of two")
    return coeffs


def fourier_coefficients(coeffs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Cosine and sine coefficients from Hartley coefficients.

    Parameters
    ----------
    coeffs : np.ndarray
        N Hartley coefficients, as left by an analysis transform.

    Returns
    -------
    k_cos, k_sin : np.ndarray
        Arrays of length N/2 + 1, indexed by frequency bin 0..N/2.
    """
    coeffs = _check_coeffs(coeffs)
    N = coeffs.shape[0]
    half = N // 2

    h = coeffs[:half + 1]
    # H(N-v) for v = 0..N/2; bin 0 pairs with itself
    h_mirror = np.concatenate((coeffs[:1], coeffs[:half - 1:-1]))

    k_cos = h + h_mirror
    k_sin = h - h_mirror
    k_cos[0] = coeffs[0]
    k_cos[half] = coeffs[half]
    k_sin[0] = 0
    k_sin[half] = 0
    return k_cos, k_sin


def phase_spectrum(coeffs: np.ndarray) -> np.ndarray:
    """
    Phase angle per bin, ``atan2(H(v) - H(N-v), H(v) + H(N-v))``.

    Returns N/2 values matching the bins of the power spectrum. The DC bin
    has phase 0.
    """
    k_cos, k_sin = fourier_coefficients(coeffs)
    phase = np.arctan2(k_sin, k_cos)[:-1]
    phase[0] = 0
    return phase
