"""
Slow O(N^2) reference transforms, used to cross-check the fast path.
"""

import numpy as np

from .spectrum import fourier_coefficients


def slow_dht(x: np.ndarray) -> np.ndarray:
    """Direct evaluation of H(v) = 1/N * sum_t x(t) * cas(2*pi*v*t/N)."""
    x = np.asarray(x, dtype=np.float64)
    N = len(x)
    t = np.arange(N)
    theta = 2 * np.pi * np.outer(t, t) / N
    cas = np.cos(theta) + np.sin(theta)
    return cas @ x / N


def slow_fourier_synthesis(coeffs: np.ndarray) -> np.ndarray:
    """
    Classical Fourier synthesis from Hartley coefficients.

    Sums ``k_cos[v]*cos(2*pi*v*n/N) + k_sin[v]*sin(2*pi*v*n/N)`` over
    v = 0..N/2 for every n. Reproduces the analyzed samples without going
    through the Hartley synthesis.
    """
    coeffs = np.asarray(coeffs, dtype=np.float64)
    k_cos, k_sin = fourier_coefficients(coeffs)
    N = len(coeffs)
    n = np.arange(N)
    v = np.arange(N // 2 + 1)
    theta = 2 * np.pi * np.outer(n, v) / N
    return np.cos(theta) @ k_cos + np.sin(theta) @ k_sin
