"""
DHT Core Module - Hand-written Discrete Fast Hartley Transform

This module provides a from-scratch, numba-accelerated implementation of the
radix-2 decimation-in-time Hartley transform: one routine for analysis and
synthesis of real-valued signals, plus the power spectrum and the mapping to
Fourier cosine/sine coefficients.

Modules:
    - tables: shared sine table and bit-reversal permutation
    - stages: butterfly stages of the cascade
    - dht: transform engine and functional wrappers
    - spectrum: Fourier coefficients and phase from Hartley coefficients
    - reference: slow O(N^2) transforms for verification
"""

from .errors import ConfigurationError, BufferSizeError
from .dht import (
    HartleyTransform,
    Direction,
    configure,
    dht,
    idht,
    power_spectrum,
    MIN_SIZE,
    MAX_SIZE,
)
from .spectrum import fourier_coefficients, phase_spectrum
from .reference import slow_dht, slow_fourier_synthesis

__all__ = [
    # Engine
    'HartleyTransform',
    'Direction',
    'configure',
    'MIN_SIZE',
    'MAX_SIZE',
    # Functional API
    'dht',
    'idht',
    'power_spectrum',
    'fourier_coefficients',
    'phase_spectrum',
    # Reference
    'slow_dht',
    'slow_fourier_synthesis',
    # Errors
    'ConfigurationError',
    'BufferSizeError',
]

__version__ = '1.0.0'
