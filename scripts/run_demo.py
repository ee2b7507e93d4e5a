#!/usr/bin/env python3
"""
DFHT Demo: analysis, power spectrum and re-synthesis of a test tone

Each run transforms a sine whose frequency is shifted by a growing fraction
of a cycle, which makes the leakage effect visible in the power spectrum:

    x[i] = amplitude * sin((base + run * step) * 2*pi * i / N)

For every run the script shows:
  1. The power spectrum (with bars scaled to its maximum)
  2. Optionally the Hartley and Fourier coefficients
  3. The error of a classical (slow) Fourier synthesis
  4. The error of the Hartley re-synthesis

Usage:
    python scripts/run_demo.py [--config CONFIG_PATH] [--size N] [--runs R] [--verbose]
"""

import sys
import argparse
from pathlib import Path

import numpy as np

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from src.dht_core import (
    configure,
    fourier_coefficients,
    slow_fourier_synthesis,
)
from src.utils import load_config, setup_logging

console = Console()

BAR_WIDTH = 40


def make_tone(size: int, amplitude: float, frequency: float, dtype) -> np.ndarray:
    """Test tone with ``frequency`` cycles over ``size`` samples."""
    i = np.arange(size)
    return (amplitude * np.sin(frequency * 2 * np.pi * i / size)).astype(dtype)


def spectrum_table(spectrum: np.ndarray, pmax: float, title: str) -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Bin", justify="right")
    table.add_column("Power", justify="right")
    table.add_column("", justify="left")

    for v, p in enumerate(spectrum):
        # all-zero spectrum: nothing to scale
        width = int(BAR_WIDTH * p / pmax) if pmax > 0 else 0
        table.add_row(str(v), f"{p:.4f}", "[cyan]" + "#" * width + "[/cyan]")
    return table


def coefficient_table(coeffs: np.ndarray) -> Table:
    k_cos, k_sin = fourier_coefficients(coeffs)
    table = Table(title="Hartley / Fourier coefficients", box=box.SIMPLE)
    table.add_column("v", justify="right")
    table.add_column("H(v)", justify="right")
    table.add_column("K_cos", justify="right")
    table.add_column("K_sin", justify="right")
    for v in range(len(coeffs)):
        if v < len(k_cos):
            table.add_row(str(v), f"{coeffs[v]:.5f}", f"{k_cos[v]:.5f}", f"{k_sin[v]:.5f}")
        else:
            table.add_row(str(v), f"{coeffs[v]:.5f}", "", "")
    return table


def run_demo(config_path: str, size: int = None, runs: int = None, verbose: bool = False):
    config = load_config(config_path)
    if size is not None:
        config.transform.size = size
    if runs is not None:
        config.demo.runs = runs

    level = 'DEBUG' if verbose else config.logging.level
    logger = setup_logging(log_file=config.logging.log_file, level=level, name='src')
    logger.info("DFHT demo: %s", config.to_dict())

    engine = configure(config.transform.size, dtype=config.transform.dtype)
    N = engine.size
    demo = config.demo
    spectrum = np.empty(N // 2, dtype=engine.dtype)

    summary = Table(title=f"DFHT demo, N={N}", box=box.ROUNDED)
    summary.add_column("Run", justify="right")
    summary.add_column("Frequency", justify="right")
    summary.add_column("Peak bin", justify="right")
    summary.add_column("Max power", justify="right")
    summary.add_column("Slow synthesis err", justify="right")
    summary.add_column("Re-synthesis err", justify="right")

    for run in range(demo.runs):
        frequency = demo.base_frequency + run * demo.frequency_step
        original = make_tone(N, demo.amplitude, frequency, engine.dtype)
        data = original.copy()

        engine.analyze(data)
        pmax = engine.power_spectrum(data, spectrum)

        console.print(spectrum_table(
            spectrum, pmax,
            f"Power spectrum, run {run} (frequency {frequency:.2f}, max {pmax:.4f})"
        ))
        if demo.show_coefficients:
            console.print(coefficient_table(data))

        slow = slow_fourier_synthesis(data)
        slow_err = float(np.abs(slow - original).max())

        engine.synthesize(data)
        resyn_err = float(np.abs(data - original).max())

        logger.info("run %d: frequency=%.2f, pmax=%.4f, slow_err=%.2e, resyn_err=%.2e",
                    run, frequency, pmax, slow_err, resyn_err)
        summary.add_row(
            str(run),
            f"{frequency:.2f}",
            str(int(np.argmax(spectrum))),
            f"{pmax:.4f}",
            f"{slow_err:.2e}",
            f"{resyn_err:.2e}",
        )

    console.print(summary)


def main():
    parser = argparse.ArgumentParser(description="DFHT Demo")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'configs' / 'default.yaml'),
        help='Path to configuration file'
    )
    parser.add_argument('--size', type=int, default=None, help='Override transform size')
    parser.add_argument('--runs', type=int, default=None, help='Override number of runs')
    parser.add_argument('--verbose', action='store_true', help='Log every transform step')
    args = parser.parse_args()

    try:
        run_demo(args.config, size=args.size, runs=args.runs, verbose=args.verbose)
        console.print(Panel.fit(
            "[bold green]DFHT demo completed![/bold green]",
            border_style="green"
        ))
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise


if __name__ == '__main__':
    main()
