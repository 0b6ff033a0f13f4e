# =============================================================================
# synthesizer.py — PCM Sample Synthesis
# =============================================================================
#
# Produces int16 numpy buffers from a WaveParameters snapshot.
#
# SAMPLE GRID (shared by every generator):
#   Sample i sits at t = i / sample_rate.  The index is the only time base:
#   no phase accumulator, so there is no drift however long the render is.
#
# QUANTISATION:
#   value = trunc(x * amplitude * FULL_SCALE)  cast to int16
#   Truncation toward zero (not round-to-nearest) is kept for compatibility
#   with existing reference output.  |x| <= 1 for both shapes, so the result
#   never leaves [-FULL_SCALE, +FULL_SCALE] and no clamping is applied.
#
# SINE:
#   x[i] = sin(2*pi * frequency * t)             deterministic
#
# WHITE NOISE:
#   u[i] ~ Uniform[-1.0, 1.0)                    non-deterministic by default
#   frequency == 0 → x = u                       (full band)
#   frequency  > 0 → single-pole low-pass:
#       r     = frequency / (sample_rate / 2)
#       alpha = exp(-2*pi * r)
#       y[i]  = alpha * y[i-1] + (1 - alpha) * u[i],   y[-1] = 0
#   y is a convex blend of values in [-1, 1), so it stays in [-1, 1).

from __future__ import annotations
import math
from typing import Callable, Optional

import numpy as np

from WGE.SMM.constants import FULL_SCALE, NOISE_LOW, NOISE_HIGH
from .errors import UnrepresentableCycle, UnsupportedOperation
from .params import WaveKind, WaveParameters, check_params


def _to_int16(values: np.ndarray) -> np.ndarray:
    """Scale-free cast: truncate toward zero, then store as int16."""
    return np.trunc(values).astype(np.int16)


def _sine_samples(params: WaveParameters, count: int) -> np.ndarray:
    t = np.arange(count, dtype=np.float64) / params.sample_rate
    s = np.sin(2.0 * math.pi * params.frequency * t)
    return _to_int16(s * params.amplitude * FULL_SCALE)


def _one_pole_lowpass(x: np.ndarray, alpha: float) -> np.ndarray:
    """y[i] = alpha * y[i-1] + (1 - alpha) * x[i], starting from y[-1] = 0."""
    gain = 1.0 - alpha
    out  = np.empty_like(x)
    prev = 0.0
    # Recursive: each output depends on the previous one, so no vectorising.
    for i, xi in enumerate(x.tolist()):
        prev = alpha * prev + gain * xi
        out[i] = prev
    return out


# ── Public generators ────────────────────────────────────────────────────────

def generate_sine(params: WaveParameters) -> np.ndarray:
    """
    Render round(sample_rate * duration) samples of a sine tone.

    Returns:
        1-D int16 numpy array.  Identical parameters always give an
        identical array.
    """
    check_params(params)
    return _sine_samples(params, params.total_samples)


def generate_white_noise(
    params: WaveParameters,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Render round(sample_rate * duration) samples of (optionally filtered)
    white noise.

    Args:
        params: frequency is the low-pass cutoff; 0 leaves the noise unfiltered.
        rng:    Random source.  Anything with a numpy-style
                ``uniform(low, high, size)`` method works; tests pass a
                seeded ``np.random.default_rng(seed)`` or a canned stub.
                When omitted a fresh, OS-seeded generator is used per call.

    Returns:
        1-D int16 numpy array.
    """
    check_params(params)
    if rng is None:
        rng = np.random.default_rng()

    n = params.total_samples
    x = np.asarray(rng.uniform(NOISE_LOW, NOISE_HIGH, n), dtype=np.float64)

    if params.frequency > 0:
        ratio = params.frequency / params.nyquist
        alpha = math.exp(-2.0 * math.pi * ratio)
        x = _one_pole_lowpass(x, alpha)

    return _to_int16(x * params.amplitude * FULL_SCALE)


# kind → generator(params, rng).  Extending WaveKind means adding a row here.
_GENERATORS: dict[WaveKind, Callable[..., np.ndarray]] = {
    WaveKind.SINE:        lambda params, rng: generate_sine(params),
    WaveKind.WHITE_NOISE: generate_white_noise,
}


def generate(
    params: WaveParameters,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Dispatch to the generator for params.wave_kind."""
    check_params(params)
    return _GENERATORS[params.wave_kind](params, rng)


def single_cycle(params: WaveParameters) -> np.ndarray:
    """
    Render exactly one sine period: floor(sample_rate / frequency) samples.

    duration is ignored.  Sample values match generate_sine() index for index.

    Raises:
        UnsupportedOperation: wave_kind is not SINE.
        InvalidParameter:     any other invariant fails.
        UnrepresentableCycle: frequency > sample_rate, so the period is
                              shorter than one sample.
    """
    if params.wave_kind is not WaveKind.SINE:
        raise UnsupportedOperation(
            f"Single-cycle rendering is only defined for sine waves, "
            f"not {getattr(params.wave_kind, 'value', params.wave_kind)!r}",
            field="wave_kind",
        )
    check_params(params, single_cycle=True)

    count = params.samples_per_cycle
    if count == 0:
        raise UnrepresentableCycle(
            "Cannot generate cycle data - frequency too high for sample rate "
            f"({params.frequency:g} Hz at {params.sample_rate} Hz)",
            field="frequency",
        )
    return _sine_samples(params, count)
