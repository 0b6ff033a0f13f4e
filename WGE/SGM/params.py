# =============================================================================
# params.py — Wave Parameter Snapshot and Validation
# =============================================================================
#
# WaveParameters is an immutable snapshot owned by the caller.  Every
# generator and writer takes it by value; nothing in WGE mutates it.
#
# VALIDATION ORDER (first failure wins, matching the messages the CLI prints):
#   1. sample_rate > 0
#   2. frequency   > 0  (sine)      |  0 <= frequency < sample_rate / 2  (noise)
#   3. duration    > 0, and short enough for the RIFF size field
#                       (skipped on the single-cycle path)
#   4. 0.0 <= amplitude <= 1.0
#
# Every real-valued field must also be finite; inf and NaN are rejected.
#
# Validation runs before any synthesis or I/O, so a bad parameter set can
# never leave a partial artifact behind.

from __future__ import annotations
import enum
import math
import numbers
from typing import NamedTuple

from WGE.SMM.constants import BYTES_PER_SAMPLE, DEFAULT_AMPLITUDE, MAX_DATA_SIZE
from .errors import InvalidParameter, Result


class WaveKind(enum.Enum):
    """Closed set of waveform shapes.  Add a member + a generator to extend."""
    SINE        = "sine"
    WHITE_NOISE = "noise"

    @classmethod
    def parse(cls, value) -> "WaveKind":
        """Accept a WaveKind, its value ("sine"/"noise") or its name."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for kind in cls:
            if text in (kind.value, kind.name.lower()):
                return kind
        raise InvalidParameter(
            f"Unknown wave kind: {value!r} (expected 'sine' or 'noise')",
            field="wave_kind",
        )


class WaveParameters(NamedTuple):
    sample_rate: int                    # Hz
    frequency:   float                  # Hz: sine pitch, or noise cutoff (0 = none)
    duration:    float                  # seconds
    amplitude:   float = DEFAULT_AMPLITUDE  # fraction of full scale, 0.0-1.0
    wave_kind:   WaveKind = WaveKind.SINE

    @property
    def nyquist(self) -> float:
        return self.sample_rate / 2

    @property
    def total_samples(self) -> int:
        """Sample count of a full render: round(sample_rate * duration)."""
        return int(round(self.sample_rate * self.duration))

    @property
    def samples_per_cycle(self) -> int:
        """Sample count of one sine period: floor(sample_rate / frequency)."""
        return int(math.floor(self.sample_rate / self.frequency))


def check_params(params: WaveParameters, single_cycle: bool = False) -> None:
    """
    Raise InvalidParameter for the first violated invariant.

    Args:
        params:       Parameter snapshot to check.
        single_cycle: True when the caller is about to render one sine cycle;
                      duration is not consulted on that path.
    """
    if not isinstance(params.sample_rate, numbers.Integral) or isinstance(params.sample_rate, bool):
        raise InvalidParameter(
            f"Sample rate must be an integer, got {params.sample_rate!r}",
            field="sample_rate",
        )
    if params.sample_rate <= 0:
        raise InvalidParameter("Sample rate must be greater than 0", field="sample_rate")

    if not isinstance(params.wave_kind, WaveKind):
        raise InvalidParameter(
            f"Unknown wave kind: {params.wave_kind!r}", field="wave_kind",
        )

    freq = params.frequency
    if not math.isfinite(freq):
        raise InvalidParameter("Frequency must be a finite number", field="frequency")
    if params.wave_kind is WaveKind.SINE:
        if freq <= 0:
            raise InvalidParameter("Frequency must be greater than 0", field="frequency")
    else:
        if freq < 0:
            raise InvalidParameter(
                "Noise cutoff frequency must be 0 (unfiltered) or positive",
                field="frequency",
            )
        if freq > 0 and freq >= params.nyquist:
            raise InvalidParameter(
                f"Noise cutoff frequency ({freq:g} Hz) must be below the Nyquist "
                f"frequency ({params.nyquist:g} Hz)",
                field="frequency",
            )

    if not single_cycle:
        if not math.isfinite(params.duration):
            raise InvalidParameter("Duration must be a finite number", field="duration")
        if params.duration <= 0:
            raise InvalidParameter("Duration must be greater than 0", field="duration")
        if params.total_samples * BYTES_PER_SAMPLE > MAX_DATA_SIZE:
            raise InvalidParameter(
                f"Duration {params.duration:g} s at {params.sample_rate} Hz exceeds "
                f"the 4 GiB RIFF size limit",
                field="duration",
            )

    amp = params.amplitude
    if not math.isfinite(amp) or amp < 0.0 or amp > 1.0:
        raise InvalidParameter("Amplitude must be between 0.0 and 1.0", field="amplitude")


def validate(params: WaveParameters, single_cycle: bool = False) -> Result:
    """Non-raising form of check_params(); the Result is falsy on rejection."""
    try:
        check_params(params, single_cycle=single_cycle)
    except InvalidParameter as exc:
        return Result.failure(exc)
    return Result.success("parameters OK")
