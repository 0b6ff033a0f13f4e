# =============================================================================
# Waveform Generation Engine (WGE)
# =============================================================================
#
# ── PYTHON OWNS THE SAMPLE GRID ──────────────────────────────────────────────
#
# RESPONSIBLE for:
#   - Deterministic Sine Synthesis
#       Sample i is always sin(2*pi*f * i/SR) scaled and truncated toward
#       zero.  Same parameters in, byte-identical PCM out.
#   - White-Noise Synthesis
#       Uniform draws in [-1, 1), optionally shaped by a single-pole
#       low-pass.  The random source is injectable so tests can seed it.
#   - RIFF/WAVE container construction (mono, 16-bit, PCM, 44-byte header)
#   - C source-array export (full render or one sine cycle)
#
# NOT responsible for:
#   - Argument parsing / console output
#       The CLI (WGE/cli.py) and the bridge (WGE/SBM) are callers.
#   - Multi-channel, compressed or streamed audio.
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   caller      → WaveParameters(sample_rate, frequency, duration, amplitude, kind)
#   SGM         → validate() → generate() → int16 numpy buffer
#   SSM         → write_container() / write_source_array()
#   SVM         → read back and verify what was written
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/constants.py        — PCM format constants and CLI defaults
#   SGM/params.py           — WaveKind, WaveParameters, validate()
#   SGM/errors.py           — WaveError hierarchy and Result
#   SGM/synthesizer.py      — sine / white-noise / single-cycle generators
#   SSM/wav_writer.py       — 44-byte header, container writer and reader
#   SSM/carray_writer.py    — C array literal export
#   SVM/wav_check.py        — soundfile-based verification CLI
#   SBM/export_bridge.py    — JSON-in / JSON-out entry point
#   SBM/server.py           — Flask HTTP wrapper around the bridge
#   cli.py                  — command-line front end
# =============================================================================

from WGE.SGM.errors import (
    WaveError, InvalidParameter, UnrepresentableCycle,
    UnsupportedOperation, IOFailure, Result,
)
from WGE.SGM.params import WaveKind, WaveParameters, validate, check_params
from WGE.SGM.synthesizer import (
    generate, generate_sine, generate_white_noise, single_cycle,
)
from WGE.SSM.wav_writer import (
    AudioContainerHeader, build_header, write_container, read_header,
)
from WGE.SSM.carray_writer import render_source_array, write_source_array

__version__ = "1.0.0"

__all__ = [
    "WaveError", "InvalidParameter", "UnrepresentableCycle",
    "UnsupportedOperation", "IOFailure", "Result",
    "WaveKind", "WaveParameters", "validate", "check_params",
    "generate", "generate_sine", "generate_white_noise", "single_cycle",
    "AudioContainerHeader", "build_header", "write_container", "read_header",
    "render_source_array", "write_source_array",
]
