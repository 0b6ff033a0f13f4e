# =============================================================================
# carray_writer.py — C Source Array Export
# =============================================================================
#
# Renders an int16 sample buffer as a C translation unit:
#
#   // <description comments>
#
#   #include <stdint.h>
#
#   const int16_t <name>[] = {
#       v0, v1, ..., v15,
#       v16, ...
#   };
#
#   const size_t <name>_size = N;
#   const double <name>_frequency = F;          ← single-cycle only
#   const uint32_t <name>_sample_rate = SR;     ← single-cycle only
#
# FORMAT CONTRACT (byte-for-byte compatible with existing reference files):
#   - exactly VALUES_PER_LINE (16) values per line, last line may be short
#   - ", " between values on a line, "," at the end of every full line
#   - 4-space indentation, "\n" line endings, ASCII only
#   - real numbers printed %g-style (6 significant digits, no trailing zeros)
#
# Purely textual: the buffer is never regenerated or altered here.

from __future__ import annotations
import os
import re
from typing import Sequence, Union

import numpy as np

from WGE.SMM.constants import (
    VALUES_PER_LINE, ARRAY_INDENT, ARRAY_SEPARATOR, ARRAY_INCLUDE, ARRAY_ELEM_TYPE,
    DEFAULT_PREVIEW,
)
from WGE.SGM.errors import (
    InvalidParameter, IOFailure, Result, UnsupportedOperation, WaveError,
)
from WGE.SGM.params import WaveKind, WaveParameters
from .wav_writer import as_pcm16

_C_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")


def _header_comments(params: WaveParameters, count: int, single_cycle: bool) -> list[str]:
    if single_cycle:
        return [
            "// Generated C array for sine wave data (1 cycle)",
            f"// Sample rate: {params.sample_rate} Hz",
            f"// Frequency: {params.frequency:g} Hz",
            f"// Amplitude: {params.amplitude:g}",
            f"// Samples per cycle: {count}",
            f"// Cycle duration: {1.0 / params.frequency:g} seconds",
        ]

    if params.wave_kind is WaveKind.WHITE_NOISE:
        cutoff = (f"{params.frequency:g} Hz" if params.frequency > 0
                  else "none (unfiltered)")
        lines = [
            "// Generated C array for white noise data",
            f"// Sample rate: {params.sample_rate} Hz",
            f"// Cutoff frequency: {cutoff}",
        ]
    else:
        lines = [
            "// Generated C array for sine wave data",
            f"// Sample rate: {params.sample_rate} Hz",
            f"// Frequency: {params.frequency:g} Hz",
        ]
    lines += [
        f"// Amplitude: {params.amplitude:g}",
        f"// Duration: {params.duration:g} seconds",
        f"// Total samples: {count}",
    ]
    return lines


def _value_lines(values: list[int]) -> list[str]:
    rows = [
        ARRAY_INDENT + ARRAY_SEPARATOR.join(str(v) for v in values[i:i + VALUES_PER_LINE])
        for i in range(0, len(values), VALUES_PER_LINE)
    ]
    return [",\n".join(rows)] if rows else []


def render_source_array(
    buffer: Union[np.ndarray, Sequence[int]],
    params: WaveParameters,
    identifier: str,
    single_cycle: bool = False,
) -> str:
    """
    Build the C source text for `buffer`.

    Args:
        buffer:       int16 samples (already synthesized).
        params:       Parameters the buffer was rendered from, used only
                      for the descriptive comments and trailer constants.
        identifier:   C identifier for the array; trailers derive from it.
        single_cycle: Describe the buffer as one sine cycle and append the
                      _frequency / _sample_rate trailers.

    Raises:
        UnsupportedOperation: single_cycle requested for a non-sine wave.
        InvalidParameter:     identifier is not a valid C identifier, or the
                              buffer is not 1-D integer data within int16.
    """
    if single_cycle and params.wave_kind is not WaveKind.SINE:
        raise UnsupportedOperation(
            "Single-cycle C array export is only supported for sine waves",
            field="wave_kind",
        )
    if not _C_IDENTIFIER.match(identifier or ""):
        raise InvalidParameter(
            f"Array name {identifier!r} is not a valid C identifier", field="identifier",
        )

    values = as_pcm16(buffer).tolist()
    count  = len(values)

    out = _header_comments(params, count, single_cycle)
    out += [
        "",
        ARRAY_INCLUDE,
        "",
        f"const {ARRAY_ELEM_TYPE} {identifier}[] = {{",
        *_value_lines(values),
        "};",
        "",
        f"const size_t {identifier}_size = {count};",
    ]
    if single_cycle:
        out += [
            f"const double {identifier}_frequency = {params.frequency:g};",
            f"const uint32_t {identifier}_sample_rate = {params.sample_rate};",
        ]
    return "\n".join(out) + "\n"


def write_source_array(
    buffer: Union[np.ndarray, Sequence[int]],
    params: WaveParameters,
    path: Union[str, "os.PathLike[str]"],
    identifier: str,
    single_cycle: bool = False,
) -> Result:
    """
    Write render_source_array() output to `path`.

    An unsupported request (single-cycle noise) or a bad identifier is
    rejected before the destination is opened, so no file is created.
    """
    try:
        text = render_source_array(buffer, params, identifier, single_cycle=single_cycle)
    except WaveError as exc:
        return Result.failure(exc)

    try:
        f = open(path, "w", encoding="ascii", newline="\n")
    except OSError as exc:
        return Result.failure(IOFailure(f"Cannot create file {path}: {exc.strerror or exc}", field="path"))

    try:
        with f:
            f.write(text)
    except OSError as exc:
        return Result.failure(IOFailure(f"Write to {path} failed: {exc.strerror or exc}", field="path"))

    return Result.success(f"Wrote {identifier}[{len(buffer)}] to {path}")


def format_preview(buffer: Union[np.ndarray, Sequence[int]], count: int = DEFAULT_PREVIEW) -> str:
    """First `count` samples as an indexed console listing."""
    values = np.asarray(buffer).tolist()
    shown  = values[:max(count, 0)]
    lines  = [f"PCM data (first {len(shown)} of {len(values)} samples):"]
    for i, v in enumerate(shown):
        lines.append(f"  [{i:5d}] {int(v):7d}")
    if len(values) > len(shown):
        lines.append(f"  ... ({len(values) - len(shown)} more)")
    return "\n".join(lines)
