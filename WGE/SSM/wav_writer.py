# =============================================================================
# wav_writer.py — Mono 16-bit PCM RIFF/WAVE Container
# =============================================================================
#
# Layout is documented in WGE/SMM/constants.py.  Everything in the header is
# derived from (sample_count, sample_rate); the header has no identity of
# its own and is rebuilt for every buffer it precedes.
#
# Samples are written as little-endian int16 regardless of host byte order
# ('<i2' dtype), byte-for-byte after the header, no padding, no extra chunks.

from __future__ import annotations
import os
import struct
from typing import NamedTuple, Sequence, Union

import numpy as np

from WGE.SMM.constants import (
    RIFF_TAG, WAVE_TAG, FMT_TAG, DATA_TAG,
    FMT_CHUNK_SIZE, HEADER_SIZE, HEADER_STRUCT, RIFF_SIZE_BASE, MAX_DATA_SIZE,
    PCM_FORMAT_TAG, NUM_CHANNELS, BLOCK_ALIGN, BYTES_PER_SAMPLE, BITS_PER_SAMPLE,
    INT16_MIN, INT16_MAX,
)
from WGE.SGM.errors import InvalidParameter, IOFailure, Result, WaveError

PathLike = Union[str, "os.PathLike[str]"]


class AudioContainerHeader(NamedTuple):
    riff_size:       int     # 36 + data_size
    format_tag:      int     # 1 = PCM
    channels:        int
    sample_rate:     int
    byte_rate:       int
    block_align:     int
    bits_per_sample: int
    data_size:       int     # bytes of sample data following the header

    @property
    def sample_count(self) -> int:
        return self.data_size // max(self.block_align, 1)

    @property
    def duration(self) -> float:
        return self.sample_count / self.sample_rate if self.sample_rate else 0.0


# ── Header ───────────────────────────────────────────────────────────────────

def build_header(sample_count: int, sample_rate: int) -> bytes:
    """
    Pack the 44-byte header for `sample_count` mono int16 samples.

    Raises:
        InvalidParameter: negative count, non-positive rate, or a data chunk
                          too large for the uint32 size fields.
    """
    if sample_rate <= 0:
        raise InvalidParameter("Sample rate must be greater than 0", field="sample_rate")
    if sample_rate * BLOCK_ALIGN > 0xFFFFFFFF:
        raise InvalidParameter(
            f"Sample rate {sample_rate} Hz does not fit the uint32 byte-rate field",
            field="sample_rate",
        )
    if sample_count < 0:
        raise InvalidParameter("Sample count cannot be negative", field="buffer")

    data_size = sample_count * BYTES_PER_SAMPLE
    if data_size > MAX_DATA_SIZE:
        raise InvalidParameter(
            f"{sample_count} samples exceed the 4 GiB RIFF size limit",
            field="buffer",
        )

    header = struct.pack(
        HEADER_STRUCT,
        RIFF_TAG, RIFF_SIZE_BASE + data_size, WAVE_TAG,
        FMT_TAG, FMT_CHUNK_SIZE,
        PCM_FORMAT_TAG, NUM_CHANNELS,
        sample_rate, sample_rate * BLOCK_ALIGN,
        BLOCK_ALIGN, BITS_PER_SAMPLE,
        DATA_TAG, data_size,
    )
    return header


def parse_header(raw: bytes) -> AudioContainerHeader:
    """Unpack a 44-byte header.  ValueError if the tags do not match."""
    if len(raw) < HEADER_SIZE:
        raise ValueError(f"Header truncated: {len(raw)} of {HEADER_SIZE} bytes")

    (riff, riff_size, wave, fmt, fmt_size, fmt_tag, channels, rate,
     byte_rate, block_align, bits, data, data_size) = struct.unpack(
        HEADER_STRUCT, raw[:HEADER_SIZE],
    )
    if riff != RIFF_TAG:
        raise ValueError("Not a RIFF file")
    if wave != WAVE_TAG:
        raise ValueError("RIFF type is not WAVE")
    if fmt != FMT_TAG or fmt_size != FMT_CHUNK_SIZE:
        raise ValueError("Expected a 16-byte 'fmt ' chunk at offset 12")
    if data != DATA_TAG:
        raise ValueError("Expected the 'data' chunk at offset 36")

    return AudioContainerHeader(
        riff_size=riff_size,
        format_tag=fmt_tag,
        channels=channels,
        sample_rate=rate,
        byte_rate=byte_rate,
        block_align=block_align,
        bits_per_sample=bits,
        data_size=data_size,
    )


def read_header(path: PathLike) -> AudioContainerHeader:
    """Read and parse the first 44 bytes of a container written by WGE."""
    with open(path, "rb") as f:
        return parse_header(f.read(HEADER_SIZE))


# ── Samples ──────────────────────────────────────────────────────────────────

def as_pcm16(buffer: Union[np.ndarray, Sequence[int]]) -> np.ndarray:
    """
    Return `buffer` as a little-endian int16 array.

    Both serializers accept exactly the buffers this accepts:
    1-D, integer-typed, every value inside the int16 range.
    """
    arr = np.asarray(buffer)
    if arr.ndim != 1:
        raise InvalidParameter(
            f"Sample buffer must be 1-D (mono), got shape {arr.shape}", field="buffer",
        )
    if arr.dtype != np.int16 and arr.size:
        if not np.issubdtype(arr.dtype, np.integer):
            raise InvalidParameter(
                f"Sample buffer must hold integers, got {arr.dtype}", field="buffer",
            )
        lo, hi = int(arr.min()), int(arr.max())
        if lo < INT16_MIN or hi > INT16_MAX:
            raise InvalidParameter(
                f"Sample values [{lo}, {hi}] fall outside the int16 range",
                field="buffer",
            )
    return arr.astype("<i2", copy=False)


def to_wav_bytes(buffer: Union[np.ndarray, Sequence[int]], sample_rate: int) -> bytes:
    """Complete container (header + samples) as an in-memory bytes object."""
    pcm = as_pcm16(buffer)
    return build_header(len(pcm), sample_rate) + pcm.tobytes()


def write_container(
    buffer: Union[np.ndarray, Sequence[int]],
    sample_rate: int,
    path: PathLike,
) -> Result:
    """
    Write header + samples to `path`.

    Returns:
        Result, ok=True on success.  On failure the error is one of
        InvalidParameter (nothing opened), or IOFailure (open failed: nothing
        written; write failed: partial file left for the caller to handle).
    """
    try:
        pcm    = as_pcm16(buffer)
        header = build_header(len(pcm), sample_rate)
    except WaveError as exc:
        return Result.failure(exc)

    try:
        f = open(path, "wb")
    except OSError as exc:
        return Result.failure(IOFailure(f"Cannot create file {path}: {exc.strerror or exc}", field="path"))

    try:
        with f:
            f.write(header)
            f.write(pcm.tobytes())
    except OSError as exc:
        return Result.failure(IOFailure(f"Write to {path} failed: {exc.strerror or exc}", field="path"))

    return Result.success(
        f"Wrote {len(pcm)} samples ({HEADER_SIZE + len(pcm) * BYTES_PER_SAMPLE} bytes) to {path}"
    )
