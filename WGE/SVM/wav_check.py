#!/usr/bin/env python3
# =============================================================================
# wav_check.py — Container Verifier
# =============================================================================
#
# Reads a mono 16-bit WAV two ways and reports whether they agree:
#
#   [1] Header    — WGE's own 44-byte parser (SSM.wav_writer.parse_header)
#   [2] Decoder   — soundfile (libsndfile), samples read back as int16
#   [3] Signal    — peak, RMS, zero-crossing frequency estimate (numpy)
#   [4] VERDICT   — PASS / FAIL with reasons
#
# Usage:
#   python -m WGE.SVM.wav_check output.wav
#   python -m WGE.SVM.wav_check output.wav --expect-rate 44100 --expect-freq 440
#
# The zero-crossing estimate is only meaningful for a sine; for noise it
# reports the mean crossing rate, which is still a useful sanity figure.
# =============================================================================

from __future__ import annotations
import argparse
import os
import sys
from typing import NamedTuple, Optional

import numpy as np
import soundfile as sf

from WGE.SMM.constants import (
    HEADER_SIZE, NUM_CHANNELS, BITS_PER_SAMPLE, PCM_FORMAT_TAG, RIFF_SIZE_BASE,
)
from WGE.SSM.wav_writer import AudioContainerHeader, read_header

DIVIDER = "=" * 68
FREQ_TOLERANCE = 0.02       # ±2% on the zero-crossing estimate


class WavReport(NamedTuple):
    path:          str
    file_size:     int
    header:        AudioContainerHeader
    sf_rate:       int
    sf_channels:   int
    sf_subtype:    str
    samples:       np.ndarray
    peak:          int
    rms:           float
    est_frequency: Optional[float]      # None when there are too few crossings


def estimate_frequency(samples: np.ndarray, sample_rate: int) -> Optional[float]:
    """
    Zero-crossing frequency estimate: a periodic signal crosses zero twice
    per cycle, so f ≈ crossings / (2 * duration).
    """
    if len(samples) < 2 or sample_rate <= 0:
        return None
    s = np.sign(samples.astype(np.int32))
    s[s == 0] = 1
    crossings = int(np.count_nonzero(np.diff(s)))
    if crossings < 2:
        return None
    return crossings / (2.0 * len(samples) / sample_rate)


def inspect_wav(path: str) -> WavReport:
    """Parse `path` with both readers and compute signal statistics."""
    header = read_header(path)
    info   = sf.info(path)
    data, sr = sf.read(path, dtype="int16", always_2d=False)
    samples = np.asarray(data, dtype=np.int16)
    if samples.ndim > 1:
        samples = samples[:, 0]

    if samples.size:
        peak = int(np.max(np.abs(samples.astype(np.int32))))
        rms  = float(np.sqrt(np.mean(samples.astype(np.float64) ** 2)))
    else:
        peak, rms = 0, 0.0

    return WavReport(
        path=str(path),
        file_size=os.path.getsize(path),
        header=header,
        sf_rate=int(sr),
        sf_channels=int(info.channels),
        sf_subtype=str(info.subtype),
        samples=samples,
        peak=peak,
        rms=rms,
        est_frequency=estimate_frequency(samples, int(sr)),
    )


def verdict(
    report: WavReport,
    expect_rate: Optional[int] = None,
    expect_freq: Optional[float] = None,
) -> list[str]:
    """Return the list of failed checks (empty = PASS)."""
    h = report.header
    reasons: list[str] = []

    if h.format_tag != PCM_FORMAT_TAG:
        reasons.append(f"format tag {h.format_tag} is not PCM ({PCM_FORMAT_TAG})")
    if h.channels != NUM_CHANNELS:
        reasons.append(f"header declares {h.channels} channels, expected {NUM_CHANNELS}")
    if h.bits_per_sample != BITS_PER_SAMPLE:
        reasons.append(f"header declares {h.bits_per_sample}-bit, expected {BITS_PER_SAMPLE}")
    if h.riff_size != RIFF_SIZE_BASE + h.data_size:
        reasons.append(f"RIFF size {h.riff_size} != {RIFF_SIZE_BASE} + data size {h.data_size}")
    if report.file_size != HEADER_SIZE + h.data_size:
        reasons.append(
            f"file is {report.file_size} bytes, header implies {HEADER_SIZE + h.data_size}"
        )
    if report.sf_rate != h.sample_rate:
        reasons.append(f"soundfile rate {report.sf_rate} != header rate {h.sample_rate}")
    if len(report.samples) != h.sample_count:
        reasons.append(
            f"soundfile decoded {len(report.samples)} samples, header implies {h.sample_count}"
        )
    if expect_rate is not None and h.sample_rate != expect_rate:
        reasons.append(f"sample rate {h.sample_rate} Hz, expected {expect_rate} Hz")
    if expect_freq is not None:
        est = report.est_frequency
        if est is None:
            reasons.append("too few zero crossings to estimate frequency")
        elif abs(est - expect_freq) > expect_freq * FREQ_TOLERANCE:
            reasons.append(
                f"estimated {est:.1f} Hz, expected {expect_freq:g} Hz "
                f"(±{FREQ_TOLERANCE * 100:.0f}%)"
            )
    return reasons


def run_check(
    path: str,
    expect_rate: Optional[int] = None,
    expect_freq: Optional[float] = None,
) -> bool:
    """Print a full report for `path`.  True if every check passes."""
    print(f"\n{DIVIDER}")
    print("  WGE Container Check")
    print(DIVIDER)

    if not os.path.exists(path):
        print(f"  [!!] File not found: {path}")
        return False

    try:
        report = inspect_wav(path)
    except (ValueError, RuntimeError, OSError) as exc:
        print(f"  [!!] Cannot read {path}: {exc}")
        return False

    h = report.header
    print(f"  File       : {os.path.basename(path)}  ({report.file_size:,} bytes)")
    print(f"\n  -- Header --")
    print(f"  Format tag : {h.format_tag}")
    print(f"  Channels   : {h.channels}")
    print(f"  Rate       : {h.sample_rate} Hz   (byte rate {h.byte_rate})")
    print(f"  Bits       : {h.bits_per_sample}   (block align {h.block_align})")
    print(f"  Data size  : {h.data_size:,} bytes  ({h.sample_count:,} samples, {h.duration:.4f} s)")

    print(f"\n  -- soundfile --")
    print(f"  Rate       : {report.sf_rate} Hz")
    print(f"  Channels   : {report.sf_channels}")
    print(f"  Subtype    : {report.sf_subtype}")

    print(f"\n  -- Signal --")
    print(f"  Peak       : {report.peak}")
    print(f"  RMS        : {report.rms:.1f}")
    if report.est_frequency is None:
        print(f"  Est. freq  : (too few zero crossings)")
    else:
        print(f"  Est. freq  : {report.est_frequency:.1f} Hz")

    reasons = verdict(report, expect_rate=expect_rate, expect_freq=expect_freq)

    print(f"\n{DIVIDER}")
    if not reasons:
        print(f"  VERDICT: PASS")
    else:
        print(f"  VERDICT: FAIL")
        for r in reasons:
            print(f"    - {r}")
    print(f"{DIVIDER}\n")
    return not reasons


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Verify a WGE mono 16-bit WAV file")
    parser.add_argument("wav", help="Path to WAV file")
    parser.add_argument("--expect-rate", type=int, default=None,
                        help="Fail unless the header sample rate matches")
    parser.add_argument("--expect-freq", type=float, default=None,
                        help="Fail unless the zero-crossing estimate is within 2%%")
    args = parser.parse_args(argv)

    ok = run_check(args.wav, expect_rate=args.expect_rate, expect_freq=args.expect_freq)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
