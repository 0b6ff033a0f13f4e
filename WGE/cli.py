#!/usr/bin/env python3
# =============================================================================
# cli.py — Waveform Generator command line
# =============================================================================
#
# Usage:
#   wavegen <sample_rate> <frequency> <duration> [amplitude] [output_file]
#           [--noise] [--c-array] [--c-cycle] [--preview N] [--verify]
#
# Examples:
#   wavegen 44100 440 1.0                      # A4 for 1 s at 44.1 kHz
#   wavegen 48000 880 0.5 0.5                  # A5 for 0.5 s, amplitude 0.5
#   wavegen 44100 440 1.0 0.8 out.wav --c-array   # + out_week.c
#   wavegen 44100 440 1.0 0.8 out.wav --c-cycle   # + out_cycle.c (one period)
#   wavegen 44100 4000 2.0 0.3 hiss.wav --noise   # noise, 4 kHz low-pass
#   wavegen 44100 0 2.0 0.3 hiss.wav --noise      # noise, unfiltered
#
# Exit status: 0 = WAV written, 1 = invalid parameters or WAV write failed.
# Companion C files are best-effort: a failure there prints a warning only.
# =============================================================================

from __future__ import annotations
import argparse
import os
import sys
from typing import Optional

from WGE.SMM.constants import (
    DEFAULT_AMPLITUDE, DEFAULT_OUTPUT, DEFAULT_PREVIEW,
    FULL_ARRAY_SUFFIX, CYCLE_ARRAY_SUFFIX,
    FULL_ARRAY_NAME, CYCLE_ARRAY_NAME, NOISE_ARRAY_NAME,
)
from WGE.SGM.errors import WaveError
from WGE.SGM.params import WaveKind, WaveParameters, validate
from WGE.SGM.synthesizer import generate, single_cycle
from WGE.SSM.wav_writer import write_container
from WGE.SSM.carray_writer import write_source_array, format_preview


def companion_path(output_file: str, suffix: str) -> str:
    """out.wav → out<suffix>;  out → out<suffix>"""
    stem, _ext = os.path.splitext(output_file)
    return stem + suffix


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavegen",
        description="Generate a mono 16-bit PCM sine tone or white noise as WAV "
                    "(and optionally as a C array).",
    )
    parser.add_argument("sample_rate", type=int, help="Sample rate in Hz, e.g. 44100")
    parser.add_argument("frequency", type=float,
                        help="Sine frequency in Hz, e.g. 440 "
                             "(with --noise: low-pass cutoff, 0 = unfiltered)")
    parser.add_argument("duration", type=float, help="Duration in seconds, e.g. 1.0")
    parser.add_argument("amplitude", type=float, nargs="?", default=DEFAULT_AMPLITUDE,
                        help=f"Amplitude 0.0-1.0, default {DEFAULT_AMPLITUDE}")
    parser.add_argument("output_file", nargs="?", default=DEFAULT_OUTPUT,
                        help=f"Output WAV file, default {DEFAULT_OUTPUT}")
    parser.add_argument("--noise", action="store_true",
                        help="Generate white noise instead of a sine")
    parser.add_argument("--c-array", action="store_true",
                        help=f"Also write the full render as a C array (*{FULL_ARRAY_SUFFIX})")
    parser.add_argument("--c-cycle", action="store_true",
                        help=f"Also write one sine cycle as a C array (*{CYCLE_ARRAY_SUFFIX})")
    parser.add_argument("--preview", type=int, default=DEFAULT_PREVIEW, metavar="N",
                        help=f"Echo the first N samples, default {DEFAULT_PREVIEW} (0 = off)")
    parser.add_argument("--verify", action="store_true",
                        help="Re-read the WAV with soundfile and print a verdict")
    return parser


def run(args: argparse.Namespace) -> int:
    params = WaveParameters(
        sample_rate=args.sample_rate,
        frequency=args.frequency,
        duration=args.duration,
        amplitude=args.amplitude,
        wave_kind=WaveKind.WHITE_NOISE if args.noise else WaveKind.SINE,
    )

    status = validate(params)
    if not status:
        print(f"[!!] Error: {status.error.message}", file=sys.stderr)
        return 1

    samples = generate(params)
    label   = "white noise" if params.wave_kind is WaveKind.WHITE_NOISE else "sine wave"

    if args.preview > 0:
        print(format_preview(samples, args.preview))

    result = write_container(samples, params.sample_rate, args.output_file)
    if not result:
        print(f"[!!] Error: {result.message}", file=sys.stderr)
        print("[!!] Error: Failed to save WAV file", file=sys.stderr)
        return 1
    print(f"\n[PASS] Generated {label} PCM data and saved it to {args.output_file}")
    print(f"[INFO] {result.message}")

    if args.c_array:
        c_file = companion_path(args.output_file, FULL_ARRAY_SUFFIX)
        name   = NOISE_ARRAY_NAME if params.wave_kind is WaveKind.WHITE_NOISE else FULL_ARRAY_NAME
        print(f"\n[INFO] Writing full C array to {c_file} ...")
        res = write_source_array(samples, params, c_file, name)
        if res:
            print(f"[PASS] C array file saved to {c_file}")
        else:
            print(f"[!!] Warning: Failed to save C array file ({res.message})", file=sys.stderr)

    if args.c_cycle:
        c_file = companion_path(args.output_file, CYCLE_ARRAY_SUFFIX)
        print(f"\n[INFO] Writing one-cycle C array to {c_file} ...")
        try:
            cycle = single_cycle(params)
        except WaveError as exc:
            print(f"[!!] Warning: Failed to save C cycle array file "
                  f"({exc.kind}: {exc.message})", file=sys.stderr)
        else:
            res = write_source_array(cycle, params, c_file, CYCLE_ARRAY_NAME, single_cycle=True)
            if res:
                print(f"[PASS] One-cycle C array file saved to {c_file} ({len(cycle)} samples)")
            else:
                print(f"[!!] Warning: Failed to save C cycle array file ({res.message})",
                      file=sys.stderr)

    if args.verify:
        from WGE.SVM.wav_check import run_check
        expect_freq = params.frequency if params.wave_kind is WaveKind.SINE else None
        if not run_check(args.output_file, expect_rate=params.sample_rate,
                         expect_freq=expect_freq):
            return 1

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
