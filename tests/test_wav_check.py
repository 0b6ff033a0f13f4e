"""Tests for the soundfile-based container verifier."""

import numpy as np
import pytest

from WGE.SGM.params import WaveParameters
from WGE.SGM.synthesizer import generate_sine
from WGE.SSM.wav_writer import write_container
from WGE.SVM.wav_check import estimate_frequency, inspect_wav, main, run_check, verdict


@pytest.fixture
def tone_file(tmp_path):
    params = WaveParameters(44100, 1000.0, 0.5, amplitude=0.5)
    path = tmp_path / "tone.wav"
    assert write_container(generate_sine(params), params.sample_rate, path)
    return str(path)


def test_estimate_frequency_on_sine():
    buf = generate_sine(WaveParameters(48000, 750.0, 1.0))
    assert estimate_frequency(buf, 48000) == pytest.approx(750.0, rel=0.02)


def test_estimate_frequency_flat_signal():
    assert estimate_frequency(np.zeros(100, dtype=np.int16), 8000) is None


def test_inspect_reports_both_readers(tone_file):
    report = inspect_wav(tone_file)
    assert report.header.sample_rate == report.sf_rate == 44100
    assert report.sf_channels == 1
    assert report.sf_subtype == "PCM_16"
    assert len(report.samples) == 22050
    assert report.peak <= int(0.5 * 32767)


def test_verdict_flags_wrong_expectations(tone_file):
    report = inspect_wav(tone_file)
    assert verdict(report, expect_rate=44100, expect_freq=1000.0) == []
    reasons = verdict(report, expect_rate=48000, expect_freq=500.0)
    assert len(reasons) == 2


def test_run_check_missing_file(tmp_path, capsys):
    assert not run_check(str(tmp_path / "nope.wav"))
    assert "File not found" in capsys.readouterr().out


def test_main_exit_codes(tone_file, tmp_path):
    assert main([tone_file, "--expect-rate", "44100", "--expect-freq", "1000"]) == 0
    junk = tmp_path / "junk.wav"
    junk.write_bytes(b"not a wav file at all")
    assert main([str(junk)]) == 1


def test_verdict_flags_riff_size_mismatch(tone_file):
    report = inspect_wav(tone_file)
    bad = report._replace(header=report.header._replace(riff_size=12345))
    reasons = verdict(bad)
    assert any(r.startswith("RIFF size 12345 != 36 + data size") for r in reasons)
