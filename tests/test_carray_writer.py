"""Tests for the C source array export."""

import numpy as np
import pytest

from WGE.SGM.errors import InvalidParameter, IOFailure, UnsupportedOperation
from WGE.SGM.params import WaveKind, WaveParameters
from WGE.SGM.synthesizer import single_cycle
from WGE.SSM import carray_writer
from WGE.SSM.carray_writer import format_preview, render_source_array, write_source_array

SINE = WaveParameters(44100, 440.0, 1.0, amplitude=0.8)
NOISE = WaveParameters(44100, 0.0, 0.5, amplitude=0.3, wave_kind=WaveKind.WHITE_NOISE)


def _value_lines(text):
    body = text.split("[] = {\n", 1)[1].split("\n};", 1)[0]
    return body.split("\n") if body else []


class TestRenderSourceArray:
    def test_seventeen_samples_wrap_after_sixteen(self):
        text = render_source_array(list(range(17)), SINE, "tone")
        lines = _value_lines(text)
        assert len(lines) == 2
        assert lines[0] == "    " + ", ".join(str(i) for i in range(16)) + ","
        assert lines[1] == "    16"
        assert "const size_t tone_size = 17;" in text

    def test_exact_multiple_of_sixteen_has_no_trailing_comma(self):
        lines = _value_lines(render_source_array(list(range(32)), SINE, "t"))
        assert len(lines) == 2
        assert lines[0].endswith(",")
        assert not lines[1].endswith(",")

    def test_full_render_layout(self):
        text = render_source_array([0, -5, 7], SINE, "sine_wave_week")
        assert text == (
            "// Generated C array for sine wave data\n"
            "// Sample rate: 44100 Hz\n"
            "// Frequency: 440 Hz\n"
            "// Amplitude: 0.8\n"
            "// Duration: 1 seconds\n"
            "// Total samples: 3\n"
            "\n"
            "#include <stdint.h>\n"
            "\n"
            "const int16_t sine_wave_week[] = {\n"
            "    0, -5, 7\n"
            "};\n"
            "\n"
            "const size_t sine_wave_week_size = 3;\n"
        )

    def test_single_cycle_trailers(self):
        cycle = single_cycle(SINE)
        text = render_source_array(cycle, SINE, "sine_wave_cycle", single_cycle=True)
        assert text.startswith("// Generated C array for sine wave data (1 cycle)\n")
        assert "// Samples per cycle: 100\n" in text
        assert "// Cycle duration: 0.00227273 seconds\n" in text
        assert text.endswith(
            "const size_t sine_wave_cycle_size = 100;\n"
            "const double sine_wave_cycle_frequency = 440;\n"
            "const uint32_t sine_wave_cycle_sample_rate = 44100;\n"
        )
        assert len(_value_lines(text)) == 7     # 6 full lines of 16 + 4

    def test_noise_comments(self):
        text = render_source_array([1, 2], NOISE, "white_noise_week")
        assert "// Generated C array for white noise data\n" in text
        assert "// Cutoff frequency: none (unfiltered)\n" in text
        filtered = render_source_array([1, 2], NOISE._replace(frequency=2500.0), "n")
        assert "// Cutoff frequency: 2500 Hz\n" in filtered

    def test_single_cycle_noise_unsupported(self):
        with pytest.raises(UnsupportedOperation):
            render_source_array([1, 2], NOISE, "n", single_cycle=True)

    @pytest.mark.parametrize("name", ["", "9lives", "has space", "semi;colon"])
    def test_bad_identifier(self, name):
        with pytest.raises(InvalidParameter):
            render_source_array([1], SINE, name)

    def test_numpy_buffer_values(self):
        text = render_source_array(np.array([-32767, 32767], dtype=np.int16), SINE, "x")
        assert "    -32767, 32767\n" in text


class TestWriteSourceArray:
    def test_writes_rendered_text(self, tmp_path):
        path = tmp_path / "tone_week.c"
        buf = list(range(-8, 9))
        result = write_source_array(buf, SINE, path, "tone")
        assert result
        assert path.read_text(encoding="ascii") == render_source_array(buf, SINE, "tone")

    def test_unsupported_request_touches_nothing(self, tmp_path):
        path = tmp_path / "noise_cycle.c"
        result = write_source_array([1, 2, 3], NOISE, path, "n", single_cycle=True)
        assert not result
        assert isinstance(result.error, UnsupportedOperation)
        assert "UnsupportedOperation" in result.message
        assert not path.exists()

    def test_unopenable_destination(self, tmp_path):
        result = write_source_array([1], SINE, tmp_path / "missing" / "a.c", "a")
        assert not result
        assert isinstance(result.error, IOFailure)


def test_format_preview():
    text = format_preview(np.arange(30, dtype=np.int16), 3)
    lines = text.splitlines()
    assert lines[0] == "PCM data (first 3 of 30 samples):"
    assert lines[1] == "  [    0]       0"
    assert lines[-1] == "  ... (27 more)"


def test_failed_write_after_open_leaves_partial_file(tmp_path, failing_write):
    failing_write(carray_writer)
    path = tmp_path / "partial.c"
    result = write_source_array([1, 2, 3], SINE, path, "tone")
    assert not result
    assert isinstance(result.error, IOFailure)
    assert result.error.message.startswith("Write to")
    assert path.exists()


class TestBufferChecksMatchContainerWriter:
    @pytest.mark.parametrize("buffer", [
        [0, 40000],
        [-32769],
        [0.5, 1.5],
        np.array([1.0, 2.0]),
        np.zeros((2, 2), dtype=np.int16),
    ])
    def test_rejected_like_write_container(self, tmp_path, buffer):
        with pytest.raises(InvalidParameter):
            render_source_array(buffer, SINE, "x")

        path = tmp_path / "x.c"
        result = write_source_array(buffer, SINE, path, "x")
        assert not result
        assert isinstance(result.error, InvalidParameter)
        assert not path.exists()

    def test_int16_limits_accepted(self):
        text = render_source_array([-32768, 32767], SINE, "x")
        assert "    -32768, 32767\n" in text
