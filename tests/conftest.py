import numpy as np
import pytest

from WGE.SGM.params import WaveKind, WaveParameters


class CannedRandom:
    """Stand-in random source: replays fixed values instead of drawing."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def uniform(self, low, high, size):
        self.calls.append((low, high, size))
        reps = -(-size // max(len(self.values), 1))
        return np.array((self.values * reps)[:size], dtype=np.float64)


class FailingWriteFile:
    """Real file handle whose write() fails as a full disk would."""

    def __init__(self, f):
        self._f = f

    def write(self, data):
        raise OSError(28, "No space left on device")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._f.close()
        return False


@pytest.fixture
def sine_params():
    return WaveParameters(sample_rate=44100, frequency=441.0, duration=1.0,
                          amplitude=0.8, wave_kind=WaveKind.SINE)


@pytest.fixture
def noise_params():
    return WaveParameters(sample_rate=44100, frequency=1000.0, duration=0.1,
                          amplitude=0.5, wave_kind=WaveKind.WHITE_NOISE)


@pytest.fixture
def canned_rng():
    return CannedRandom


@pytest.fixture
def failing_write(monkeypatch):
    """Make open() inside `module` create the file but fail on every write."""
    real_open = open

    def patch(module):
        def _open(path, *args, **kwargs):
            return FailingWriteFile(real_open(path, *args, **kwargs))
        monkeypatch.setattr(module, "open", _open, raising=False)

    return patch
