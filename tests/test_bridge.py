"""Tests for the JSON render bridge and its Flask wrapper."""

import base64
import json

import numpy as np
import pytest

from WGE.SBM.export_bridge import params_from_payload, render, render_json
from WGE.SBM.server import create_app
from WGE.SGM.errors import InvalidParameter
from WGE.SGM.params import WaveKind, WaveParameters
from WGE.SGM.synthesizer import generate_sine, single_cycle

TONE = {"sample_rate": 8000, "frequency": 500, "duration": 0.02, "amplitude": 0.6}


def _decode(b64):
    return np.frombuffer(base64.b64decode(b64), dtype="<i2")


class TestExportBridge:
    def test_params_from_payload_defaults(self):
        p = params_from_payload({"sample_rate": 44100, "frequency": 440})
        assert p.amplitude == 0.8
        assert p.duration == 0.0
        assert p.wave_kind is WaveKind.SINE

    @pytest.mark.parametrize("rate", [44100.5, float("inf"), float("nan"), True])
    def test_sample_rate_must_be_integral(self, rate):
        with pytest.raises(InvalidParameter):
            params_from_payload({"sample_rate": rate, "frequency": 440})

    def test_integral_float_sample_rate_accepted(self):
        assert params_from_payload({"sample_rate": 44100.0, "frequency": 440}).sample_rate == 44100

    def test_missing_field(self):
        with pytest.raises(InvalidParameter, match="sample_rate"):
            params_from_payload({"frequency": 440})

    def test_render_matches_generator(self):
        out = render(TONE)
        expected = generate_sine(WaveParameters(8000, 500.0, 0.02, 0.6))
        assert out["n_samples"] == 160
        assert out["wave"] == "sine"
        assert out["single_cycle"] is False
        assert np.array_equal(_decode(out["pcm_b64"]), expected)

    def test_render_single_cycle(self):
        out = render({"sample_rate": 44100, "frequency": 440, "single_cycle": True})
        assert out["n_samples"] == 100
        assert np.array_equal(_decode(out["pcm_b64"]),
                              single_cycle(WaveParameters(44100, 440.0, 0.0)))

    def test_render_noise_with_seeded_source(self):
        payload = {"sample_rate": 8000, "frequency": 0, "duration": 0.01, "wave": "noise"}
        a = render(payload, rng=np.random.default_rng(3))
        b = render(payload, rng=np.random.default_rng(3))
        assert a == b
        assert a["wave"] == "noise"

    def test_render_json_error_never_raises(self):
        out = json.loads(render_json(json.dumps({**TONE, "amplitude": 3})))
        assert out["kind"] == "InvalidParameter"
        assert "Amplitude" in out["error"]
        assert "traceback" in out

    def test_render_json_bad_json(self):
        out = json.loads(render_json("{not json"))
        assert "error" in out


class TestServer:
    @pytest.fixture
    def client(self):
        app = create_app()
        app.config["TESTING"] = True
        return app.test_client()

    def test_health(self, client):
        assert client.get("/wavegen/health").get_json() == {"status": "ok"}

    def test_render_route(self, client):
        resp = client.post("/wavegen/render", json=TONE)
        assert resp.status_code == 200
        assert resp.get_json()["n_samples"] == 160

    def test_wav_route(self, client):
        resp = client.post("/wavegen/wav", json={**TONE, "filename": "t.wav"})
        assert resp.status_code == 200
        assert resp.mimetype == "audio/wav"
        assert resp.data[:4] == b"RIFF"
        assert len(resp.data) == 44 + 2 * 160
        assert "t.wav" in resp.headers["Content-Disposition"]

    def test_bad_parameters_answer_400(self, client):
        resp = client.post("/wavegen/wav", json={**TONE, "sample_rate": 0})
        assert resp.status_code == 400
        assert resp.get_json()["kind"] == "InvalidParameter"

    def test_missing_body(self, client):
        resp = client.post("/wavegen/render", data="plain text")
        assert resp.status_code == 400

    @pytest.mark.parametrize("body", [
        '{"sample_rate": Infinity, "frequency": 440, "duration": 0.01}',
        '{"sample_rate": 8000, "frequency": Infinity, "duration": 0.01}',
        '{"sample_rate": 8000, "frequency": 440, "duration": Infinity}',
        '{"sample_rate": 44100.5, "frequency": 440, "duration": 0.01}',
    ])
    def test_non_finite_or_fractional_values_answer_400(self, client, body):
        for route in ("/wavegen/render", "/wavegen/wav"):
            resp = client.post(route, data=body, content_type="application/json")
            assert resp.status_code == 400
            assert resp.get_json()["kind"] == "InvalidParameter"
