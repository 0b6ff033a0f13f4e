# =============================================================================
# WGE/SBM/export_bridge.py — JSON Render Bridge
# =============================================================================
#
# Entry points:
#
#   render(payload) -> dict
#       payload : {sample_rate, frequency, duration, amplitude?, wave?, single_cycle?}
#       returns : {pcm_b64, sample_rate, n_samples, wave, single_cycle}
#                 pcm_b64 is base64-encoded raw Int16 LE PCM (no header)
#       raises  : WaveError / ValueError on bad input
#
#   render_json(payload_json) -> str
#       Safe entry point.  Always returns a JSON string.
#       On error returns {error, kind, traceback}.
#
# The JavaScript (or any other) caller:
#   1. Decodes pcm_b64 → Int16Array
#   2. Either plays it (÷32768 → Float32) or wraps it with its own header
# =============================================================================

import base64
import json

import numpy as np

from WGE.SMM.constants import DEFAULT_AMPLITUDE
from WGE.SGM.errors import InvalidParameter
from WGE.SGM.params import WaveKind, WaveParameters, check_params
from WGE.SGM.synthesizer import generate, single_cycle


def _as_sample_rate(value):
    # JSON numbers may arrive as 44100.0; anything with a fraction is refused
    if isinstance(value, bool):
        raise InvalidParameter(f"Sample rate must be an integer, got {value!r}",
                               field="sample_rate")
    if isinstance(value, int):
        return value
    as_float = float(value)
    if not as_float.is_integer():
        raise InvalidParameter(f"Sample rate must be an integer, got {value!r}",
                               field="sample_rate")
    return int(as_float)


def params_from_payload(payload):
    """Build a WaveParameters from a loosely-typed JSON dict."""
    if not isinstance(payload, dict):
        raise InvalidParameter("payload must be a JSON object", field="payload")
    missing = [k for k in ("sample_rate", "frequency") if k not in payload]
    if missing:
        raise InvalidParameter(f"missing field(s): {', '.join(missing)}", field=missing[0])

    try:
        sample_rate = _as_sample_rate(payload["sample_rate"])
        frequency   = float(payload["frequency"])
        duration    = float(payload.get("duration", 0.0))
        amplitude   = float(payload.get("amplitude", DEFAULT_AMPLITUDE))
    except InvalidParameter:
        raise
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidParameter(f"non-numeric parameter: {exc}", field="payload") from exc

    return WaveParameters(
        sample_rate=sample_rate,
        frequency=frequency,
        duration=duration,
        amplitude=amplitude,
        wave_kind=WaveKind.parse(payload.get("wave", "sine")),
    )


def render_samples(payload, rng=None):
    """Return (params, int16 buffer, single_cycle flag) for `payload`."""
    params = params_from_payload(payload)
    cycle  = bool(payload.get("single_cycle", False))
    if cycle:
        return params, single_cycle(params), True
    check_params(params)
    return params, generate(params, rng=rng), False


def render(payload, rng=None):
    params, samples, cycle = render_samples(payload, rng=rng)
    pcm = np.asarray(samples).astype("<i2", copy=False).tobytes()
    return {
        "pcm_b64":      base64.b64encode(pcm).decode("ascii"),
        "sample_rate":  params.sample_rate,
        "n_samples":    int(len(samples)),
        "wave":         params.wave_kind.value,
        "single_cycle": cycle,
    }


def render_json(payload_json):
    """
    Safe entry point.  Always returns a JSON string.
    On error returns {error, kind, traceback}.
    """
    try:
        payload = json.loads(payload_json)
        return json.dumps(render(payload))
    except Exception as _exc:
        import traceback as _tb
        return json.dumps({
            "error":     str(_exc),
            "kind":      getattr(_exc, "kind", type(_exc).__name__),
            "traceback": _tb.format_exc(),
        })
