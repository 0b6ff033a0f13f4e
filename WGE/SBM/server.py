# =============================================================================
# WGE/SBM/server.py — HTTP wrapper around the render bridge
# =============================================================================
#
# Routes:
#   POST /wavegen/render   JSON payload → JSON (same as export_bridge.render)
#   POST /wavegen/wav      JSON payload → audio/wav attachment
#   GET  /wavegen/health   {"status": "ok"}
#
# Run:
#   python -m WGE.SBM.server            (localhost:5000)
#
# Bad parameters answer 400 with {"error", "kind"}; nothing is written to disk.
# =============================================================================

import io

from flask import Flask, jsonify, request, send_file

from WGE.SMM.constants import DEFAULT_OUTPUT, SERVER_HOST, SERVER_PORT
from WGE.SGM.errors import WaveError
from WGE.SSM.wav_writer import to_wav_bytes
from .export_bridge import render, render_samples


def _bad_request(exc):
    return jsonify({"error": str(exc), "kind": getattr(exc, "kind", type(exc).__name__)}), 400


def create_app():
    app = Flask(__name__)

    @app.route("/wavegen/render", methods=["POST"])
    def render_route():
        payload = request.get_json(silent=True)
        if payload is None:
            return jsonify({"error": "expected a JSON body", "kind": "InvalidParameter"}), 400
        try:
            return jsonify(render(payload))
        except (WaveError, ValueError, OverflowError) as exc:
            return _bad_request(exc)

    @app.route("/wavegen/wav", methods=["POST"])
    def wav_route():
        payload = request.get_json(silent=True)
        if payload is None:
            return jsonify({"error": "expected a JSON body", "kind": "InvalidParameter"}), 400
        try:
            params, samples, _ = render_samples(payload)
            wav = to_wav_bytes(samples, params.sample_rate)
        except (WaveError, ValueError, OverflowError) as exc:
            return _bad_request(exc)
        name = payload.get("filename") or DEFAULT_OUTPUT
        return send_file(
            io.BytesIO(wav),
            mimetype="audio/wav",
            as_attachment=True,
            download_name=name,
        )

    @app.route("/wavegen/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    return app


if __name__ == "__main__":
    create_app().run(host=SERVER_HOST, port=SERVER_PORT)
