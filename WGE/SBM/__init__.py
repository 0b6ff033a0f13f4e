# =============================================================================
# SBM — Signal Bridge Module
# Subfolder of WGE (Waveform Generation Engine)
# =============================================================================
#
# Thin callers that expose the engine to non-Python front ends.
#
# Modules:
#   export_bridge.py — render(payload) / render_json(payload_json)
#                      JSON in, JSON out; never raises
#   server.py        — Flask app wrapping the bridge over HTTP
# =============================================================================
