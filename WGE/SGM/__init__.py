# =============================================================================
# SGM — Signal Generation Module
# Subfolder of WGE (Waveform Generation Engine)
# =============================================================================
#
# Generates 16-bit PCM sample buffers from a WaveParameters snapshot.
#
# Modules:
#   errors.py      — WaveError hierarchy + Result status value
#   params.py      — WaveKind, WaveParameters, validate() / check_params()
#   synthesizer.py — sine, white noise, single-cycle generators
#
# Constants live in WGE/SMM/constants.py
# Serialization lives in WGE/SSM/
# =============================================================================
