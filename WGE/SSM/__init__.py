# =============================================================================
# SSM — Signal Serialization Module
# Subfolder of WGE (Waveform Generation Engine)
# =============================================================================
#
# Writes SGM sample buffers to disk.  Performs no synthesis of its own.
#
# Modules:
#   wav_writer.py    — 44-byte RIFF/WAVE header, container writer + reader
#   carray_writer.py — C source array (16 values per line) + trailer constants
#
# Both writers return a Result instead of raising, and both hold the
# destination handle inside a `with` block so it is closed on every path.
# A failure after the first byte leaves the partial file in place.
# =============================================================================
