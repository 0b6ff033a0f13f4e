# =============================================================================
# WGE/SVM/__init__.py — Signal Verification Module
# =============================================================================
#
# Tools for checking that a written container is what WGE meant to write,
# independently of the writer: the header is re-parsed with
# SSM.wav_writer.parse_header AND the samples are decoded with soundfile.
#
# Sub-modules:
#   wav_check.py  — inspect_wav() + CLI verdict (python -m WGE.SVM.wav_check)
# =============================================================================
