# =============================================================================
# WGE/SMM/__init__.py — Signal Metadata Module
# =============================================================================
#
# The SMM is the single source of truth for the PCM format WGE writes: the
# int16 full-scale value, the RIFF/WAVE header layout constants, the C array
# text layout, and the defaults the command-line front end falls back to.
#
# All other WGE sub-modules import exclusively from here.
# Never define format constants outside this module.
#
# Sub-modules:
#   constants.py  — all format constants and defaults
# =============================================================================
