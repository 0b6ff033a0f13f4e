# =============================================================================
# constants.py — SMM Format Constants and Defaults
# =============================================================================
#
# Everything here describes ONE output format: mono, 16-bit signed,
# little-endian, uncompressed PCM inside a canonical 44-byte RIFF/WAVE header.
# There are no extension chunks and no alternative layouts.

# -----------------------------------------------------------------------------
# PCM SAMPLE FORMAT
# -----------------------------------------------------------------------------

FULL_SCALE      = 32767         # int16 peak used for amplitude scaling
                                # (NOT 32768: a sine at amplitude 1.0 must
                                #  reach +32767 and -32767 symmetrically)
INT16_MIN       = -32768
INT16_MAX       = 32767

BITS_PER_SAMPLE = 16
BYTES_PER_SAMPLE = BITS_PER_SAMPLE // 8     # = 2
NUM_CHANNELS    = 1                         # mono only
BLOCK_ALIGN     = NUM_CHANNELS * BYTES_PER_SAMPLE   # = 2
PCM_FORMAT_TAG  = 1                         # WAVE_FORMAT_PCM (uncompressed)


# -----------------------------------------------------------------------------
# RIFF / WAVE HEADER LAYOUT
# -----------------------------------------------------------------------------
#
#   offset  size  field
#   ──────  ────  ─────────────────────────────────────────────
#     0      4    "RIFF"
#     4      4    uint32  36 + data_size
#     8      4    "WAVE"
#    12      4    "fmt "
#    16      4    uint32  16            (fmt chunk body size)
#    20      2    uint16  1             (PCM)
#    22      2    uint16  1             (mono)
#    24      4    uint32  sample_rate
#    28      4    uint32  sample_rate * 2 (byte rate)
#    32      2    uint16  2             (block align)
#    34      2    uint16  16            (bits per sample)
#    36      4    "data"
#    40      4    uint32  data_size     (sample_count * 2)
#    44      …    int16 LE samples

RIFF_TAG        = b"RIFF"
WAVE_TAG        = b"WAVE"
FMT_TAG         = b"fmt "
DATA_TAG        = b"data"
FMT_CHUNK_SIZE  = 16
HEADER_SIZE     = 44
RIFF_SIZE_BASE  = HEADER_SIZE - 8           # = 36 (everything after "RIFF"+size, minus data)

# struct format for the whole header in one pack() call
HEADER_STRUCT   = "<4sI4s4sIHHIIHH4sI"

# uint32 ceiling for the size fields; a data chunk larger than this
# cannot be described by the header at all
MAX_DATA_SIZE   = 0xFFFFFFFF - RIFF_SIZE_BASE


# -----------------------------------------------------------------------------
# C SOURCE ARRAY LAYOUT
# -----------------------------------------------------------------------------

VALUES_PER_LINE = 16
ARRAY_INDENT    = "    "                    # 4 spaces
ARRAY_SEPARATOR = ", "
ARRAY_INCLUDE   = "#include <stdint.h>"
ARRAY_ELEM_TYPE = "int16_t"


# -----------------------------------------------------------------------------
# WHITE-NOISE FILTER
# -----------------------------------------------------------------------------

NOISE_LOW       = -1.0                      # uniform draw range [LOW, HIGH)
NOISE_HIGH      = 1.0


# -----------------------------------------------------------------------------
# COMMAND-LINE DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_AMPLITUDE   = 0.8
DEFAULT_OUTPUT      = "output.wav"
DEFAULT_PREVIEW     = 20                    # samples echoed to the console

FULL_ARRAY_SUFFIX   = "_week.c"             # companion file for --c-array
CYCLE_ARRAY_SUFFIX  = "_cycle.c"            # companion file for --c-cycle
FULL_ARRAY_NAME     = "sine_wave_week"
CYCLE_ARRAY_NAME    = "sine_wave_cycle"
NOISE_ARRAY_NAME    = "white_noise_week"


# -----------------------------------------------------------------------------
# BRIDGE SERVER
# -----------------------------------------------------------------------------

SERVER_HOST     = "127.0.0.1"
SERVER_PORT     = 5000
