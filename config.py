"""Central configuration for the bitmap filter toolkit.

All fixed layout values and filter thresholds are defined here with
descriptive names so the codec and the transforms share one source of truth.
"""

# =============================================================================
# BITMAP LAYOUT
# =============================================================================

# Two magic bytes at the start of every bitmap file
BMP_MAGIC = b"BM"

# Fixed header sizes in bytes
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40

# Pixel array offset written by the encoder (headers only, no palette)
PIXEL_ARRAY_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE

# Rows in the pixel array are padded to a multiple of this many bytes
ROW_ALIGNMENT = 4

# Encoder always writes 24-bit BGR pixels
OUTPUT_BITS_PER_PIXEL = 24

# Print resolution written on encode (pixels per meter, both axes).
# Readers ignore it, but output files must carry exactly this value.
BMP_RESOLUTION_PPM = 2835

# Smallest bit depth the decoder accepts (blue, green, red bytes)
MIN_BITS_PER_PIXEL = 24

# Only uncompressed (BI_RGB) pixel arrays are supported
BI_RGB = 0

# =============================================================================
# FILTER THRESHOLDS
# =============================================================================

# Contrast enhance: pixels with an average at or above this are lightened
CONTRAST_HIGHLIGHT_AVG = 170

# Contrast enhance: pixels with an average below this are darkened
CONTRAST_SHADOW_AVG = 90

# High contrast: average channel value at which a pixel turns white
HIGH_CONTRAST_THRESHOLD = 127.5

# Colour threshold: channel sums at or above this become white
THRESHOLD_WHITE_SUM = 550

# Colour threshold: channel sums at or below this become black
THRESHOLD_BLACK_SUM = 150

# =============================================================================
# FILTER PARAMETERS
# =============================================================================

# User scale factors must lie in (MIN_SCALE, MAX_SCALE]
MIN_SCALE = 0.0
MAX_SCALE = 1.0

# Rotation counts and enlarge factors must be at least this
MIN_COUNT = 1
