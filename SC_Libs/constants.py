"""
Constants and configuration values for Square Cutter.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# UI constants
DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 900
WINDOW_TITLE = (
    "Square Cutter - Drag to move, Drag bottom-right corner to resize, "
    "S = save, +/- = size, Q/Esc = quit"
)

# Crop region sizing (image pixels)
DEFAULT_SQUARE_SIZE = 256
MIN_SQUARE_SIZE = 32
MAX_SQUARE_SIZE = 2048
RESIZE_STEP = 16

# Bottom-right handle grab distance, in image pixels (independent of zoom)
RESIZE_HANDLE_THRESHOLD = 24

# Overlay geometry (display pixels)
HANDLE_SQUARE_SIZE = 14
PREVIEW_SIZE = 256
PREVIEW_MARGIN = 20
TEXT_ORIGIN_X = 16
TEXT_ORIGIN_Y = 16

# Overlay colors (RGBA)
BACKGROUND_COLOR = (30, 30, 40, 255)
SHADOW_COLOR = (0, 0, 0, 140)
BORDER_COLOR = (80, 255, 120, 220)
HANDLE_COLOR = (255, 240, 60, 220)
PREVIEW_BORDER_COLOR = (200, 200, 220, 220)
TEXT_COLOR = (240, 240, 255, 255)

# Overlay text
OVERLAY_TEXT_TEMPLATE = (
    "X: {x}   Y: {y}    W: {w}   H: {h}    "
    "(S = save, +/- = resize, arrows = nudge)"
)

# Fonts tried in order for the overlay text
FONT_CANDIDATES = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/Library/Fonts/Arial.ttf",
    "C:\\Windows\\Fonts\\arial.ttf",
)
FONT_POINT_SIZE = 18

# File naming
CROP_FILENAME_TEMPLATE = "crop_{counter:03d}_{w}x{h}.png"
FIRST_CROP_COUNTER = 1
DEFAULT_OUTPUT_FORMAT = "PNG"

# Supported input formats
SUPPORTED_INPUT_IMAGES = {".png", ".jpg", ".jpeg"}
