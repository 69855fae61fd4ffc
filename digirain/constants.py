"""Constants and default configuration for digirain."""

# Default window size in pixels, used before the host reports one.
DEFAULT_SCREEN_WIDTH = 800
DEFAULT_SCREEN_HEIGHT = 600

# Rain tuning
AMOUNT_OF_COLUMNS = 60
MONITORING_WINDOW_SIZE_FREQUENCY_HZ = 1.0
MAXIMUM_AMOUNT_OF_CHARACTERS = 750
DROPLETS_SPAWN_PERIOD_MS = 3
DROPLETS_MOVE_PERIOD_MS = 90
ROUGH_LENGTH_OF_A_DROPLET = 15
DROPLETS_LENGTH_DEVIATION = 4  # Keep below ROUGH_LENGTH_OF_A_DROPLET / 2
DROPLETS_FADE_PER_FRAME = 0.03  # Opacity lost per frame
FREE_CELL_MAX_ATTEMPTS = 10_000

# Display
DEFAULT_FRAME_RATE = 60
DEFAULT_SYMBOLS = "halfwidth"
DEFAULT_THEME = "green"

# Nominal terminal cell size in pixels when the tty reports no pixel size.
CELL_PIXEL_WIDTH = 8
CELL_PIXEL_HEIGHT = 16

# Color pair IDs
C_HEAD = 1
C_TRAIL_BRIGHT = 2
C_TRAIL = 3
C_TRAIL_DIM = 4
C_STATUS = 5

# Opacity bands for trailing glyphs (lower bound, inclusive).
TRAIL_BRIGHT_OPACITY = 0.66
TRAIL_DIM_OPACITY = 0.33

STATUS_BAR_HEIGHT = 1

# Key codes
KEY_CTRL_Q = 17
KEY_ESCAPE = 27
