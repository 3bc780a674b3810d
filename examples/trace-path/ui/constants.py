"""Layout constants and color definitions."""

# Timing
FPS = 60
TICK_SECONDS = 1.0

# Layout dimensions
SCREEN_W = 480
SCREEN_H = 720
TOP_BAR_H = 56
BOARD_PAD = 16

# Colors
BG_COLOR = (250, 246, 238)
BOARD_BG = (255, 255, 255)
BOARD_BORDER = (224, 204, 173)
TRACK_COLOR = (237, 224, 204)
CENTERLINE_COLOR = (224, 204, 173)
ENDPOINT_COLOR = (176, 141, 85)
PLAYER_COLOR = (143, 112, 66)
PLAYER_RING = (255, 255, 255)
TEXT_COLOR = (74, 56, 32)
TEXT_DIM = (150, 130, 100)
WARN_COLOR = (220, 38, 38)
ACCENT_COLOR = (46, 125, 50)
OVERLAY_COLOR = (58, 44, 26, 150)

# Countdown digit and result modal
MODAL_W = 360
MODAL_H = 220

DASH_LEN = 5
