# notecraft/config/config_display.py
"""
Display settings: window geometry, colors and inline text format codes.
"""

SCREEN_WIDTH = 816
SCREEN_HEIGHT = 624
TARGET_FPS = 30
FONT_NAME = "arial"
FONT_SIZE = 18
TITLE_FONT_SIZE = 24
LINE_HEIGHT = 36  # One list row / one details line

# Colors
TEXT_COLOR = (255, 255, 255)
BG_COLOR = (0, 0, 0)
PANEL_BG_COLOR = (20, 20, 25)
PANEL_BORDER_COLOR = (100, 100, 100)
CURSOR_COLOR = (60, 60, 80)
DISABLED_TEXT_COLOR = (140, 140, 140)
NOTIFICATION_BG_COLOR = (10, 10, 10)
TITLE_COLOR = (255, 215, 0)

COLOR_RED = (255, 0, 0)
COLOR_YELLOW = (255, 255, 0)
COLOR_GREEN = (0, 255, 0)
COLOR_CYAN = (0, 255, 255)
COLOR_WHITE = (255, 255, 255)
COLOR_DEFAULT = COLOR_WHITE

FORMAT_RED = "[[RED]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_CYAN = "[[CYAN]]"
FORMAT_RESET = "[[/]]"

FORMAT_ERROR = FORMAT_RED
FORMAT_TITLE = FORMAT_YELLOW
FORMAT_HIGHLIGHT = FORMAT_GREEN
FORMAT_SUCCESS = FORMAT_GREEN
FORMAT_CATEGORY = FORMAT_CYAN

# Default color values for format codes (RGB)
DEFAULT_COLORS = {
    FORMAT_RED: COLOR_RED,
    FORMAT_YELLOW: COLOR_YELLOW,
    FORMAT_GREEN: COLOR_GREEN,
    FORMAT_CYAN: COLOR_CYAN,
    FORMAT_RESET: COLOR_DEFAULT,
}
