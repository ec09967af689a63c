"""
QuizBoard theme - colors, spacing, and typography constants.

Classic game-show blue board with gold values on a dark surface.
"""

# Board
BOARD_BLUE = "#0A1AA8"        # Question tiles
BOARD_BLUE_HOVER = "#1B2FD0"
BOARD_SELECTED = "#F39C12"    # Tile of the active question
BOARD_EMPTY = "#101028"       # Consumed slot
VALUE_GOLD = "#F5C542"        # Dollar values on tiles

# Surfaces
SURFACE_MAIN = "#16161F"      # Main window base
SURFACE_CARD = "#1C1C28"      # Cards, panels
SURFACE_HEADER = "#222230"    # Category headers

# Borders
BORDER_SUBTLE = "#2A2A38"
BORDER_DEFAULT = "#3A3A4C"

# Text
TEXT_PRIMARY = "#F0F0F5"
TEXT_SECONDARY = "#A8A8B8"
TEXT_MUTED = "#6A6A7A"

# Semantic
DANGER = "#DC3545"
SUCCESS = "#28A745"
WARNING = "#FFB74D"

# Teams
TEAM_COLORS = ("#2196F3", "#FF5722")

# Spacing scale (px)
SPACING_SM = 8
SPACING_MD = 12
SPACING_LG = 16
SPACING_XL = 24

# Border radius (px)
RADIUS_SM = 6
RADIUS_MD = 10

# Font families
FONT_UI = '"Segoe UI", "SF Pro Display", "Ubuntu", sans-serif'
FONT_MONO = '"JetBrains Mono", "Consolas", "Courier New", monospace'
