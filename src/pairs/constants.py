GRID_COLUMNS = 4

# Stable symbol keys -> card face colour. Keys double as texture names
# (graphics/cards/<key>.png) and as the persisted spriteName.
DEFAULT_SYMBOLS = {
    'acorn':    (156, 102, 31),   # #9C661F
    'bell':     (226, 186, 52),   # #E2BA34
    'clover':   (63, 127, 59),    # #3F7F3B
    'drop':     (70, 120, 200),   # #4678C8
    'flame':    (214, 82, 44),    # #D6522C
    'moon':     (165, 139, 234),  # #A58BEA
    'rose':     (179, 18, 42),    # #B3122A
    'star':     (232, 215, 161),  # #E8D7A1
}

# Seconds both selected cards stay revealed before the pair is judged.
EVALUATION_DELAY = 0.5

# Flip tween: full rotation time; the face texture swaps at the halfway point.
FLIP_DURATION = 0.2

# Win pulse: grow to WIN_PULSE_SCALE, then settle back to 1.0.
WIN_PULSE_SCALE = 1.1
WIN_PULSE_GROW = 0.3
WIN_PULSE_SETTLE = 0.25

SAVE_KEY = "CardGameState"

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Pairs"

CARD_GAP = 8
TOP_MARGIN = 70
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.85

# Restart button sits in the top-right corner.
RESTART_BUTTON_WIDTH = 140
RESTART_BUTTON_HEIGHT = 40
RESTART_BUTTON_MARGIN = 16
