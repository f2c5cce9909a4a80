"""Named physical constants for frame layouts.

All values in inches unless noted.
"""

CORNER_SIZE = 1.0                 # 1" x 1" corner piece; hole centre 1/2" from each edge
CORNER_HOLE_INSET = CORNER_SIZE / 2.0

# Preview drawing
FRAME_MARGIN = 2.0                # 2" drawn around the frame
GLOW_FACTOR = 2.5                 # glow radius / hole radius

# C9 bulb palette: (base, glow, name)
C9_COLORS = [
    ("#ff0000", "#ff6666", "red"),
    ("#ff8800", "#ffbb66", "orange"),
    ("#ffdd00", "#ffee88", "yellow"),
    ("#00ff00", "#66ff66", "green"),
    ("#0088ff", "#66bbff", "blue"),
    ("#ffffff", "#ffffff", "white"),
]

# Named configuration store
DEFAULT_CONFIG_FILE = "led-frame-configs.json"
