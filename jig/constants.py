"""Drilling jig constants.

All values in millimetres; the jig is emitted for a metric slicer.
"""

PIPE_OD = 26.67                   # 3/4" PVC pipe outer diameter (1.05")
PIPE_RADIUS = PIPE_OD / 2.0
SLOT_WIDTH = PIPE_OD              # bottom slot, slides onto the pipe from the side

JIG_WIDTH = 40.0
JIG_HEIGHT = 30.0
HOLE_DIAMETER = 6.0               # marking hole
MARKER_SIZE = (3.0, 20.0, 115.0)  # through-cut per hole: x, y, z

CORNER_HALF_SIZE = 12.7           # 1/2": corner-piece edge to its hole centre
END_MARGIN = 10.0                 # last hole to template end
MAX_JIG_LENGTH = 240.0            # nominal print-bed limit

SCAD_FN = 60                      # $fn circle smoothness
LABEL_SIZE = 4.0
LABEL_DEPTH = 0.4
