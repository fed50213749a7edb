"""
Configuration file for the star-polygon geometry and rendering.

Contains both OUTLINED and LINES parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True to render the zig-zag silhouette instead of the {n/d} lines
OUTLINED_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"


# ===============================================================
# OUTLINED-MODE PARAMETERS
# ===============================================================

OUTLINED = {
    "OUTLINED": True,
    "FILLED": True,
    "LINE_THICKNESS": 1,
    "DRAW_GUIDES": True
}


# ===============================================================
# LINES-MODE PARAMETERS
# ===============================================================

LINES = {
    "OUTLINED": False,
    "FILLED": False,
    "LINE_THICKNESS": 2,
    "DRAW_GUIDES": False
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

IMAGE_SIZE = 256                   # square canvas, pixels
STAR_MARGIN = 16                   # gap between canvas edge and bounding box
ROTATION_DEGREES = 0.0

MIN_NUM_POINTS = 5
MIN_DENSITY = 2

# Relative; 0.0 is the exact slope-equality test for parallel segments
PARALLEL_SLOPE_TOLERANCE = 1e-9

# Ring coordinates this close are the same value (vertical runs, flat ranges);
# the absolute part is a fraction of the ring extent
COORD_REL_TOL = 1e-12
COORD_ABS_TOL = 1e-9


# ---------------------------------------------------------------
# STAR PRESETS
# ---------------------------------------------------------------

STAR_PRESETS = {
    "pentagram": {"NUM_POINTS": 5, "DENSITY": 2},
    "heptagram": {"NUM_POINTS": 7, "DENSITY": 2},
    "great_heptagram": {"NUM_POINTS": 7, "DENSITY": 3},
    "octagram": {"NUM_POINTS": 8, "DENSITY": 3},
    "enneagram": {"NUM_POINTS": 9, "DENSITY": 2},
    "great_enneagram": {"NUM_POINTS": 9, "DENSITY": 4},
    "decagram": {"NUM_POINTS": 10, "DENSITY": 3},
}


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

COLOR_BACKGROUND = (255, 255, 255) #Canvas - white
COLOR_STAR = (0, 215, 255)         #Star fill/stroke - gold
COLOR_EDGE = (0, 0, 0)             #Outline stroke - black
COLOR_GUIDE = (200, 200, 200)      #Guide circles - light gray


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by generators and renderers so they only import one dictionary.
    """

    base = {
        "IMAGE_SIZE": IMAGE_SIZE,
        "STAR_MARGIN": STAR_MARGIN,
        "ROTATION_DEGREES": ROTATION_DEGREES,
        "MIN_NUM_POINTS": MIN_NUM_POINTS,
        "MIN_DENSITY": MIN_DENSITY,
        "PARALLEL_SLOPE_TOLERANCE": PARALLEL_SLOPE_TOLERANCE,
        "COORD_REL_TOL": COORD_REL_TOL,
        "COORD_ABS_TOL": COORD_ABS_TOL,
        "STAR_PRESETS": STAR_PRESETS
    }

    # Merge in outlined or lines mode values
    if OUTLINED_MODE:
        base.update(OUTLINED)
    else:
        base.update(LINES)

    # Bounding box side derived from the canvas
    base["STAR_SIZE"] = base["IMAGE_SIZE"] - 2 * base["STAR_MARGIN"]

    return base
