"""
Configuration file for the line-puzzle engine.

Contains both EXACT and TOLERANT comparison sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True to compare positions and collinearity with exact equality
EXACT_MODE = False


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

PUZZLE_PATTERN = "puzzles/*.yaml"
OUTPUT_FOLDER = "output"


# ===============================================================
# EXACT-MODE PARAMETERS
# ===============================================================

EXACT = {
    "POSITION_TOLERANCE": 0.0,
    "COLLINEAR_TOLERANCE": 0.0,
}


# ===============================================================
# TOLERANT-MODE PARAMETERS
# ===============================================================

TOLERANT = {
    "POSITION_TOLERANCE": 1e-6,
    "COLLINEAR_TOLERANCE": 1e-6,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

MAX_REGION_ATTEMPTS = 10000        # retries per region before giving up
MAX_EXTRACTION_PASSES = 3          # full re-runs when a region stays open
RANDOM_SEED = None                 # None -> fresh tie-breaks every attempt

LOG_LEVEL = "INFO"


# ---------------------------------------------------------------
# DEBUG DRAWING
# ---------------------------------------------------------------

DEBUG_DRAW = False
DRAW_SCALE = 120                   # pixels per board unit
DRAW_MARGIN = 60

COLOR_EDGE = (90, 90, 90)
COLOR_BOUNDARY = (255, 200, 0)
COLOR_PATH = (0, 220, 255)
COLOR_WHITE_SQUARE = (255, 255, 255)
COLOR_BLACK_SQUARE = (30, 30, 30)
COLOR_HEXAGON = (200, 200, 200)
COLOR_STAR = (0, 140, 255)


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the engine and geometry helpers so they only import one dictionary.
    """

    base = {
        "MAX_REGION_ATTEMPTS": MAX_REGION_ATTEMPTS,
        "MAX_EXTRACTION_PASSES": MAX_EXTRACTION_PASSES,
        "RANDOM_SEED": RANDOM_SEED,
        "LOG_LEVEL": LOG_LEVEL,
    }

    # Merge in exact or tolerant mode values
    if EXACT_MODE:
        base.update(EXACT)
    else:
        base.update(TOLERANT)

    return base
