"""
Configuration file for the barcode tile scanner.

Contains both TILED and WHOLE parameter sets. The tiled set drives the
sliding-window scan; the whole set drives the single full-image preview.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True to render one line preview of the full image instead of
# scanning it tile by tile
WHOLE_IMAGE_MODE = False


# ---------------------------------------------------------------
# OUTPUT NAMING
# ---------------------------------------------------------------

TILE_OUTPUT_PATTERN = "img_{row}_{col}.png"
GREY_OUTPUT_NAME = "grey.png"
CANNY_OUTPUT_NAME = "canny.png"
LINES_OUTPUT_NAME = "lines.png"


# ===============================================================
# TILED-MODE PARAMETERS
# ===============================================================

TILED = {
    "BOX_SIZE": 750,
    "CANNY_LOW": 1.0,
    "CANNY_HIGH": 175.0,
    "VOTE_THRESHOLD": 150,
    "SUPPRESSION_RADIUS": 8,
}


# ===============================================================
# WHOLE-IMAGE PARAMETERS
# ===============================================================

WHOLE = {
    "BOX_SIZE": None,
    "CANNY_LOW": 1.0,
    "CANNY_HIGH": 200.0,
    "VOTE_THRESHOLD": 300,
    "SUPPRESSION_RADIUS": 8,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

BATCH_SIZE = 5                 # max degree step merged into one cluster
PROB_HIGH_THRESH = 30
PROB_LOW_THRESH = 5
DECISION_THRESHOLD = 75        # strict: probability must exceed this

# Even-length median: False keeps the legacy (v[n/2] - 1 + v[n/2]) / 2 rule
MEDIAN_CONVENTIONAL = False

WORKERS = 1
VERBOSE = True


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

COLOR_LINE = (0, 255, 0)             # detected lines - green
COLOR_EDGE = (255, 255, 255)         # edge pixels - white
COLOR_BACKGROUND = (0, 0, 0)         # non-edge pixels - black
COLOR_FILL = (255, 255, 255)         # rotation border fill - white


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params(whole_image=None):
    """
    Returns the active set of parameters:
    - whole_image overrides WHOLE_IMAGE_MODE when given.
    - A combination of SHARED + mode-specific constants.
    - Used by detectors and the tile analyzer so they only import one dictionary.
    """

    base = {
        "BATCH_SIZE": BATCH_SIZE,
        "PROB_HIGH_THRESH": PROB_HIGH_THRESH,
        "PROB_LOW_THRESH": PROB_LOW_THRESH,
        "DECISION_THRESHOLD": DECISION_THRESHOLD,
        "MEDIAN_CONVENTIONAL": MEDIAN_CONVENTIONAL,
        "WORKERS": WORKERS,
        "VERBOSE": VERBOSE,
        "COLOR_LINE": COLOR_LINE,
        "COLOR_EDGE": COLOR_EDGE,
        "COLOR_BACKGROUND": COLOR_BACKGROUND,
        "COLOR_FILL": COLOR_FILL,
    }

    if whole_image is None:
        whole_image = WHOLE_IMAGE_MODE

    # Merge in tiled or whole-image values
    if whole_image:
        base.update(WHOLE)
    else:
        base.update(TILED)

    return base
