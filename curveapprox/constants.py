MIN_ARC_STEPS = 2.0  # an arc outside the fallback branch is never split into fewer chords
DEFAULT_TOLERANCE = 0.1  # maximum chord deviation in drawing units
PRECISION = 1e-9  # sine of the angle at the start point below which three points are collinear
