"""
Constants declarations for geocells
"""

# Mean (authalic) Earth radius, as used by H3
EARTH_RADIUS_METERS = 6_371_007.180918475

# Tolerance below which spherical quantities are treated as zero
EPSILON = 1e-16

# Tolerance for detecting a point on the polar axis
POLE_EPSILON = 1e-15

# S2: deepest level of the cube-face quadtree
S2_MAX_LEVEL = 30

# H3: finest aperture-7 resolution
H3_MAX_RESOLUTION = 15

# Default cap on the number of cells a range covering may enumerate
DEFAULT_MAX_CELLS = 1000
