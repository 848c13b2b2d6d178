# domain/geometry/constants.py
"""Constants for geometric calculations."""

# Absolute tolerance for floating-point comparisons of coordinates
EPSILON = 1e-6
