"""
curveapprox - Approximate 2D curves with polylines of bounded error.

This package turns points, line segments and circular arcs into lazy
sequences of points whose deviation from the real curve stays within a
caller supplied tolerance.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Approximation API
from .approximate import (
    Approximate,
    ApproximatedArc,
    approximate,
    approximate_chain,
    chord_deviation,
    subdivide_arc,
    to_array,
)

# Core geometry types
from .geom_types import Angle, Point2D, ScreenSpace, UnknownUnit, Vector2D, WorldSpace

# Primitives
from .primitives import Arc, Circle, Line

# Define what gets imported with "from curveapprox import *"
__all__ = [
    # Approximation
    "Approximate",
    "ApproximatedArc",
    "approximate",
    "approximate_chain",
    "chord_deviation",
    "subdivide_arc",
    "to_array",
    # Geometry types
    "Angle",
    "Point2D",
    "Vector2D",
    "UnknownUnit",
    "WorldSpace",
    "ScreenSpace",
    # Primitives
    "Arc",
    "Circle",
    "Line",
]
