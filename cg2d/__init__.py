"""
cg2d - мінімальна бібліотека для 2D комп'ютерної геометрії.
Зараз: Делоне-тріангуляція цілих точок зсувною прямою (sweep) з раннім закриттям трикутників.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, SUPER_SCALE, as_points
from cg2d.predicates import orient2d, circumcircle, in_circumcircle
from cg2d.mesh import Triangle, canonical_edge, dedupe_edges
from cg2d.sweep import SweepDelaunay, triangulate, validate_triangles

__all__ = [
    "Pt", "EPS", "SUPER_SCALE", "as_points",
    "orient2d", "circumcircle", "in_circumcircle",
    "Triangle", "canonical_edge", "dedupe_edges",
    "SweepDelaunay", "triangulate", "validate_triangles", "__version__",
]
