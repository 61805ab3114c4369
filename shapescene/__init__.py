from .errors import InvalidDimension
from .scene import Scene
from .shapes import Circle, EquilateralTriangle, Polygon, RegularPolygon, Shape, Square

__all__ = [
    "Circle",
    "EquilateralTriangle",
    "InvalidDimension",
    "Polygon",
    "RegularPolygon",
    "Scene",
    "Shape",
    "Square",
]
