from abc import ABC, abstractmethod
import decimal
import logging
import math
import numbers

from .errors import InvalidDimension

logger = logging.getLogger(__name__)


def _article(word: str) -> str:
    return "An" if word[0] in "aeiou" else "A"


def _check_dimension(value, shape_name: str, dimension_name: str, label: str) -> float:
    """Return ``value`` as a float, or raise InvalidDimension.

    ``label`` is the word used in the message ("radius", "length").
    Ints too large for a float become infinity of the same sign.
    """
    real = isinstance(value, (numbers.Real, decimal.Decimal))
    if isinstance(value, bool) or not real:
        logger.debug("rejected %s %s of type %s", shape_name, dimension_name, type(value).__name__)
        raise InvalidDimension(
            f"{_article(shape_name)} {shape_name} must have a {label} that is a real number, "
            f"got {type(value).__name__}.",
            shape_name,
            dimension_name,
            value,
        )

    try:
        value = float(value)
    except OverflowError:
        value = math.inf if value > 0 else -math.inf
    except ValueError:
        # signaling NaN decimals refuse conversion
        value = math.nan
    # NaN compares false against everything, so test the accepting condition
    if not value >= 0:
        logger.debug("rejected %s %s=%r", shape_name, dimension_name, value)
        raise InvalidDimension(
            f"{_article(shape_name)} {shape_name} must have a {label} of at least 0.",
            shape_name,
            dimension_name,
            value,
        )
    return value


class Shape(ABC):
    @abstractmethod
    def get_circumference(self) -> float:
        pass


class Polygon(Shape):
    @abstractmethod
    def edge_count(self) -> int:
        pass

    @abstractmethod
    def vertex_count(self) -> int:
        pass


class Circle(Shape):
    def __init__(self, radius: float):
        self._radius = _check_dimension(radius, "circle", "radius", "radius")

    @property
    def radius(self) -> float:
        return self._radius

    def get_circumference(self) -> float:
        return 2 * math.pi * self._radius

    def diameter(self) -> float:
        return 2 * self._radius

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._radius == other._radius

    def __hash__(self):
        return hash((type(self), self._radius))

    def __repr__(self):
        return f"Circle(radius={self._radius!r})"


class RegularPolygon(Polygon):
    """A polygon whose edges all have the same length.

    Subclasses set ``EDGES`` and ``NAME``; the perimeter is ``EDGES * side``.
    """

    EDGES: int
    NAME: str

    def __init__(self, side: float):
        self._side = _check_dimension(side, self.NAME, "side", "length")

    @property
    def side(self) -> float:
        return self._side

    def edge_count(self) -> int:
        return self.EDGES

    def vertex_count(self) -> int:
        return self.EDGES

    def get_circumference(self) -> float:
        return self.edge_count() * self._side

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._side == other._side

    def __hash__(self):
        return hash((type(self), self._side))

    def __repr__(self):
        return f"{type(self).__name__}(side={self._side!r})"


class Square(RegularPolygon):
    EDGES = 4
    NAME = "square"


class EquilateralTriangle(RegularPolygon):
    EDGES = 3
    NAME = "equilateral triangle"
