import logging
from typing import Iterable, Iterator

from .shapes import Shape

logger = logging.getLogger(__name__)


class Scene:
    """An ordered collection of shapes whose perimeters can be summed.

    The scene only holds references: the same shape object may be added to
    several scenes (or several times to one scene) and stays usable by its
    other holders. Appending is not synchronized; callers sharing a scene
    across threads must serialize ``add_shape`` themselves.
    """

    def __init__(self, shapes: Iterable[Shape] = ()):
        self._shapes: list[Shape] = []
        for shape in shapes:
            self.add_shape(shape)

    def add_shape(self, shape: Shape) -> None:
        if not isinstance(shape, Shape):
            raise TypeError(f"expected a Shape, got {type(shape).__name__}")
        self._shapes.append(shape)
        logger.debug("added %r to scene (%d shapes)", shape, len(self._shapes))

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return tuple(self._shapes)

    def get_circumference(self) -> float:
        """Sum of the contained shapes' perimeters, added in insertion order.

        Floating point addition is not associative, so the same shapes added
        in another order may differ in the last few bits.
        """
        total = 0.0
        for shape in self._shapes:
            total += shape.get_circumference()
        return total

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __repr__(self):
        return f"Scene({self._shapes!r})"
