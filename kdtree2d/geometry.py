import math
from collections import namedtuple

X = 0
Y = 1


class Point(namedtuple('Point', ('x', 'y'))):
    __slots__ = ()

    def distance_squared_to(self, other):
        dx = self.x - other[X]
        dy = self.y - other[Y]
        return dx*dx + dy*dy


    def distance_to(self, other):
        return math.sqrt(self.distance_squared_to(other))


class Rectangle(namedtuple('Rectangle', ('xmin', 'ymin', 'xmax', 'ymax'))):
    '''
    Axis-aligned box with closed bounds.

    Coordinates may be infinite, which is how the unbounded plane is
    represented (see `PLANE`).
    '''
    __slots__ = ()

    def __new__(cls, xmin, ymin, xmax, ymax):
        if xmin > xmax or ymin > ymax:
            raise ValueError(F'Invalid rectangle [{xmin}, {ymin}]-[{xmax}, {ymax}]')

        return super().__new__(cls, xmin, ymin, xmax, ymax)


    @classmethod
    def _make(cls, iterable):
        # also used by _replace, keep the bounds check
        return cls(*iterable)


    @property
    def width(self):
        return self.xmax - self.xmin


    @property
    def height(self):
        return self.ymax - self.ymin


    def contains(self, p):
        return self.xmin <= p[X] <= self.xmax and self.ymin <= p[Y] <= self.ymax


    def intersects(self, other):
        return (self.xmax >= other.xmin and self.ymax >= other.ymin
                and other.xmax >= self.xmin and other.ymax >= self.ymin)


    def distance_squared_to(self, p):
        '''
        Squared Euclidean distance from the closest point of the rectangle to
        `p`, or 0 if `p` lies inside.
        '''
        dx = 0.0
        dy = 0.0
        if p[X] < self.xmin:
            dx = p[X] - self.xmin
        elif p[X] > self.xmax:
            dx = p[X] - self.xmax

        if p[Y] < self.ymin:
            dy = p[Y] - self.ymin
        elif p[Y] > self.ymax:
            dy = p[Y] - self.ymax

        return dx*dx + dy*dy


    def distance_to(self, p):
        return math.sqrt(self.distance_squared_to(p))


    def split(self, axis, value):
        '''
        Cut the rectangle along `axis` at `value`.

        @param axis     `X` (0) for a vertical cut, `Y` (1) for a horizontal
                        one.

        @param value    Coordinate of the cut. The lower half ends at it, the
                        upper half starts at it. Values outside the
                        rectangle are clamped to its edge.

        @return         Tuple `(lower, upper)`; the left and right halves for
                        `X`, the bottom and top halves for `Y`.
        '''
        if axis == X:
            value = min(max(value, self.xmin), self.xmax)
            return (Rectangle(self.xmin, self.ymin, value, self.ymax),
                    Rectangle(value, self.ymin, self.xmax, self.ymax))

        value = min(max(value, self.ymin), self.ymax)
        return (Rectangle(self.xmin, self.ymin, self.xmax, value),
                Rectangle(self.xmin, value, self.xmax, self.ymax))


UNIT_SQUARE = Rectangle(0.0, 0.0, 1.0, 1.0)
PLANE = Rectangle(-math.inf, -math.inf, math.inf, math.inf)
