from .geometry import Point as _Point, \
        Rectangle as _Rectangle, \
        UNIT_SQUARE as _UNIT_SQUARE, \
        PLANE as _PLANE, \
        X as _X, \
        Y as _Y
from .kdtree import KdTree as _KdTree, \
        Node as _Node


# export namespace
Point = _Point
Rectangle = _Rectangle
UNIT_SQUARE = _UNIT_SQUARE
PLANE = _PLANE
X = _X
Y = _Y
KdTree = _KdTree
Node = _Node
