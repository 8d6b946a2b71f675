import logging
import math

import numpy as np

from .geometry import Point, Rectangle, UNIT_SQUARE, PLANE, X, Y


class Node:
    def __init__(self, point, rect):
        self.point = point
        self.rect = rect

        self.left_bottom = None
        self.right_top = None


class KdTree:
    '''
    Set of points in the plane, stored in a 2-d tree.

    The root splits on x, its children on y, and so on alternating by depth.
    A point whose coordinate on the splitting axis is strictly smaller than
    the node's goes to `left_bottom`, anything else (ties included) goes to
    `right_top`. Every node caches the rectangle its subtree covers, which
    lets `range` and `nearest` skip whole subtrees.

    The unit square is a convention, not a precondition. Points outside the
    tree's `bounds` are stored, but queries may miss them since the cached
    rectangles do not cover them. Create the tree with `bounds=PLANE` to
    index arbitrary finite coordinates.

    Not thread-safe.
    '''

    def __init__(self, bounds=UNIT_SQUARE):
        self.bounds = PLANE if bounds is None else _as_rectangle(bounds)
        self.root = None
        self._size = 0


    @classmethod
    def build(cls, points, bounds=UNIT_SQUARE):
        '''
        Create a tree and insert `points` in the given order.

        @param points   Array-like of shape (n, 2), one (x, y) row per point.
                        Duplicate rows are stored once.

        @param bounds   Root rectangle, see `KdTree`.
        '''
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(F'Expected an array of shape (n, 2), got {arr.shape}')

        tree = cls(bounds)
        for x, y in arr.tolist():
            tree.insert(Point(x, y))

        logging.debug('Built tree with %d points from %d rows.', tree.size(), arr.shape[0])
        return tree


    def is_empty(self):
        return self._size == 0


    def size(self):
        return self._size


    def __len__(self):
        return self._size


    def __contains__(self, p):
        return self.contains(p)


    def __iter__(self):
        stack = [] if self.root is None else [self.root]
        while stack:
            node = stack.pop()
            yield node.point

            if node.right_top is not None:
                stack.append(node.right_top)
            if node.left_bottom is not None:
                stack.append(node.left_bottom)


    def points(self):
        return list(self)


    def insert(self, p):
        '''
        Add the point to the set, unless an equal point is already stored.

        Takes time proportional to the depth of the tree: logarithmic in the
        size for points inserted in random order, linear for sorted input.
        '''
        if p is None:
            raise TypeError('called insert() with a None point')
        p = _as_point(p)

        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            logging.warning('Inserting point %s with non-finite coordinates.', p)
        elif not self.bounds.contains(p):
            logging.warning('Point %s lies outside the tree bounds %s, queries may miss it.',
                    p, self.bounds)

        if self.root is None:
            self.root = Node(p, self.bounds)
            self._size += 1
            return

        parent, axis = _descend(self.root, p)
        if parent.point == p:
            return

        lower, upper = parent.rect.split(axis, parent.point[axis])
        if p[axis] < parent.point[axis]:
            parent.left_bottom = Node(p, lower)
        else:
            parent.right_top = Node(p, upper)

        self._size += 1


    def contains(self, p):
        if p is None:
            raise TypeError('called contains() with a None point')
        p = _as_point(p)

        if self.root is None:
            return False

        node, _ = _descend(self.root, p)
        return node.point == p


    def draw(self, visitor):
        '''
        Hand every stored point to `visitor`, once each, in no particular
        order.
        '''
        if visitor is None:
            raise TypeError('called draw() with a None visitor')

        for p in self:
            visitor(p)


    def range(self, rect):
        '''
        All stored points inside `rect` or on its boundary.

        Subtrees whose rectangle does not intersect `rect` are skipped, so
        small queries touch only a few nodes. A query covering every point
        is linear in the size of the tree.

        @param rect     A `Rectangle`, or any (xmin, ymin, xmax, ymax)
                        sequence.

        @return         New list of points, order unspecified.
        '''
        if rect is None:
            raise TypeError('called range() with a None rectangle')
        rect = _as_rectangle(rect)

        found = []
        visited = _visit_range(self.root, rect, found)

        logging.debug('range(%s): visited %d of %d nodes, found %d points.',
                rect, visited, self._size, len(found))
        return found


    def nearest(self, p):
        '''
        A stored point closest to `p`, or None if the tree is empty.

        Among equidistant points, the first one found wins. The traversal
        enters the child whose rectangle is closer to `p` first (the
        left/bottom one on a tie) and skips any subtree whose rectangle is
        farther away than the best point so far.
        '''
        if p is None:
            raise TypeError('called nearest() with a None point')
        p = _as_point(p)

        if self.root is None:
            return None

        best, visited = _visit_nearest(self.root, p)

        logging.debug('nearest(%s): visited %d of %d nodes.', p, visited, self._size)
        return best


def _as_point(p):
    if isinstance(p, Point):
        return p

    x, y = p
    return Point(float(x), float(y))


def _as_rectangle(r):
    if isinstance(r, Rectangle):
        return r

    return Rectangle(*r)


def _descend(node, p):
    '''
    Walk down from `node` the way `p` would be inserted.

    @return     Tuple `(node, axis)` of the node holding a point equal to `p`,
                or else the node below which `p` belongs, and the splitting
                axis of that node.
    '''
    axis = X
    while node.point != p:
        if p[axis] < node.point[axis]:
            child = node.left_bottom
        else:
            child = node.right_top

        if child is None:
            break

        node = child
        axis = Y if axis == X else X

    return node, axis


def _visit_range(root, rect, found):
    if root is None:
        return 0

    # explicit stack, sorted input builds chains deeper than the recursion limit
    visited = 0
    stack = [root]
    while stack:
        node = stack.pop()
        visited += 1

        if rect.contains(node.point):
            found.append(node.point)

        if node.right_top is not None and node.right_top.rect.intersects(rect):
            stack.append(node.right_top)
        if node.left_bottom is not None and node.left_bottom.rect.intersects(rect):
            stack.append(node.left_bottom)

    return visited


def _visit_nearest(root, p):
    best = root.point
    best_distance = best.distance_squared_to(p)

    visited = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.rect.distance_squared_to(p) > best_distance:
            continue
        visited += 1

        distance = node.point.distance_squared_to(p)
        if distance < best_distance:
            best = node.point
            best_distance = distance

        first = node.left_bottom
        second = node.right_top
        if first is not None and second is not None \
                and second.rect.distance_squared_to(p) < first.rect.distance_squared_to(p):
            first, second = second, first

        # the whole subtree of `first` is popped before `second`
        if second is not None:
            stack.append(second)
        if first is not None:
            stack.append(first)

    return best, visited
