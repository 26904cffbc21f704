# -*- encoding: utf-8 -*-
################################################################################
## AtlasPack rectangle geometry
##
## Axis-aligned integer rectangles with the origin at the top-left, and the
## predicates both layout engines are built on.
################################################################################

__all__ = [
    'INVALID', 'Rect',
    'area', 'contains', 'fits', 'overlaps',
    'invalid_rect', 'is_invalid',
    'get_next_power_of_2',
]

import logging
log = logging.getLogger(__name__)

INVALID = -1

################################################################################

def get_next_power_of_2(n):
    n = int(n) & 0x7fffffffffffffff
    n -= 1
    n |= n >> 32
    n |= n >> 16
    n |= n >>  8
    n |= n >>  4
    n |= n >>  2
    n |= n >>  1
    n += 1
    return n

################################################################################

class Rect(object):
    def __init__(self, w=0, h=0, x=0, y=0):
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def __repr__(self):
        return 'Rect<x=%s,y=%s,w=%s,h=%s>' % (self.x, self.y, self.w, self.h)

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    @property
    def left(self):
        return self.x

    @property
    def top(self):
        return self.y

    @property
    def right(self):
        return self.x + self.w

    @property
    def bottom(self):
        return self.y + self.h

    @property
    def width(self):
        return self.w

    @property
    def height(self):
        return self.h

    def astuple(self):
        return self.x, self.y, self.w, self.h

################################################################################

def area(rect):
    return rect.width * rect.height

def overlaps(a, b):
    """
    True if the two rects share any area.  Rects that only touch along an edge
    do not overlap.
    """
    return not (a.x >= b.x + b.width or a.x + a.width <= b.x or
                a.y >= b.y + b.height or a.y + a.height <= b.y)

def contains(small, big):
    """
    True if `small` lies entirely inside `big`, shared edges included.
    """
    return (small.x >= big.x and small.y >= big.y and
            small.x + small.width <= big.x + big.width and
            small.y + small.height <= big.y + big.height)

def fits(item, free):
    ## no rotation
    return item.width <= free.width and item.height <= free.height

def invalid_rect():
    return Rect(INVALID, INVALID, INVALID, INVALID)

def is_invalid(rect):
    return (rect.x == INVALID and rect.y == INVALID and
            rect.width == INVALID and rect.height == INVALID)

################################################################################
## EOF
################################################################################
