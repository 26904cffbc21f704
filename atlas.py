# -*- encoding: utf-8 -*-
################################################################################
## AtlasPack Item, Atlas and AtlasResult classes
##
## `Atlas` drives a layout: it sorts the items, picks a starting power-of-two
## square from their total area, and doubles the shorter side until a layout
## attempt places everything.
################################################################################

__all__ = [
    'PackError', 'InvalidItemError', 'SizingError',
    'Item', 'AtlasResult', 'Atlas',
    'pack', 'pack_guillotine', 'pack_maxrects',
]

import logging
log = logging.getLogger(__name__)

import math
import numbers

from geometry import get_next_power_of_2
from layouts import get_layout

## Without an explicit max size, an atlas may grow to this many times the area
## the items could possibly need before packing is abandoned.
GROWTH_LIMIT = 1 << 12

################################################################################

class PackError(Exception):
    pass

class InvalidItemError(PackError, ValueError):
    pass

class SizingError(PackError):
    pass

################################################################################

class Item(object):
    def __init__(self, width, height, data=None):
        self.width = width
        self.height = height
        self.data = data

    def __repr__(self):
        return 'Item<w=%s,h=%s,data=%r>' % (self.width, self.height, self.data)

def check_items(items):
    for i, item in enumerate(items):
        for dim in (item.width, item.height):
            if (isinstance(dim, bool) or not isinstance(dim, numbers.Integral)
                    or dim <= 0):
                raise InvalidItemError(
                    'item %d (%r) has invalid size %rx%r' %
                    (i, item, item.width, item.height))

################################################################################

class AtlasResult(object):
    """
    Outcome of a successful pack.  `placements[i]` is where `items[i]` went;
    `items` is the sorted order the layout consumed, not the input order.
    """

    def __init__(self, width, height, placements, items=()):
        self.width = width
        self.height = height
        self.placements = list(placements)
        self.items = list(items)

    def __repr__(self):
        return 'AtlasResult<%dx%d, %d placements>' % (
            self.width, self.height, len(self.placements))

    def __eq__(self, other):
        if not isinstance(other, AtlasResult):
            return NotImplemented
        return (self.size == other.size and
                self.placements == other.placements)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __iter__(self):
        return iter(zip(self.items, self.placements))

    @property
    def size(self):
        return self.width, self.height

    @property
    def coverage(self):
        area = self.width * self.height
        if not area:
            return 0.0
        used = 0
        for rect in self.placements:
            used += rect.w * rect.h
        return float(used) / float(area)

################################################################################

class Atlas(object):
    def __init__(self, layout='maxrects', min_size=0, max_size=0):
        if isinstance(layout, str):
            layout = get_layout(layout)

        min_size = int(min_size)
        max_size = int(max_size)
        if min_size < 0 or max_size < 0:
            raise ValueError('min_size and max_size must not be negative')

        self.layout_type = layout
        self.min_size = get_next_power_of_2(min_size)
        self.max_size = get_next_power_of_2(max_size)

        if self.max_size and self.min_size > self.max_size:
            raise ValueError('min_size %d exceeds max_size %d' %
                             (min_size, max_size))

        self.clear()

    def clear(self):
        self.size = 0, 0
        self.total_area = 0
        self.limit = 0
        self.layout = None

    def initial_size(self, items):
        total = 0
        largest = 0
        for item in items:
            total += item.width * item.height
            largest = max(largest, item.width, item.height)

        side = int(math.ceil(math.sqrt(total)))
        side = max(side, largest, self.min_size)
        side = get_next_power_of_2(side)

        self.total_area = total
        self.limit = GROWTH_LIMIT * max(total, largest * largest)

        return side, side

    def grow(self):
        oldw, oldh = self.size

        if oldw <= oldh:
            w, h = oldw * 2, oldh
        else:
            w, h = oldw, oldh * 2

        if self.max_size and (w > self.max_size or h > self.max_size):
            raise SizingError(
                'cannot fit total area %d: atlas would grow to %dx%d, '
                'beyond max size %d' % (self.total_area, w, h, self.max_size))

        if not self.max_size and w * h > self.limit:
            raise SizingError(
                'cannot fit total area %d: atlas would grow to %dx%d, '
                'beyond area cap %d' % (self.total_area, w, h, self.limit))

        log.debug('grow %dx%d -> %dx%d', oldw, oldh, w, h)
        self.size = w, h
        return self.size

    def do_layout(self, items):
        w, h = self.size
        self.layout = self.layout_type(w, h)
        return self.layout.add(*items)

    def pack(self, items):
        items = list(items)
        check_items(items)

        self.clear()

        if not items:
            return AtlasResult(0, 0, [], [])

        ## stable: equal keys keep their input order
        items = sorted(items, key=self.layout_type.sort_key, reverse=True)

        self.size = self.initial_size(items)

        w, h = self.size
        if self.max_size and w > self.max_size:
            raise SizingError(
                'cannot fit total area %d: needs at least %dx%d, '
                'beyond max size %d' % (self.total_area, w, h, self.max_size))

        placed, remain = self.do_layout(items)

        while remain:
            self.grow()
            placed, remain = self.do_layout(items)

        w, h = self.size
        log.info('%s: %d items in %dx%d', self.layout_type.name, len(items), w, h)

        return AtlasResult(w, h, placed, items)

################################################################################

def pack(items, layout='maxrects', **options):
    return Atlas(layout, **options).pack(items)

def pack_guillotine(items, **options):
    return pack(items, 'guillotine', **options)

def pack_maxrects(items, **options):
    return pack(items, 'maxrects', **options)

################################################################################
## EOF
################################################################################
