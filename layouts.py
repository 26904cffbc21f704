# -*- encoding: utf-8 -*-
################################################################################
## AtlasPack layout engine
##
## Implements the Guillotine and MaxRects-BestAreaFit algorithms detailed in
## the paper "A Thousand Ways to Pack the Bin" by Jukka Jylänki[1].
##
## A layout packs items into a single fixed-size area and reports the items it
## could not place; growing the area is left to the caller (see atlas.py).
##
## [1] http://clb.demon.fi/files/RectangleBinPack.pdf
################################################################################

__all__ = ['Layout', 'GuillotineLayout', 'MaxRectsLayout', 'LAYOUTS', 'get_layout']

import logging
log = logging.getLogger(__name__)

from geometry import Rect, area, fits
from freespace import cleanup_splits, handle_overlaps_and_splits, prune_free_overlapping

################################################################################

class Layout(object):
    """
    Base class for rectangle layout algorithms.
    """

    name = None

    def __init__(self, width, height):
        self.size = width, height
        self.clear()

    def clear(self):
        w, h = self.size
        self.free_rects = [Rect(w, h)]
        self.used_rects = []

    @staticmethod
    def sort_key(item):
        raise NotImplementedError('use a subclass of Layout')

    def search(self, item):
        raise NotImplementedError('use a subclass of Layout')

    def place(self, item, position):
        raise NotImplementedError('use a subclass of Layout')

    def add(self, *items):
        """
        Place `items` in order.  Stops at the first item that does not fit and
        returns the placed rects along with the items left over.
        """
        placed = []
        remain = list(items)

        while remain:
            pos = self.search(remain[0])
            if pos is None:
                log.debug('%s: no room for %dx%d in %dx%d (%d left)',
                          self.name, remain[0].width, remain[0].height,
                          self.size[0], self.size[1], len(remain))
                break ## No free rect can hold the next item

            placed.append(self.place(remain.pop(0), pos))

        return placed, remain

################################################################################

class GuillotineLayout(Layout):
    """
    First-fit layout.  Each item goes into the first free rect that can hold
    it; the rest of that rect is cut into a strip on the right and a strip
    below, and the free list is cleaned up so that no two free rects overlap.
    """

    name = 'guillotine'

    @staticmethod
    def sort_key(item):
        return max(item.width, item.height)

    def search(self, item):
        for i, free in enumerate(self.free_rects):
            if fits(item, free):
                return i
        return None

    def place(self, item, index):
        free = self.free_rects[index]
        free_rects = self.free_rects[:index] + self.free_rects[index+1:]

        rect = Rect(item.width, item.height, free.x, free.y)

        right = Rect(free.w - item.width, free.h, free.x + item.width, free.y)
        bottom = Rect(free.w, free.h - item.height, free.x, free.y + item.height)

        ## right and bottom share the corner diagonal to the item
        for split in (right, bottom):
            if split.w > 0 and split.h > 0:
                free_rects.append(split)

        self.free_rects = cleanup_splits(free_rects)

        log.debug('%r', rect)
        self.used_rects.append(rect)
        return rect

################################################################################

class MaxRectsLayout(Layout):
    """
    A layout that arranges rects by subdividing free space into overlapping
    regions.  Each item goes into the free rect that leaves the least area
    unused, and its area is then removed from every free rect it touches.
    """

    name = 'maxrects'

    @staticmethod
    def sort_key(item):
        return area(item)

    def score(self, item, free):
        dx, dy = free.w - item.width, free.h - item.height
        return area(free) - area(item), min(dx, dy), max(dx, dy)

    def search(self, item):
        best = None
        best_score = None

        for free in self.free_rects:
            if not fits(item, free):
                continue

            score = self.score(item, free)

            ## strict comparison: the first of equal candidates wins
            if best_score is None or score < best_score:
                best = free
                best_score = score

        return best

    def place(self, item, position):
        rect = Rect(item.width, item.height, position.x, position.y)

        ## the chosen free rect is split along with every other it overlaps
        self.free_rects = prune_free_overlapping(
            handle_overlaps_and_splits(self.free_rects, rect))

        log.debug('%r', rect)
        self.used_rects.append(rect)
        return rect

################################################################################

LAYOUTS = {
    'guillotine': GuillotineLayout,
    'maxrects': MaxRectsLayout,
}

def get_layout(name):
    try:
        return LAYOUTS[name.lower()]
    except KeyError:
        raise ValueError('unknown layout %r (expected one of: %s)' %
                         (name, ', '.join(sorted(LAYOUTS))))

################################################################################
## EOF
################################################################################
