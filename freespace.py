# -*- encoding: utf-8 -*-
################################################################################
## AtlasPack free-space maintenance
##
## Every function here takes a list of free rects and returns a new one; the
## input list is never modified.
##
## The Guillotine layout keeps its free rects disjoint: `cleanup_splits` prunes
## contained rects and then splits each survivor against the ones before it.
##
## The MaxRects layout lets free rects overlap each other, so each one stays as
## large as possible: `handle_overlaps_and_splits` cuts the placed rect out of
## every free rect it touches and `prune_free_overlapping` drops the redundant
## results.
################################################################################

__all__ = [
    'split_against', 'prune_contained', 'cleanup_splits',
    'handle_overlaps_and_splits', 'prune_free_overlapping',
]

import logging
log = logging.getLogger(__name__)

from geometry import Rect, contains, overlaps

################################################################################

def split_against(free_rects, placed):
    """
    Remove the area of `placed` from each free rect, leaving up to four pieces
    of each rect it overlaps.  The pieces above and below the overlap keep the
    full width of the free rect; the pieces beside it are only as tall as the
    overlap, so no two pieces of the same rect overlap.
    """
    result = []

    for free in free_rects:
        if not overlaps(free, placed):
            result.append(free)
            continue

        x1 = max(free.left, placed.left)
        y1 = max(free.top, placed.top)
        x2 = min(free.right, placed.right)
        y2 = min(free.bottom, placed.bottom)

        if x1 >= x2 or y1 >= y2:
            result.append(free)
            continue

        if y2 < free.bottom:
            result.append(Rect(free.w, free.bottom - y2, free.x, y2))

        if y1 > free.top:
            result.append(Rect(free.w, y1 - free.y, free.x, free.y))

        if x1 > free.left:
            result.append(Rect(x1 - free.x, y2 - y1, free.x, y1))

        if x2 < free.right:
            result.append(Rect(free.right - x2, y2 - y1, x2, y1))

    return result

def prune_contained(free_rects):
    """
    Drop every rect that lies inside another rect of the list.  Of several
    equal rects only the first is kept.
    """
    result = []

    for i, rect in enumerate(free_rects):
        redundant = False
        for j, other in enumerate(free_rects):
            if i == j or not contains(rect, other):
                continue
            if rect != other or j < i:
                redundant = True
                break

        if not redundant:
            result.append(rect)

    return result

################################################################################

def cleanup_splits(free_rects):
    free_rects = prune_contained(free_rects)

    ## The outcome depends on list order; keep it.
    result = []
    for rect in free_rects:
        result = split_against(result, rect)
        result.append(rect)

    return result

################################################################################

def handle_overlaps_and_splits(free_rects, placed):
    result = []

    def push(w, h, x, y):
        if w > 0 and h > 0:
            result.append(Rect(w, h, x, y))

    for free in free_rects:
        if not overlaps(free, placed):
            result.append(free)
            continue

        if placed.left > free.left:
            push(placed.left - free.left, free.h, free.x, free.y)

        if placed.right < free.right:
            push(free.right - placed.right, free.h, placed.right, free.y)

        if placed.top > free.top:
            push(free.w, placed.top - free.top, free.x, free.y)

        if placed.bottom < free.bottom:
            push(free.w, free.bottom - placed.bottom, free.x, placed.bottom)

    return result

def prune_free_overlapping(free_rects):
    ## Overlap between free rects is expected here; only containment is pruned.
    return prune_contained(free_rects)

################################################################################
## EOF
################################################################################
