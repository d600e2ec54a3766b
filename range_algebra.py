"""
set algebra over RangeSets

only two functions do any real work:
    *   union, which concatenates and re-canonicalizes
    *   invert, which walks the gaps between ranges within a domain
everything else is rewritten in terms of those two (De Morgan), so proving them correct proves the rest

complement only makes sense relative to a universe, so the domain is always an explicit Range
when omitted it defaults to the unbounded range (-∞, +∞), in which every derived operation is exact
callers are responsible for using the same domain for all operands, this is never checked
"""
import itertools
import random
import time
from typing import Any
from typing import Optional

from ordered_range import Range
from range_set import RangeSet
from range_set import random_range_set


def _check_range_set(range_set: RangeSet) -> RangeSet:
    if not isinstance(range_set, RangeSet):
        raise TypeError(range_set)
    return range_set


def _as_domain(domain: Optional[Range]) -> Range:
    if domain is None:
        return Range.unbounded()
    if not isinstance(domain, Range):
        raise TypeError(domain)
    return domain


# PRIMITIVES

def union(first: RangeSet, *others: RangeSet) -> RangeSet:
    _check_range_set(first)
    for other in others:
        _check_range_set(other)

    # nothing to merge with, and RangeSets are immutable so sharing is safe
    if not others or all(other.is_empty for other in others):
        return first
    if first.is_empty and len(others) == 1:
        return others[0]

    return RangeSet(itertools.chain(first, *others))


def invert(range_set: RangeSet, domain: Optional[Range] = None) -> RangeSet:
    """
    everything in the domain that is not in the range set

    walks left to right, emitting the gap before each range and the gap after the last one
    each gap bound is the neighbouring range's bound with its epsilon flipped:
        *   a low bound (x, e) ends the preceding gap at (x, e - 1)
        *   a high bound (x, e) starts the following gap at (x, e + 1)
    """
    _check_range_set(range_set)
    domain = _as_domain(domain)

    if domain.is_empty:
        return RangeSet.empty()

    # clip to the domain, anything outside it is ignored
    clipped = [_range for _range in (_range.intersect(domain) for _range in range_set) if _range is not None]
    if not clipped:
        return RangeSet.full(domain)

    gaps = []
    gap_start = domain.start_tuple
    for _range in clipped:
        low, low_epsilon = _range.start_tuple
        gaps.append(Range.from_tuples(gap_start, (low, low_epsilon - 1)))

        high, high_epsilon = _range.end_tuple
        gap_start = (high, high_epsilon + 1)
    gaps.append(Range.from_tuples(gap_start, domain.end_tuple))

    # ranges touching each other or the domain boundary leave empty gaps
    return RangeSet(gap for gap in gaps if not gap.is_empty)


# DERIVED OPERATIONS

def intersection(first: RangeSet, second: RangeSet, domain: Optional[Range] = None) -> RangeSet:
    domain = _as_domain(domain)
    return invert(union(invert(first, domain), invert(second, domain)), domain)


def difference(first: RangeSet, second: RangeSet, domain: Optional[Range] = None) -> RangeSet:
    domain = _as_domain(domain)
    return intersection(first, invert(second, domain), domain)


def symmetric_difference(first: RangeSet, second: RangeSet, domain: Optional[Range] = None) -> RangeSet:
    domain = _as_domain(domain)
    return union(difference(first, second, domain), difference(second, first, domain))


def is_subset(first: RangeSet, second: RangeSet) -> bool:
    """
    every value in first is also in second
    O(m + n), and needs no domain since nothing gets inverted
    """
    _check_range_set(first)
    _check_range_set(second)

    if first.is_empty:
        return True
    if second.is_empty:
        return False

    # canonical ranges are never adjacent, so each range of first must fit inside a single range of second
    _second = second.ranges
    idx = 0
    for _range in first:
        while idx + 1 < len(_second) and _second[idx].end_tuple < _range.start_tuple:
            idx += 1
        if not _second[idx].covers(_range):
            return False

    return True


def is_superset(first: RangeSet, second: RangeSet) -> bool:
    return is_subset(second, first)


def is_disjoint(first: RangeSet, second: RangeSet) -> bool:
    return intersection(first, second).is_empty


def overlaps(first: RangeSet, second: RangeSet) -> bool:
    return not is_disjoint(first, second)


def contains(range_set: RangeSet, point: Any) -> bool:
    return _check_range_set(range_set).contains(point)


def is_empty(range_set: RangeSet) -> bool:
    return _check_range_set(range_set).is_empty


if __name__ == '__main__':
    t = time.time()
    _domain = Range(-50, 50)
    for _ in range(100):
        print()
        i = random_range_set(-100, 100, random.randint(0, 5))
        j = random_range_set(-100, 100, random.randint(0, 5))
        print(i, '|', invert(i))
        print(j, '|', invert(j))
        print('union:                ', union(i, j), is_subset(i, union(i, j)), is_subset(j, union(i, j)))
        print('intersection:         ', intersection(i, j), is_subset(intersection(i, j), i))
        print('difference:           ', difference(i, j), is_disjoint(difference(i, j), j))
        print('symmetric_difference: ', symmetric_difference(i, j))
        print('i within [-50, 50):   ', intersection(i, RangeSet.full(_domain)), invert(i, _domain))
        assert union(i, j) == union(j, i)
        assert invert(invert(i)) == i
        assert union(difference(i, j), intersection(i, j)) == i
    print(time.time() - t)
