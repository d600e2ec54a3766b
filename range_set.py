import bisect
import functools
import random
from typing import Any
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple
from typing import Union

from ordered_range import Range

# asserts the canonical form every time a RangeSet is built
# turning this off skips a linear pass per construction, the algorithms never rely on it
CHECK_CONSISTENCY = True

RANGE_LIKE = Union[Range, Tuple[Any, Any]]


def _as_range(item: RANGE_LIKE) -> Range:
    if isinstance(item, Range):
        return item

    # is a tuple (shorthand for a half-open range)
    elif isinstance(item, tuple):
        if len(item) != 2:
            raise TypeError(item)
        return Range(item[0], item[1])

    else:
        raise TypeError(item)


def canonicalize(ranges: Iterable[RANGE_LIKE]) -> List[Range]:
    """
    folds any collection of ranges into the minimal sorted list of disjoint, non-adjacent ranges
    O(n log n) for the sort, then a single O(n) sweep
    """
    # discard empty ranges and sort the rest by lower bound
    _ranges = sorted((_range for _range in map(_as_range, ranges) if not _range.is_empty),
                     key=functools.cmp_to_key(Range.compare_by_lower_bound))

    out = []
    current = None
    for _range in _ranges:
        if current is None:
            current = _range

        # extend the current range
        elif current.overlaps(_range) or current.is_adjacent_to(_range):
            current = current.merge_with(_range)

        # found a gap, commit the current range and start again
        else:
            out.append(current)
            current = _range

    if current is not None:
        out.append(current)
    return out


class RangeSet:
    """
    represents zero or more disjoint ranges of an ordered type, in canonical form:
        1.  sorted by lower bound
        2.  no two ranges overlap
        3.  no two ranges are adjacent (they would have been merged)
        4.  no empty ranges

    since the canonical form of a set of values is unique, two RangeSets are equal iff they hold the same values
    (over the integers, {[1, 3]} == {[1, 4)}, see Range.value_tuples)

    immutable, every operation returns a new RangeSet
    the set operations themselves live in range_algebra
    """
    _ranges: Tuple[Range, ...]
    _starts: List[Tuple[Any, int]]  # lower bounds, for bisecting
    _values: Tuple[Tuple[Tuple[Any, int], Tuple[Any, int]], ...]  # what each range holds, for equality

    def __init__(self, ranges: Iterable[RANGE_LIKE] = ()):
        self._ranges = tuple(canonicalize(ranges))
        self._starts = [_range.start_tuple for _range in self._ranges]
        self._values = tuple(_range.value_tuples for _range in self._ranges)
        self._consistency_check()

    # CONSTRUCTORS

    @classmethod
    def from_ranges(cls, ranges: Iterable[RANGE_LIKE]) -> 'RangeSet':
        return cls(ranges)

    @classmethod
    def empty(cls) -> 'RangeSet':
        return cls()

    @classmethod
    def full(cls, domain: Range) -> 'RangeSet':
        if not isinstance(domain, Range):
            raise TypeError(domain)
        return cls([domain])

    @classmethod
    def unbounded(cls) -> 'RangeSet':
        return cls([Range.unbounded()])

    # PROPERTIES

    @property
    def ranges(self) -> Tuple[Range, ...]:
        return self._ranges

    @property
    def is_empty(self) -> bool:
        return len(self._ranges) == 0

    @property
    def is_unbounded(self) -> bool:
        return len(self._ranges) == 1 and self._ranges[0].is_unbounded

    @property
    def infimum(self) -> Any:
        if self.is_empty:
            raise KeyError('no infimum in empty RangeSet')  # basically min of empty list
        return self._ranges[0].low

    @property
    def supremum(self) -> Any:
        if self.is_empty:
            raise KeyError('no supremum in empty RangeSet')  # basically max of empty list
        return self._ranges[-1].high

    @property
    def hull(self) -> Optional[Range]:
        """
        smallest single range covering the whole set
        """
        if not self.is_empty:
            return Range.from_tuples(self._ranges[0].start_tuple, self._ranges[-1].end_tuple)

    # MEMBERSHIP

    def contains(self, point: Any) -> bool:
        # the only range that can contain the point is the last one starting at or before it
        idx = bisect.bisect_right(self._starts, (point, 0))
        if idx == 0:
            return False
        return self._ranges[idx - 1].contains(point)

    def __contains__(self, point: Any) -> bool:
        return self.contains(point)

    # COMBINATIONS

    def add(self, item: RANGE_LIKE) -> 'RangeSet':
        """
        a new RangeSet that also covers `item`, this one is left unchanged
        """
        return RangeSet(self._ranges + (_as_range(item),))

    # UTILITY

    def _consistency_check(self) -> None:
        if not CHECK_CONSISTENCY:
            return

        for _range in self._ranges:
            assert isinstance(_range, Range), _range
            assert not _range.is_empty, _range

        for prev, curr in zip(self._ranges, self._ranges[1:]):
            assert prev.start_tuple < curr.start_tuple, (prev, curr)
            assert prev.end_tuple < curr.start_tuple, (prev, curr)
            assert not prev.is_adjacent_to(curr), (prev, curr)

    def __iter__(self) -> Iterator[Range]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, RangeSet):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}([{", ".join(repr(_range) for _range in self._ranges)}])'

    def __str__(self) -> str:
        # null set: {}
        if self.is_empty:
            return '{}'

        # single contiguous range: [x, y)
        elif len(self._ranges) == 1:
            return str(self._ranges[0])

        # multiple ranges: { [x, y) , [z] , (a, b) }
        return f'{{ {" , ".join(str(_range) for _range in self._ranges)} }}'


def random_range_set(start: int,
                     end: int,
                     n: int,
                     decimals: int = 0,
                     neg_inf: float = 0.25,
                     pos_inf: float = 0.25,
                     rng: Any = random
                     ) -> RangeSet:
    if not decimals:
        assert 2 * n <= end - start, 'not enough distinct integers'

    _points = set()
    while len(_points) < 2 * n:
        if decimals:
            _points.add(round(start + (end - start) * rng.random(), decimals))
        else:
            _points.add(int(start + (end - start) * rng.random()))

    _endpoints: List[Any] = sorted(_points)
    if _endpoints and rng.random() < neg_inf:
        _endpoints[0] = None
    if _endpoints and rng.random() < pos_inf:
        _endpoints[-1] = None

    ranges = []
    for idx in range(0, len(_endpoints), 2):
        ranges.append(Range(_endpoints[idx], _endpoints[idx + 1], rng.random() < 0.5, rng.random() < 0.5))
    return RangeSet(ranges)
