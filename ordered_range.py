import datetime
import functools
import math
import warnings
from dataclasses import dataclass
from numbers import Integral
from numbers import Real
from typing import Any
from typing import Dict
from typing import Optional
from typing import Tuple
from typing import Union


@functools.total_ordering
class _Unbounded:
    """
    a value beyond every other value in one direction
    only ever equal to itself, so it can sit inside endpoint tuples next to ints, floats, datetimes, etc
    """

    def __init__(self, sign: int, name: str):
        self.sign = sign
        self.name = name

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(self.name)

    def __lt__(self, other: Any) -> bool:
        if self is other:
            return False
        return self.sign < 0

    def __gt__(self, other: Any) -> bool:
        if self is other:
            return False
        return self.sign > 0

    def __reduce__(self) -> str:
        return self.name  # keep the singletons singletons when pickled or copied

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return '-∞' if self.sign < 0 else '+∞'


UNBOUNDED_BELOW = _Unbounded(-1, 'UNBOUNDED_BELOW')
UNBOUNDED_ABOVE = _Unbounded(1, 'UNBOUNDED_ABOVE')

# types with no value strictly between `x` and `x + step`
# looked up by exact type, so datetime.datetime (a subclass of datetime.date) is not treated as discrete
# integers (other than bool) are always discrete with a step of 1
DISCRETE_STEPS: Dict[type, Any] = {
    datetime.date: datetime.timedelta(days=1),
}


def register_discrete_type(cls: type, step: Any) -> None:
    if not isinstance(cls, type):
        raise TypeError(cls)
    DISCRETE_STEPS[cls] = step


def discrete_step(value: Any) -> Optional[Any]:
    if isinstance(value, _Unbounded) or isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return 1
    return DISCRETE_STEPS.get(type(value))


def _discrete_kind(value: Any) -> Optional[type]:
    # all integers share a kind, so 3 and numpy.int64(3) count as the same type
    if discrete_step(value) is None:
        return None
    return Integral if isinstance(value, Integral) else type(value)


def _successor(value: Any, step: Any) -> Optional[Any]:
    try:
        return value + step
    except OverflowError:
        return None  # e.g. datetime.date.max


def _is_nan(value: Any) -> bool:
    return isinstance(value, Real) and math.isnan(value)


def _is_negative_zero(value: Any) -> bool:
    return isinstance(value, float) and value == 0 and math.copysign(1.0, value) == -1.0


@dataclass(frozen=True)
class Range:
    """
    a contiguous span of an ordered type, see: https://oeis.org/wiki/Intervals
    defaults to half-open, ie. [low, high)
    `None` (or UNBOUNDED_BELOW / UNBOUNDED_ABOVE) leaves that end unbounded, and an unbounded end is never inclusive

    a range with low > high is allowed, it is simply empty

    bounds are kept exactly as given, and `contains` always checks a point against them
    when both ranges have all their finite bounds of the same discrete type (see DISCRETE_STEPS)
    they are compared by the values of that type they hold, see `value_tuples`
    so (3, 5] compares as [4, 6) over the integers, and [1, 3] is adjacent to [4, 6]
    a range of one discrete type holding no value of it, like (3, 4), is empty

    each bound can also be represented as a tuple of the bound's value and epsilon
        *   epsilon=0 represents an inclusive low or high bound
        *   epsilon=1 represents an exclusive low bound
        *   epsilon=-1 represents an exclusive high bound
    which makes comparing any two bounds trivial, regardless of whether they are low or high bounds
    """
    low: Any
    high: Any
    low_inclusive: bool = True
    high_inclusive: bool = False

    def __post_init__(self):
        if not isinstance(self.low_inclusive, bool):
            raise TypeError(self.low_inclusive)
        if not isinstance(self.high_inclusive, bool):
            raise TypeError(self.high_inclusive)

        low, low_inclusive = self.low, self.low_inclusive
        high, high_inclusive = self.high, self.high_inclusive

        # check for nan, which has no place in a total order
        if _is_nan(low) or _is_nan(high):
            raise ValueError('Range cannot start or end with NaN')

        # unbounded ends are always exclusive
        if low is None or isinstance(low, _Unbounded):
            low = UNBOUNDED_BELOW if low is None else low
            low_inclusive = False
        if high is None or isinstance(high, _Unbounded):
            high = UNBOUNDED_ABOVE if high is None else high
            high_inclusive = False

        if _is_negative_zero(low):
            warnings.warn('negative zero will be converted to zero')
            low = 0.0
        if _is_negative_zero(high):
            warnings.warn('negative zero will be converted to zero')
            high = 0.0

        object.__setattr__(self, 'low', low)
        object.__setattr__(self, 'high', high)
        object.__setattr__(self, 'low_inclusive', low_inclusive)
        object.__setattr__(self, 'high_inclusive', high_inclusive)

    # CONSTRUCTORS

    @classmethod
    def unbounded(cls) -> 'Range':
        return cls(UNBOUNDED_BELOW, UNBOUNDED_ABOVE, False, False)

    @classmethod
    def from_tuples(cls, start_tuple: Tuple[Any, int], end_tuple: Tuple[Any, int]) -> 'Range':
        start, start_epsilon = start_tuple
        end, end_epsilon = end_tuple
        assert start_epsilon in {0, 1}, start_tuple
        assert end_epsilon in {-1, 0}, end_tuple
        return cls(start, end, start_epsilon == 0, end_epsilon == 0)

    # PROPERTIES

    @property
    def start_tuple(self) -> Tuple[Any, int]:
        return self.low, 0 if self.low_inclusive else 1

    @property
    def end_tuple(self) -> Tuple[Any, int]:
        return self.high, 0 if self.high_inclusive else -1

    @property
    def _kind(self) -> Optional[type]:
        kinds = {_discrete_kind(bound) for bound in (self.low, self.high) if not isinstance(bound, _Unbounded)}
        if len(kinds) == 1:
            return kinds.pop()

    @property
    def step(self) -> Optional[Any]:
        """
        distance between consecutive values, if every finite bound is of the same discrete type
        """
        if self._kind is not None:
            return discrete_step(self.high if isinstance(self.low, _Unbounded) else self.low)

    @property
    def value_tuples(self) -> Tuple[Tuple[Any, int], Tuple[Any, int]]:
        """
        endpoint tuples of the values the range actually holds
        a discrete range holds no values between its steps, so it compares as [first, last + step)
        dense ranges are unchanged
        """
        start_tuple, end_tuple = self.start_tuple, self.end_tuple
        step = self.step
        if step is None:
            return start_tuple, end_tuple

        # the largest value of a type has no successor, in which case the bound stays as given
        if not isinstance(self.low, _Unbounded) and not self.low_inclusive:
            first = _successor(self.low, step)
            if first is not None:
                start_tuple = (first, 0)
        if not isinstance(self.high, _Unbounded) and self.high_inclusive:
            after_last = _successor(self.high, step)
            if after_last is not None:
                end_tuple = (after_last, -1)
        return start_tuple, end_tuple

    def _comparable_tuples(self, other: 'Range'):
        # discrete ranges are only compared by their values against ranges of the same discrete type
        kind = self._kind
        if kind is not None and kind == other._kind:
            return self.value_tuples, other.value_tuples
        return (self.start_tuple, self.end_tuple), (other.start_tuple, other.end_tuple)

    @property
    def is_empty(self) -> bool:
        start_tuple, end_tuple = self.value_tuples
        return start_tuple > end_tuple

    @property
    def is_degenerate(self) -> bool:
        """
        contains exactly one value
        """
        if self.start_tuple == self.end_tuple:
            return True
        step = self.step
        if step is None or self.is_empty or not (self.is_bounded_below and self.is_bounded_above):
            return False
        (first, _), (end, _) = self.value_tuples
        return end == first or end == _successor(first, step)

    @property
    def is_bounded_below(self) -> bool:
        return self.low is not UNBOUNDED_BELOW

    @property
    def is_bounded_above(self) -> bool:
        return self.high is not UNBOUNDED_ABOVE

    @property
    def is_unbounded(self) -> bool:
        return not self.is_bounded_below and not self.is_bounded_above

    # PREDICATES

    def contains(self, point: Any) -> bool:
        if isinstance(point, (Range, _Unbounded)):
            raise TypeError(point)
        if _is_nan(point) or self.is_empty:
            return False
        return self.start_tuple <= (point, 0) <= self.end_tuple

    def covers(self, other: 'Range') -> bool:
        if not isinstance(other, Range):
            raise TypeError(other)
        if other.is_empty:
            return True
        (start, end), (other_start, other_end) = self._comparable_tuples(other)
        return start <= other_start and other_end <= end

    def __contains__(self, item: Union['Range', Any]) -> bool:
        if isinstance(item, Range):
            return self.covers(item)
        return self.contains(item)

    def overlaps(self, other: 'Range') -> bool:
        if not isinstance(other, Range):
            raise TypeError(other)
        if self.is_empty or other.is_empty:
            return False
        (start, end), (other_start, other_end) = self._comparable_tuples(other)
        return start <= other_end and other_start <= end

    def is_adjacent_to(self, other: 'Range') -> bool:
        """
        disjoint, but with no value strictly between the two ranges
        e.g. [1.0, 3.0) and [3.0, 5.0), or [1.0, 3.0] and (3.0, 5.0)
        but not [1.0, 3.0) and (3.0, 5.0), since that leaves out 3.0
        over the integers [1, 3] and [4, 6] are adjacent too, since they leave nothing out
        """
        if not isinstance(other, Range):
            raise TypeError(other)
        if self.is_empty or other.is_empty or self.overlaps(other):
            return False

        (start, end), (other_start, other_end) = self._comparable_tuples(other)
        if end < other_start:
            first_end, second_start = end, other_start
        else:
            first_end, second_start = other_end, start

        # the first value after the end of the first range, if the type were dense
        end_value, end_epsilon = first_end
        return second_start <= (end_value, end_epsilon + 1)

    def compare_by_lower_bound(self, other: 'Range') -> int:
        """
        ordering for sorting, an inclusive low bound starts before an exclusive one at the same value
        """
        if not isinstance(other, Range):
            raise TypeError(other)
        if self.start_tuple < other.start_tuple:
            return -1
        elif self.start_tuple > other.start_tuple:
            return 1
        return 0

    # COMBINATIONS

    def merge_with(self, other: 'Range') -> 'Range':
        if not isinstance(other, Range):
            raise TypeError(other)
        if not (self.overlaps(other) or self.is_adjacent_to(other)):
            raise ValueError(f'{str(other)} is not adjacent to {str(self)}, so the union comprises two Ranges')
        return self._span(other)

    def _span(self, other: 'Range') -> 'Range':
        return Range.from_tuples(min(self.start_tuple, other.start_tuple), max(self.end_tuple, other.end_tuple))

    def intersect(self, other: 'Range') -> Optional['Range']:
        if not self.overlaps(other):
            return None
        _range = Range.from_tuples(max(self.start_tuple, other.start_tuple), min(self.end_tuple, other.end_tuple))

        # e.g. (0, 1.5] and [0, 1) meet only strictly between the integers 0 and 1
        if not _range.is_empty:
            return _range

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}('
                f'{repr(self.low)}, '
                f'{repr(self.high)}, '
                f'{repr(self.low_inclusive)}, '
                f'{repr(self.high_inclusive)})')

    def __str__(self) -> str:
        if self.is_empty:
            return '{}'

        if self.start_tuple == self.end_tuple:
            return f'[{self.low}]'

        left_bracket = '[' if self.low_inclusive else '('
        right_bracket = ']' if self.high_inclusive else ')'
        return f'{left_bracket}{self.low}, {self.high}{right_bracket}'
