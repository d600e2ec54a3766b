import datetime
from typing import Any
from typing import Optional
from typing import Tuple
from typing import Union

import pandas as pd

from ordered_range import Range
from range_set import RangeSet

DATETIME_LIKE = Union[datetime.datetime, datetime.date, pd.Timestamp, str]

# everything pandas can represent, for inverting timestamp range sets without unbounded ends
TIMESTAMP_DOMAIN = Range(pd.Timestamp.min, pd.Timestamp.max, True, True)

ONE_DAY = pd.Timedelta(days=1)


def to_timestamp(value: Optional[DATETIME_LIKE], *, whole_day_after: bool = False) -> Optional[pd.Timestamp]:
    """
    converts a datetime-like value to a pandas Timestamp, or None (unbounded) for None / NaN / NaT
    a datetime.date becomes midnight at the start of that day,
    or midnight at the end of that day if `whole_day_after` is set
    """
    # handle nan
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return None

    # already a timestamp, do nothing
    if isinstance(value, pd.Timestamp):
        return value

    # check datetime before date, since datetime is a subclass of date
    elif isinstance(value, datetime.datetime):
        return pd.Timestamp(value)

    # start (or end) of day
    elif isinstance(value, datetime.date):
        timestamp = pd.Timestamp(value)
        return timestamp + ONE_DAY if whole_day_after else timestamp

    # iso8601 or anything else pandas can parse, but not recommended
    elif isinstance(value, str):
        return pd.Timestamp(value)

    # wrong type
    else:
        raise TypeError(value)


def time_range(start: Optional[DATETIME_LIKE] = None,
               end: Optional[DATETIME_LIKE] = None,
               *,
               start_closed: bool = True,
               end_closed: bool = False
               ) -> Range:
    """
    a Range of pandas Timestamps, unbounded wherever start or end is missing (None, NaN, or NaT)

    a datetime.date means the whole day, so:
        *   a closed start date starts at midnight, an open one excludes that day
        *   a closed end date includes that day, an open one stops before it
    logically speaking, [Tuesday to Friday] == [Tuesday to Saturday) == (Monday to Friday]
    """
    is_start_date = isinstance(start, datetime.date) and not isinstance(start, datetime.datetime)
    is_end_date = isinstance(end, datetime.date) and not isinstance(end, datetime.datetime)

    _start = to_timestamp(start, whole_day_after=is_start_date and not start_closed)
    _end = to_timestamp(end, whole_day_after=is_end_date and end_closed)

    # whole days are always [midnight, midnight)
    if is_start_date:
        start_closed = True
    if is_end_date:
        end_closed = False

    return Range(_start, _end, start_closed, end_closed)


def time_range_set(*ranges: Union[Range, Tuple[Any, Any]]) -> RangeSet:
    _ranges = []
    for _range in ranges:
        if isinstance(_range, Range):
            _ranges.append(_range)
        elif isinstance(_range, tuple) and len(_range) == 2:
            _ranges.append(time_range(*_range))
        else:
            raise TypeError(_range)
    return RangeSet(_ranges)


def total_duration(range_set: RangeSet) -> pd.Timedelta:
    """
    total length of all the ranges, inclusive or exclusive bounds make no difference
    """
    if not isinstance(range_set, RangeSet):
        raise TypeError(range_set)

    out = pd.Timedelta(0)
    for _range in range_set:
        if not (_range.is_bounded_below and _range.is_bounded_above):
            raise ValueError(f'cannot measure the duration of unbounded {str(_range)}')
        out += pd.Timedelta(_range.high - _range.low)
    return out
