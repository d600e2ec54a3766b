import re
from typing import Any
from typing import Callable
from typing import List
from typing import Optional
from typing import Union

from ordered_range import Range
from range_set import RangeSet

# e.g. `..`, `..4`, `..=4`, `4..`, `4>..`, `1..4`, `1..=4`, `1>..4`, `1>..=4`
# `>` makes the low bound exclusive, `=` makes the high bound inclusive
RE_OPERATOR = re.compile(r'^\s*(?P<low>.*?)\s*(?P<low_exclusive>>)?\s*\.\.(?P<high_inclusive>=)?\s*(?P<high>.*?)\s*$',
                         flags=re.U)

# e.g. [1, 2) or (1,2] or [1; 2] or [1] or [] or ()
RE_BRACKETED = re.compile(r'[\[(][^\[\]()]*[)\]]', flags=re.U)
RE_BRACKETED_PARTS = re.compile(r'^\s*(?P<left>[\[(])\s*(?P<low>[^,;]*?)\s*(?:[,;]\s*(?P<high>[^,;]*?)\s*)?(?P<right>[)\]])\s*$',
                                flags=re.U)

RE_SEPARATOR = re.compile(r'[,|;]', flags=re.U)

UNBOUNDED_TOKENS = {'inf', '+inf', '-inf', 'infinity', '+infinity', '-infinity', '∞', '+∞', '-∞'}


def str_to_num(_num: str) -> Union[int, float]:
    _num = ''.join(_num.split())
    if _num.lstrip('-').isdigit():
        return int(_num)
    else:
        return float(_num)


def _convert(token: Optional[str], convert: Callable[[str], Any]) -> Any:
    # an empty token or an infinity is an unbounded end
    if token is None:
        return None
    token = token.strip()
    if not token or token.lower() in UNBOUNDED_TOKENS:
        return None
    return convert(token)


def parse_range(text: str, convert: Callable[[str], Any] = str_to_num) -> Range:
    """
    parses a single range, in either of two notations:
        *   operator notation: `1..4` is [1, 4), `1>..=4` is (1, 4], `..` is unbounded
        *   bracket notation: `[1, 4)`, `(-inf, 4]`, `[1]` for a single value, `[]` for nothing
    a bare value is a single value, so `5` is [5]
    `convert` turns each bound's text into a value, by default into an int or float
    """
    if not isinstance(text, str):
        raise TypeError(text)

    # is bracketed, with 0, 1, or 2 bounds
    if text.strip() in {'[]', '()', '{}'}:
        return Range(0, 0, False, False)

    match = RE_BRACKETED_PARTS.match(text)
    if match is not None:
        low_inclusive = match.group('left') == '['
        high_inclusive = match.group('right') == ']'

        # degenerate case
        if match.group('high') is None:
            if low_inclusive != high_inclusive:
                raise ValueError(f'half-open range needs two bounds: {text}')
            value = _convert(match.group('low'), convert)
            if value is None:
                raise ValueError(f'single value cannot be unbounded: {text}')
            return Range(value, value, low_inclusive, high_inclusive)

        return Range(_convert(match.group('low'), convert),
                     _convert(match.group('high'), convert),
                     low_inclusive,
                     high_inclusive)

    # is in operator notation
    match = RE_OPERATOR.match(text)
    if match is not None:
        if match.group('low_exclusive') and not match.group('low'):
            raise ValueError(f'`>` needs a low bound: {text}')
        if match.group('high_inclusive') and not match.group('high'):
            raise ValueError(f'`=` needs a high bound: {text}')
        return Range(_convert(match.group('low'), convert),
                     _convert(match.group('high'), convert),
                     not match.group('low_exclusive'),
                     bool(match.group('high_inclusive')))

    # is a bare value
    if not text.strip():
        raise ValueError('cannot parse a Range from an empty string')
    value = _convert(text, convert)
    if value is None:
        raise ValueError(f'single value cannot be unbounded: {text}')
    return Range(value, value, True, True)


def parse_range_set(text: str, convert: Callable[[str], Any] = str_to_num) -> RangeSet:
    """
    parses zero or more ranges, optionally wrapped in braces
    e.g. `{ [1, 3) | [5, 7) }`, `{[1,3),[5,7)}`, `..0, 5>..=7, 10..`, `{1, 2, 3}`
    """
    if not isinstance(text, str):
        raise TypeError(text)

    _text = text.strip()
    if _text.startswith('{') and _text.endswith('}'):
        _text = _text[1:-1]

    ranges: List[Range] = []
    for range_str in RE_BRACKETED.findall(_text):
        ranges.append(parse_range(range_str, convert))

    # whatever is left is separated by commas, pipes, or semicolons
    for range_str in RE_SEPARATOR.split(RE_BRACKETED.sub(',', _text)):
        if range_str.strip():
            ranges.append(parse_range(range_str, convert))

    return RangeSet(ranges)
