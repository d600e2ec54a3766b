import pytest

from ordered_range import Range
from range_parsing import parse_range
from range_parsing import parse_range_set
from range_parsing import str_to_num
from range_set import RangeSet


def test_str_to_num():
    assert str_to_num('12') == 12
    assert isinstance(str_to_num('12'), int)
    assert str_to_num('-3') == -3
    assert str_to_num('1.5') == 1.5
    assert str_to_num('1e3') == 1000.0
    assert isinstance(str_to_num('1e3'), float)
    with pytest.raises(ValueError):
        str_to_num('abc')


class TestOperatorNotation:

    def test_half_open_by_default(self):
        assert parse_range('1..4') == Range(1, 4)
        assert parse_range('1.5..3') == Range(1.5, 3)

    def test_exclusive_low_and_inclusive_high(self):
        assert parse_range('1>..=4') == Range(1, 4, False, True)
        assert parse_range('1.0>..4.0') == Range(1.0, 4.0, False)
        assert parse_range('1.0..=4.0') == Range(1.0, 4.0, True, True)

    def test_unbounded(self):
        assert parse_range('..') == Range.unbounded()
        assert parse_range('..=4') == Range(None, 4, False, True)
        assert parse_range('4>..') == Range(4, None, False)
        assert parse_range('..4') == Range(None, 4)

    def test_whitespace(self):
        assert parse_range('  1 ..= 4 ') == Range(1, 4, True, True)

    def test_missing_bounds(self):
        with pytest.raises(ValueError):
            parse_range('>..4')
        with pytest.raises(ValueError):
            parse_range('1..=')

    def test_custom_conversion(self):
        assert parse_range('a..f', convert=str) == Range('a', 'f')


class TestBracketNotation:

    def test_bounds(self):
        assert parse_range('[1, 3)') == Range(1, 3)
        assert parse_range('(1.5, 3]') == Range(1.5, 3, False, True)
        assert parse_range('[1;3]') == Range(1, 3, True, True)

    def test_mixed_integer_and_float_bounds(self):
        _range = parse_range('(0, 1.5]')
        assert _range == Range(0, 1.5, False, True)
        assert 0 not in _range
        assert 0.5 in _range
        assert 1 in _range
        assert 1.5 in _range
        assert 1.75 not in _range

    def test_closed_integer_bounds(self):
        _range = parse_range('[0, 1]')
        assert 1 in _range
        assert 1.5 not in _range

    def test_infinities(self):
        assert parse_range('(-inf, 4]') == Range(None, 4, False, True)
        assert parse_range('[0, +∞)') == Range(0, None)
        assert parse_range('(, 4)') == Range(None, 4)

    def test_single_value(self):
        assert parse_range('[2.5]') == Range(2.5, 2.5, True, True)
        assert parse_range('(2.5)').is_empty

    def test_nothing(self):
        assert parse_range('[]').is_empty
        assert parse_range('()').is_empty
        assert parse_range('{}').is_empty

    def test_mismatched_single_value(self):
        with pytest.raises(ValueError):
            parse_range('[1)')

    def test_unbounded_single_value(self):
        with pytest.raises(ValueError):
            parse_range('[inf]')


class TestBareValue:

    def test_single_value(self):
        assert parse_range('5') == Range(5, 5, True, True)
        assert parse_range('5.5') == Range(5.5, 5.5, True, True)

    def test_errors(self):
        with pytest.raises(ValueError):
            parse_range('')
        with pytest.raises(ValueError):
            parse_range('abc')
        with pytest.raises(ValueError):
            parse_range('inf')
        with pytest.raises(TypeError):
            parse_range(5)


class TestParseRangeSet:

    def test_braces_and_separators(self):
        assert parse_range_set('{ [1, 3) | [5, 7) }') == RangeSet([(1, 3), (5, 7)])
        assert parse_range_set('{[1,3);[5,7)}') == RangeSet([(1, 3), (5, 7)])

    def test_canonicalizes(self):
        assert parse_range_set('{[1,3),[3,7)}') == RangeSet([(1, 7)])
        assert parse_range_set('{1, 2, 3, 7}') == RangeSet([(1, 4), (7, 8)])

    def test_operator_notation(self):
        expected = RangeSet([Range(None, 0), Range(5, 7, False, True), Range(10, None)])
        assert parse_range_set('..0, 5>..=7, 10..') == expected

    def test_mixed_notation(self):
        assert parse_range_set('[1, 3), 5..7 | 9') == RangeSet([(1, 3), (5, 7), (9, 10)])

    def test_nothing(self):
        assert parse_range_set('{}').is_empty
        assert parse_range_set('').is_empty
        assert parse_range_set('{ [] }').is_empty

    def test_reads_back_str(self):
        for range_set in (RangeSet([(1, 3), (5, 7)]),
                          RangeSet([(None, 0), (10, None)]),
                          RangeSet([Range(1.5, 2.5, False, True), Range(4.0, 4.0, True, True)]),
                          RangeSet.unbounded(),
                          RangeSet()):
            assert parse_range_set(str(range_set)) == range_set

    def test_type_error(self):
        with pytest.raises(TypeError):
            parse_range_set([(1, 2)])
