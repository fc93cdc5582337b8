import pytest

from scoring import PointResult


class TestPointResultParsing:

    def test_parse_home_and_guest(self):
        result = PointResult.parse('25:23')
        assert (result.home, result.guest) == (25, 23)

    def test_parse_trims_whitespace(self):
        result = PointResult.parse(' 25 : 23 ')
        assert (result.home, result.guest) == (25, 23)

    def test_only_separator_gives_empty_result(self):
        assert PointResult.parse('-', '-') == PointResult(None, None, '-')

    def test_empty_string_gives_empty_result(self):
        result = PointResult.parse('')
        assert result.home is None and result.guest is None


class TestPointResultFormatting:

    @pytest.mark.parametrize('home, guest, expected', [(12, 25, '12:25'), (None, None, '-:-')])
    def test_str(self, home, guest, expected):
        assert str(PointResult(home, guest)) == expected

    def test_custom_separator(self):
        assert str(PointResult(3, 1, '-')) == '3-1'

    def test_format_template(self):
        assert PointResult(3, None).format('Home: {0} - Guest: {1}') == 'Home: 3 - Guest: -'


class TestPointResultArithmetic:

    def test_add(self):
        result = PointResult.parse('1:25') + PointResult.parse('25:1')
        assert (result.home, result.guest) == (26, 26)

    def test_add_empty_result(self):
        result = PointResult.parse('1:25') + PointResult(None, None)
        assert (result.home, result.guest) == (1, 25)

    def test_subtract(self):
        result = PointResult.parse('25:23') - PointResult.parse('23:21')
        assert (result.home, result.guest) == (2, 2)

    def test_subtract_below_zero_raises(self):
        with pytest.raises(ValueError):
            PointResult.parse('1:25') - PointResult.parse('2:0')


class TestPointResultComparison:

    def test_equality(self):
        assert PointResult.parse('25:18') == PointResult.parse('25:18')
        assert not PointResult.parse('25:18') != PointResult.parse('25:18')

    @pytest.mark.parametrize(
        'a, b, expected',
        [
            ('25:0', '25:1', True),
            ('0:25', '25:0', False),
            ('0:25', '1:25', False),
            ('4:25', '1:25', True),
            ('25:4', '25:1', False),
        ],
    )
    def test_greater_than(self, a, b, expected):
        assert (PointResult.parse(a) > PointResult.parse(b)) is expected

    def test_missing_points_count_as_zero(self):
        assert PointResult(None, None).compare(PointResult(0, 0)) == 0

    def test_any_result_is_greater_than_none(self):
        assert PointResult(0, 0).compare(None) == 1

    def test_usable_as_dict_key(self):
        assert {PointResult(1, 2): 'x'}[PointResult(1, 2)] == 'x'

    def test_non_strict_ordering_follows_equality(self):
        assert PointResult(1, 2) <= PointResult(1, 2)
        assert PointResult(1, 2) >= PointResult(1, 2)
        assert PointResult(2, 2) >= PointResult(1, 2)
        assert not PointResult(None, None) <= PointResult(0, 0)
        assert not PointResult(None, None) >= PointResult(0, 0)
