from datetime import datetime, timezone

import pytest

from nftsim.mathutil import current_date, int_div_ceil, truncate_float


@pytest.mark.parametrize("number,divisor", [(1024, 15), (1, 15), (15, 15), (16, 15), (999, 7)])
def test_div_ceil_bounds(number, divisor):
    result = int_div_ceil(number, divisor)
    assert result * divisor >= number
    assert (result - 1) * divisor < number


def test_div_ceil_exact():
    assert int_div_ceil(30, 15) == 2
    assert int_div_ceil(0, 15) == 0


def test_div_ceil_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        int_div_ceil(5, 0)


@pytest.mark.parametrize("value", [0.1, 1.239, 9.999, 10.1, 0.1499])
def test_truncate_float_bounds(value):
    result = truncate_float(value)
    assert result <= value
    assert value - result < 0.01 + 1e-9


def test_truncate_float_idempotent():
    once = truncate_float(7.5678)
    assert truncate_float(once) == once


def test_truncate_float_toward_zero():
    assert truncate_float(-1.239) >= -1.239


def test_current_date_format():
    moment = datetime(2025, 5, 18, 12, 0, tzinfo=timezone.utc)
    assert current_date(moment) == "Sunday May 18, 2025"


def test_current_date_uses_market_zone():
    late_utc = datetime(2025, 5, 17, 20, 0, tzinfo=timezone.utc)
    assert current_date(late_utc) == "Sunday May 18, 2025"