import math
import time
from decimal import Decimal

import pytest

from convective.utils import current_timestamp_ms, decimal_to_f64, truncate_to_decimal


def test_decimal_to_f64_plain_value():
    assert decimal_to_f64(Decimal("1.5")) == 1.5


def test_decimal_to_f64_negative():
    assert decimal_to_f64(Decimal("-42.25")) == -42.25


def test_decimal_to_f64_nan():
    assert str(decimal_to_f64(Decimal("NaN"))) == "nan"


def test_truncate_to_eight_places():
    assert truncate_to_decimal(1.23456789123, 8) == 1.23456789


def test_truncate_rounds_toward_zero_for_negatives():
    assert truncate_to_decimal(-2.759, 2) == -2.75


def test_truncate_leaves_whole_numbers():
    assert truncate_to_decimal(5.0, 3) == 5.0


@pytest.mark.parametrize("num", [0.123456, 98.7654321, -3.14159265, 1e-9, 12345.678])
@pytest.mark.parametrize("places", [0, 2, 4])
def test_truncate_invariants(num, places):
    result = truncate_to_decimal(num, places)
    assert abs(result) <= abs(num) + 1e-12
    assert abs(num - result) < 10.0**-places + 1e-9
    assert truncate_to_decimal(result, places) == result


def test_truncate_infinity_passes_through():
    assert truncate_to_decimal(math.inf, 4) == math.inf


def test_truncate_negative_places_rejected():
    with pytest.raises(ValueError):
        truncate_to_decimal(1.0, -1)


def test_current_timestamp_ms_is_now():
    before = time.time_ns() // 1_000_000
    value = current_timestamp_ms()
    after = time.time_ns() // 1_000_000
    assert before <= value <= after