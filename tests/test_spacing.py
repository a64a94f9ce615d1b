from datetime import date, datetime, timedelta, timezone

import pytest

from horizontal_timeline.core import (
    ConfigurationError,
    EmptyInputError,
    InvalidDateError,
    LengthMismatchError,
    compute_offsets,
    cumulative_separation,
    day_difference,
    zip_values,
)


@pytest.fixture
def irregular_dates():
    """Dates with gaps of 1, 30, 3 and 90 days."""
    start = date(2020, 1, 1)
    return [start + timedelta(days=d) for d in (0, 1, 31, 34, 124)]


def gaps(offsets):
    return [b - a for a, b in zip(offsets, offsets[1:])]


def test_day_difference_is_symmetric():
    a, b = date(2020, 1, 1), date(2020, 3, 1)
    assert day_difference(a, b) == 60
    assert day_difference(b, a) == 60


def test_day_difference_equal_dates():
    assert day_difference(date(1993, 1, 1), date(1993, 1, 1)) == 0


def test_day_difference_rounds_to_whole_days():
    a = datetime(2020, 1, 1, 0, 0)
    b = datetime(2020, 1, 2, 18, 0)
    assert day_difference(a, b) == 2


def test_day_difference_normalizes_timezones():
    a = datetime(2020, 1, 2, 1, 0, tzinfo=timezone(timedelta(hours=2)))
    assert day_difference(a, date(2020, 1, 1)) == 1
    assert day_difference(date(2020, 1, 1), datetime(2020, 1, 1, 0, 0)) == 0


def test_day_difference_rejects_non_dates():
    with pytest.raises(InvalidDateError):
        day_difference("2020-01-01", date(2020, 1, 1))


def test_concrete_scenario():
    dates = [date(2020, 1, 1), date(2020, 1, 2), date(2020, 2, 1)]
    assert cumulative_separation(dates, 100, 50, 150, 20) == [20, 170, 420]


def test_single_event_returns_line_padding():
    assert cumulative_separation([date(2020, 5, 5)], 85, 20, 120, 100) == [100]


def test_identical_dates_get_minimum_gap():
    dates = [date(2020, 1, 1), date(2020, 1, 1)]
    assert cumulative_separation(dates, 85, 20, 120, 100) == [100, 205]


def test_zero_gap_next_to_real_gap():
    d = date(2021, 6, 1)
    dates = [d, d, d + timedelta(days=10)]
    assert gaps(cumulative_separation(dates, 10, 5, 50, 0)) == [15, 60]


def test_equal_gaps_map_onto_minimum_padding():
    start = date(2020, 1, 1)
    dates = [start, start + timedelta(days=7), start + timedelta(days=14)]
    assert cumulative_separation(dates, 10, 5, 100, 30) == [30, 45, 60]


def test_unsaturated_gaps_are_proportional():
    dates = [date(2020, 1, 1), date(2020, 1, 11), date(2020, 1, 31), date(2020, 3, 11)]
    assert cumulative_separation(dates, 10, 5, 100, 0) == [0, 35, 95, 205]


def test_offsets_strictly_increase(irregular_dates):
    offsets = cumulative_separation(irregular_dates, 85, 20, 120, 100)
    assert all(a < b for a, b in zip(offsets, offsets[1:]))
    assert offsets[0] >= 100


def test_gaps_respect_clamp(irregular_dates):
    label_width, min_pad, max_pad = 85, 20, 120
    offsets = cumulative_separation(irregular_dates, label_width, min_pad, max_pad, 100)
    for gap in gaps(offsets):
        assert label_width + min_pad <= gap <= label_width + max_pad


def test_longer_intervals_never_get_smaller_gaps(irregular_dates):
    offsets = cumulative_separation(irregular_dates, 85, 20, 120, 100)
    day_gaps = [
        day_difference(a, b) for a, b in zip(irregular_dates, irregular_dates[1:])
    ]
    pixel_gaps = gaps(offsets)
    for i in range(len(day_gaps)):
        for j in range(len(day_gaps)):
            if day_gaps[i] > day_gaps[j]:
                assert pixel_gaps[i] >= pixel_gaps[j]


def test_largest_interval_reaches_maximum_gap(irregular_dates):
    offsets = cumulative_separation(irregular_dates, 85, 20, 120, 100)
    assert max(gaps(offsets)) == 85 + 120


def test_repeated_calls_are_identical(irregular_dates):
    first = compute_offsets(irregular_dates, 85, 20, 120, 100)
    second = compute_offsets(irregular_dates, 85, 20, 120, 100)
    assert first == second
    assert first is not second


def test_compute_offsets_matches_cumulative_separation(irregular_dates):
    assert compute_offsets(irregular_dates, 60, 10, 90, 5) == cumulative_separation(
        irregular_dates, 60, 10, 90, 5
    )


def test_empty_dates_raise():
    with pytest.raises(EmptyInputError):
        cumulative_separation([], 85, 20, 120, 100)


def test_min_padding_above_max_raises():
    with pytest.raises(ConfigurationError, match="exceeds"):
        cumulative_separation([date(2020, 1, 1)], 85, 130, 120, 100)


def test_negative_constraint_raises():
    with pytest.raises(ConfigurationError, match="negative"):
        cumulative_separation([date(2020, 1, 1)], 85, 20, 120, -1)


def test_zero_width_and_zero_min_padding_raise():
    with pytest.raises(ConfigurationError):
        cumulative_separation([date(2020, 1, 1), date(2020, 1, 2)], 0, 0, 10, 0)


def test_strings_are_not_dates():
    with pytest.raises(InvalidDateError):
        cumulative_separation(["2020-01-01"], 85, 20, 120, 100)


def test_zip_values_pairs_by_index():
    assert zip_values([1, 2], ["a", "b"]) == [(1, "a"), (2, "b")]


def test_zip_values_rejects_different_lengths():
    with pytest.raises(LengthMismatchError):
        zip_values([1, 2, 3], ["a", "b"])


def test_day_difference_rounds_half_days_up():
    start = datetime(2020, 1, 1)
    assert [
        day_difference(start, start + timedelta(hours=h)) for h in (12, 36, 60)
    ] == [1, 2, 3]


@pytest.mark.parametrize("bad", [float("nan"), float("inf")])
def test_non_finite_constraints_raise(bad):
    dates = [date(2020, 1, 1), date(2020, 1, 5)]
    with pytest.raises(ConfigurationError, match="finite"):
        cumulative_separation(dates, 85, 20, bad, 100)
    with pytest.raises(ConfigurationError, match="finite"):
        cumulative_separation(dates, bad, 20, 120, 100)
