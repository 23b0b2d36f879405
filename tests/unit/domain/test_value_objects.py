"""Unit tests for domain value objects."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from core.domain.value_objects import DateRange, ExecutionID


def test_execution_id_has_sched_prefix():
    execution_id = ExecutionID.generate()

    assert execution_id.value.startswith("sched-")
    assert execution_id.value[len("sched-"):].isdigit()
    assert str(execution_id) == execution_id.value


def test_execution_ids_are_unique_in_a_tight_loop():
    ids = [ExecutionID.generate().value for _ in range(1000)]

    assert len(set(ids)) == len(ids)


def test_execution_ids_are_unique_across_threads():
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: ExecutionID.generate().value, range(400)))

    assert len(set(ids)) == 400


def test_execution_id_readings_increase():
    first = int(ExecutionID.generate().value.split("-")[1])
    second = int(ExecutionID.generate().value.split("-")[1])

    assert second > first


def test_date_range_last_days_is_inclusive():
    date_range = DateRange.last_days(7, today=date(2025, 1, 12))

    assert date_range.start == date(2025, 1, 6)
    assert date_range.end == date(2025, 1, 12)
    assert date_range.to_dict() == {"start": "2025-01-06", "end": "2025-01-12"}


def test_date_range_single_day():
    date_range = DateRange.last_days(1, today=date(2025, 3, 1))

    assert date_range.start == date_range.end == date(2025, 3, 1)


def test_date_range_rejects_zero_days():
    with pytest.raises(ValueError, match="at least 1"):
        DateRange.last_days(0)


def test_date_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        DateRange(start=date(2025, 1, 2), end=date(2025, 1, 1))
