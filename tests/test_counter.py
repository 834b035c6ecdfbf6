"""Tests for InstanceCounter."""
import logging
from concurrent.futures import ThreadPoolExecutor

from celebration_records.contract.schemas.calendar import Month
from celebration_records.contract.schemas.records import SpecialDate
from celebration_records.counter import InstanceCounter


def test_starts_at_zero():
    counter = InstanceCounter("sample")

    assert counter.value == 0
    assert counter.name == "sample"


def test_increment_returns_new_value():
    counter = InstanceCounter("sample")

    assert counter.increment() == 1
    assert counter.increment() == 2
    assert counter.value == 2


def test_concurrent_increments_are_not_lost():
    counter = InstanceCounter("sample")

    def bump(_):
        for _ in range(500):
            counter.increment()

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(bump, range(8)))

    assert counter.value == 8 * 500


def test_concurrent_special_dates_are_all_counted():
    before = SpecialDate.date_counter.value

    def build(i):
        return SpecialDate(name=f"Day {i}", day=i % 31 + 1, month=Month.JULY)

    with ThreadPoolExecutor(max_workers=4) as pool:
        built = list(pool.map(build, range(200)))

    assert len(built) == 200
    assert built[0].total_dates() == before + 200


def test_increment_is_logged(caplog):
    counter = InstanceCounter("sample")

    with caplog.at_level(logging.DEBUG, logger="celebration_records"):
        counter.increment()

    assert "sample count incremented to 1" in caplog.text
