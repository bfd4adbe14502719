import threading

import pytest

from metricpulse.counter import CounterMetric


def test_name_is_kept():
    assert CounterMetric("divisible_by_3").name == "divisible_by_3"


def test_fresh_counter_is_zero():
    assert CounterMetric("c").get_value_and_reset() == "0"


def test_counts_only_multiples_of_three():
    counter = CounterMetric("c")
    for value in (3, 4, 6, 7, 8, 9, 10):
        counter.consider_number(value)
    assert counter.get_value_and_reset() == "3"


@pytest.mark.parametrize("value", [0, -3, -9, 999])
def test_zero_and_negative_multiples_count(value):
    counter = CounterMetric("c")
    counter.consider_number(value)
    assert counter.get_value_and_reset() == "1"


@pytest.mark.parametrize("value", [1, 2, -4, 1000])
def test_non_multiples_are_ignored(value):
    counter = CounterMetric("c")
    counter.consider_number(value)
    assert counter.get_value_and_reset() == "0"


def test_reading_resets_the_count():
    counter = CounterMetric("c")
    counter.consider_number(3)
    counter.consider_number(6)
    assert counter.get_value_and_reset() == "2"
    assert counter.get_value_and_reset() == "0"
    counter.consider_number(12)
    assert counter.get_value_and_reset() == "1"


def test_concurrent_updates_are_not_lost():
    counter = CounterMetric("c")
    workers = 4
    per_worker = 500

    def feed():
        for _ in range(per_worker):
            counter.consider_number(3)

    threads = [threading.Thread(target=feed) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert int(counter.get_value_and_reset()) == workers * per_worker