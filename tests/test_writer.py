import re
import time
from datetime import datetime

import pytest

from metricpulse.counter import CounterMetric
from metricpulse.metric import Metric
from metricpulse.writer import MetricsWriter, get_timestamp

TIMESTAMP = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}"


class _Ticker(Metric):
    def __init__(self, name):
        self.name = name
        self.calls = 0

    def get_value_and_reset(self):
        self.calls += 1
        return str(self.calls)


def _lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_timestamp_format_and_closeness():
    stamp = get_timestamp()
    assert re.fullmatch(TIMESTAMP, stamp)
    parsed = datetime.strptime(stamp, "%Y-%m-%d %H:%M:%S.%f")
    assert abs((datetime.now() - parsed).total_seconds()) < 5


def test_constructor_truncates_file(tmp_path):
    log = tmp_path / "metrics.log"
    log.write_text("old content\n", encoding="utf-8")
    MetricsWriter(log, 0.05)
    assert log.read_text(encoding="utf-8") == ""


def test_constructor_rejects_directory(tmp_path):
    with pytest.raises(OSError):
        MetricsWriter(tmp_path, 0.05)


def test_writes_lines_for_registered_metric(tmp_path):
    log = tmp_path / "metrics.log"
    writer = MetricsWriter(log, 0.05)
    ticker = _Ticker("fake")
    writer.register_metric(ticker)
    writer.start()
    time.sleep(0.3)
    writer.stop()
    lines = _lines(log)
    assert len(lines) >= 2
    assert len(lines) == ticker.calls
    for number, line in enumerate(lines, start=1):
        assert re.fullmatch(TIMESTAMP + f' "fake" {number}', line)


def test_metrics_appear_in_registration_order(tmp_path):
    log = tmp_path / "metrics.log"
    with MetricsWriter(log, 0.05) as writer:
        writer.register_metric(_Ticker("first"))
        writer.register_metric(_Ticker("second"))
        time.sleep(0.2)
    lines = _lines(log)
    assert lines
    for line in lines:
        assert re.fullmatch(TIMESTAMP + r' "first" \d+ "second" \d+', line)


def test_counter_values_are_reset_between_lines(tmp_path):
    log = tmp_path / "metrics.log"
    counter = CounterMetric("divisible_by_3")
    counter.consider_number(3)
    counter.consider_number(6)
    writer = MetricsWriter(log, 0.05)
    writer.register_metric(counter)
    writer.start()
    time.sleep(0.25)
    writer.stop()
    values = [line.rsplit(" ", 1)[1] for line in _lines(log)]
    assert values[0] == "2"
    assert set(values[1:]) <= {"0"}


def test_no_lines_without_metrics(tmp_path):
    log = tmp_path / "metrics.log"
    writer = MetricsWriter(log, 0.05)
    writer.start()
    time.sleep(0.2)
    writer.stop()
    assert log.read_text(encoding="utf-8") == ""


def test_starting_twice_raises(tmp_path):
    writer = MetricsWriter(tmp_path / "metrics.log", 0.05)
    writer.start()
    try:
        with pytest.raises(RuntimeError):
            writer.start()
    finally:
        writer.stop()


def test_stop_without_start_writes_nothing(tmp_path):
    log = tmp_path / "metrics.log"
    writer = MetricsWriter(log, 0.05)
    writer.register_metric(_Ticker("fake"))
    writer.stop()
    assert log.read_text(encoding="utf-8") == ""


def test_unopenable_file_reports_error(tmp_path, capsys):
    log = tmp_path / "metrics.log"
    writer = MetricsWriter(log, 0.05)
    log.unlink()
    log.mkdir()
    writer.register_metric(_Ticker("fake"))
    writer.start()
    writer.stop()
    assert "Could not open metrics file" in capsys.readouterr().err