# metricpulse

metricpulse collects metrics and writes them to a log file at a fixed
interval. The writing happens on a background thread. Each line holds a
millisecond local timestamp, then every registered metric, in the order the
metrics were registered, as a quoted name followed by its current value:

```
2024-05-01 12:00:01.003 "cpu_performance_score" 87 "memory_usage_mb" 10432 "divisible_by_3" 6
```

Reading a value resets it, so each line covers only the last interval. No
line is written while no metric is registered.

## Metrics

Every metric subclasses `metricpulse.metric.Metric`. It has a `name` and a
`get_value_and_reset()` method that returns the value as text. To write your
own metric, subclass `Metric`, set `name` and implement
`get_value_and_reset()`.

- `metricpulse.counter.CounterMetric(name)` counts the numbers passed to
  `consider_number(value)` that are divisible by 3.
- `metricpulse.cpu.CpuPerformanceMetric(name, interval=0.1)` runs a fixed
  floating-point workload on a thread. It reports how many rounds of that
  workload finished in the last measuring interval of `interval` seconds.
  Measuring runs between `start_measuring()` and `stop_measuring()`.
  `is_running` tells whether it is active. The metric can also be used as a
  context manager, which starts and stops measuring.
- `metricpulse.memory.MemoryUsageMetric(name="memory_usage_mb")` reports the
  resident memory of the current process in kilobytes, read from
  `/proc/self/status`. The helper `read_memory_usage_kb()` returns the same
  figure as an integer.
- `metricpulse.robot_count.RobotCount(name, tracker)` reports how many users
  a `ClickTracker` has banned as robots since it was last read.

## Writing metrics

```python
from metricpulse.counter import CounterMetric
from metricpulse.memory import MemoryUsageMetric
from metricpulse.writer import MetricsWriter

counter = CounterMetric("divisible_by_3")
writer = MetricsWriter("metrics.log", 1.0)  # one line per second
writer.register_metric(counter)
writer.register_metric(MemoryUsageMetric("memory_usage_mb"))
writer.start()

for n in range(100):
    counter.consider_number(n)

writer.stop()
```

`MetricsWriter(filename, write_interval)` truncates its file when it is
created, and later lines are appended to it. `write_interval` is in seconds.
`stop()` wakes the writer at once, so it writes one last line before it
exits. It then waits for the thread to finish. Calling `start()` a second
time raises `RuntimeError`. The writer can also be used as a context manager
(`with writer:`), which starts and stops it.

`metricpulse.writer.get_timestamp()` returns the current local time in the
format used at the start of each line.

## Click tracking

`metricpulse.click_tracker.ClickTracker(robot_interval, robot_clicks)` bans a
user as a robot once `robot_clicks` of that user's clicks fall within
`robot_interval` seconds. From then on, clicks from that user are ignored.
It is safe to use from several threads.

- `register_click(user_id, time=None)` records a click. `time` is in
  monotonic seconds and defaults to now.
- `count_users()` returns the number of users it is tracking who are not
  banned.
- `count_robots()` returns the number of banned users.
- `get_newly_banned_and_reset()` returns the number of bans since the last
  call.
- `clicks` is the number of clicks accepted from users who were not banned.

## Commands

```
metricpulse [--log FILE] [--duration SECONDS] [--write-interval SECONDS]
```

This command runs the demo. It measures CPU performance and memory use, and
counts random numbers between 1 and 1000 that are divisible by 3, one number
every 50 ms. The defaults are a ten-second run, one line per second, and the
file `system_metrics.log`.

```
metricpulse-robot-sim [--log FILE] [--users N] [--clicks N] [--robot-clicks N]
                      [--robot-interval SECONDS] [--write-interval SECONDS]
                      [--seed N]
```

This command simulates clicks from random users, sent in random batches. It
logs robots detected per interval as `robots_detected_per_sec`. The defaults
are 15 users, 500 clicks, 5 clicks within 0.1 seconds to count as a robot,
one line per second, and the file `robot_metric_test.log`. After the last
click it waits two write intervals before it exits.

## Limitations

Memory usage is only read on Linux. On other platforms
`read_memory_usage_kb()` returns `None`, and `MemoryUsageMetric` reports
`N/A` and prints a notice to standard error.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, then run: pytest
```