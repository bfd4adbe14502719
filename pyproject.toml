[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricpulse"
version = "0.1.0"
description = "Periodic metric collection to a log file, with CPU, memory, counter and click-robot metrics"
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "monitoring", "logging", "cpu", "memory", "click tracking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metricpulse = "metricpulse.app:main"
metricpulse-robot-sim = "metricpulse.robot_sim:main"

[tool.hatch.build.targets.wheel]
packages = ["metricpulse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
