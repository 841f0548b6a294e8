[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jetmon"
version = "0.1.0"
description = "Monitoring of NVIDIA Jetson boards: power rails, thermal zones, GPU processes and plain-text screens"
requires-python = ">=3.10"
dependencies = []
keywords = ["jetson", "nvidia", "tegra", "monitoring", "sysfs", "dashboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jetmon"]

[tool.pytest.ini_options]
addopts = "-ra"
