[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barstatus"
version = "0.1.0"
description = "Status-line generator for window-manager bars: CPU, memory, battery, network, clock and more."
requires-python = ">=3.10"
keywords = ["status", "statusbar", "status-line", "monitoring", "window-manager", "x11"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
barstatus = "barstatus.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["barstatus"]

[tool.pytest.ini_options]
addopts = "-ra"
