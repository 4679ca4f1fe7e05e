[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmmeter"
version = "0.1.0"
description = "Voltage-divider ohmmeter logic: E24 matching, colour bands, SSD1306 framebuffer and LED matrix rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["ohmmeter", "resistor", "e24", "color-code", "ssd1306", "neopixel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ohmmeter = "ohmmeter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ohmmeter"]

[tool.pytest.ini_options]
addopts = "-ra"
