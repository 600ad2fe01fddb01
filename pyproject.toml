[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketcalc"
version = "1.0.0"
description = "A small borderless desktop pocket calculator with a four-function keypad and a scriptable calculation engine."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arithmetic", "desktop", "keypad", "tkinter"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pocketcalc = "pocketcalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketcalc"]

[tool.hatch.build.targets.sdist]
include = ["pocketcalc", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
strict = true
