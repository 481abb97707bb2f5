[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicekit"
version = "0.1.0"
description = "Small practice programs: a student list, a calculator, converters and array exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "practice", "calculator", "palindrome", "factorial", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicekit-students = "practicekit.students:main"
practicekit-calculator = "practicekit.calculator:main"
practicekit-palindrome = "practicekit.palindrome:main"
practicekit-temperature = "practicekit.temperature:main"
practicekit-array = "practicekit.dynamic_array:main"
practicekit-arrays = "practicekit.arrays:main"
practicekit-area = "practicekit.area:main"
practicekit-factorial = "practicekit.factorial:main"

[tool.hatch.build.targets.wheel]
packages = ["practicekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
