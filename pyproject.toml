[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "countryip"
version = "0.1.0"
description = "Look up the country of an IPv4 address from an ipinfo lite CSV file, with several index structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["ip", "ipv4", "geolocation", "country", "subnet", "lookup", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["countryip"]

[tool.pytest.ini_options]
addopts = "-ra"
