[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "internmonitor"
version = "0.2.0"
description = "Watch LinkedIn for new internship postings and announce them on a Discord webhook."
requires-python = ">=3.10"
keywords = ["internship", "jobs", "linkedin", "discord", "webhook", "monitor", "scraper"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
internmonitor = "internmonitor.app:main"

[tool.hatch.build.targets.wheel]
packages = ["internmonitor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
