[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vugu"
version = "0.1.0"
description = "Data hashing, DOM event support, HTML atoms and charset sniffing for virtual-DOM web UIs, plus distribution helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "virtual-dom",
    "html",
    "atoms",
    "charset",
    "hashing",
    "static-files",
]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vugu"]

[tool.hatch.build.targets.sdist]
include = ["vugu", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
