[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "youvideo"
version = "0.1.0"
description = "Video library helpers: file scanning, checksums, subtitles, Bangumi lookups, search index bookkeeping and a transcoding client"
requires-python = ">=3.10"
keywords = ["video", "library", "media", "subtitles", "bangumi", "meilisearch", "transcoding"]
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
    "Topic :: Multimedia :: Video",
]
dependencies = [
    "requests",
    "pillow",
    "psutil",
    "pyjwt",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["youvideo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
