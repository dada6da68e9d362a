[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "themeforge"
version = "0.1.0"
description = "Editor and previewer for launcher themes: JSON metadata, CSS colour variables and screen layouts"
requires-python = ">=3.10"
dependencies = []
keywords = ["theme", "editor", "css", "json", "launcher", "preview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
themeforge = "themeforge.app:main"

[tool.hatch.build.targets.wheel]
packages = ["themeforge"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
