[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miltoncore"
version = "0.1.0"
description = "Vector and rectangle math, overlay geometry, clipping rules and shader header generation for an infinite-canvas paint program"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "painting",
    "canvas",
    "geometry",
    "rectangles",
    "overlay",
    "clipping",
    "shaders",
    "glsl",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
miltoncore-shadergen = "miltoncore.shadergen:main"

[tool.hatch.build.targets.wheel]
packages = ["miltoncore"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
