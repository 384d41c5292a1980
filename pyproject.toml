[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starshooter"
version = "0.1.0"
description = "A small 2D vertical shooter and a set of transform demos drawn with pygame"
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "pygame", "transforms", "arcball"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
starshooter = "starshooter.game:main"
starshooter-spin = "starshooter.spin_demo:main"
starshooter-penta = "starshooter.penta_demo:main"
starshooter-shapes = "starshooter.shapes_demo:main"
starshooter-hierarchy = "starshooter.hierarchy_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["starshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
