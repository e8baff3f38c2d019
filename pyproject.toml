[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mzbatgen"
version = "0.1.0"
description = "Generate batch scripts that run MzGenerator feature extraction over a folder of images and ROIs"
requires-python = ">=3.10"
dependencies = []
keywords = ["mazda", "qmazda", "texture", "features", "roi", "batch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mzbatgen = "mzbatgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mzbatgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
