[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "renderkit"
version = "0.1.0"
description = "Real-time rendering math: matrices, quaternions, cameras, trackball, tone mapping, grid shading, SSAO and light-adaptation pass planning"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["rendering", "graphics", "tone mapping", "camera", "quaternion", "ssao", "hdr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["renderkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
