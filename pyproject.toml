[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xornets"
version = "0.1.0"
description = "Small neural networks that learn the XOR function: a perceptron, a tiny sigmoid net and a two-hidden-layer matrix network"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural-network", "perceptron", "xor", "backpropagation", "sigmoid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xornets-perceptron = "xornets.perceptron:main"
xornets-ann = "xornets.ann:main"
xornets-sigmoid = "xornets.sigmoid_net:main"

[tool.hatch.build.targets.wheel]
packages = ["xornets"]

[tool.pytest.ini_options]
addopts = "-ra"
