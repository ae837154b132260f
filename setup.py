from setuptools import find_packages, setup

setup(
    name="barlab",
    version="0.1.0",
    packages=find_packages(include=["barlab", "barlab.*"]),
    python_requires=">= 3.11",
    install_requires=[
        "colorlog",
        "mergedeep",
        "pandas",
        "pyyaml",
        "simplejson",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
        "dev": [
            "black",
            "flake8",
            "flake8-bugbear",
            "flake8-comprehensions",
            "flake8-isort",
            "isort",
            "mypy",
            "pytest",
            "pytest-mock",
            "types-pyyaml",
            "types-setuptools",
            "types-simplejson",
        ],
    },
)
