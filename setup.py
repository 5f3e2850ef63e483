# setup.py
from setuptools import setup, find_packages
import os

# Version lives in the package so the CLI can report it
init_path = os.path.join("uforth", "__init__.py")
with open(init_path, encoding="utf-8") as f:
    version = next(line.split('"')[1] for line in f if line.startswith("__version__"))

setup(
    name="uforth",
    version=version,
    description="A small stack-based, Forth-like language interpreter",
    packages=find_packages(exclude=("tests", "tests.*", "benchmarks")),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["uforth = uforth.repl:main"],
    },
    zip_safe=False,
)
