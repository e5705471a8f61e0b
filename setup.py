# setup.py

from setuptools import setup, find_packages

setup(
    name="sparse_rmq",
    version="0.1.0",
    description="Static sparse table for constant-time range-minimum queries",
    packages=find_packages(exclude=["tests*", "benchmarks*", "examples*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
