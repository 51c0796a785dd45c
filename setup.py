#!/usr/bin/env python
"""
Setup.py for grafferous.
"""

from setuptools import setup, find_packages

setup(
    name="grafferous",
    version="0.1.0",
    description="Generic in-memory graph container with structural queries",
    packages=find_packages(include=["grafferous", "grafferous.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
