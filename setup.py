"""Setup script for anygraph."""

from setuptools import find_packages, setup

setup(
    name="anygraph",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "networkx": ["networkx>=3.0"],
        "test": ["pytest>=7.0", "networkx>=3.0"],
    },
)
