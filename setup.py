from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="weightedgraph",
    version="0.1.0",
    description="Minimum spanning trees and shortest paths on weighted undirected graphs",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["numpy", "joblib"],
    extras_require={"test": ["pytest"]},
)
