# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Setup configuration for metric-facade package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="metric-facade",
    version="0.1.0",
    author="metric-facade contributors",
    description="Client-side facade for emitting typed metric events to a pluggable backend client",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["metric_facade", "metric_facade.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        # No required dependencies for the facade, NoOp and logging clients
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pylint>=3.0.0",
            "mypy>=1.0.0",
        ],
        "prometheus": [
            "prometheus-client>=0.19.0",  # Prometheus metrics client
        ],
    },
)
