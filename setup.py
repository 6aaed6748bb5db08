#!/usr/bin/env python3
"""
Setup script for Structured Data Pipeline.
"""

from pathlib import Path

from setuptools import find_packages, setup


# Read the README file (optional for Docker builds)
def read_readme():
    try:
        with open("README.md", "r", encoding="utf-8") as fh:
            return fh.read()
    except FileNotFoundError:
        return "Structured Data Pipeline - registers a structured data analysis pipeline with Data Machine"


# Read requirements
def read_requirements(filename="requirements.txt"):
    try:
        with open(filename, "r", encoding="utf-8") as fh:
            return [
                line.strip()
                for line in fh
                if line.strip()
                and not line.startswith("#")
                and not line.startswith("-r")
            ]
    except FileNotFoundError:
        return []


# Read version from _version.py
def read_version():
    """
    Read version from _version.py module.
    This allows the version to be dynamically determined from Git tags.
    """
    import sys

    src_path = Path(__file__).parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    try:
        from structured_data_pipeline._version import __version__

        return __version__
    except ImportError:
        return "0.1.0"


setup(
    name="structured-data-pipeline",
    version=read_version(),
    description="Registers the structured data analysis pipeline with the Data Machine orchestration plugin",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"structured_data_pipeline": ["config/*.yml"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.11",
    install_requires=read_requirements(),
    extras_require={
        "dev": read_requirements("requirements-dev.txt"),
    },
    entry_points={
        "console_scripts": [
            "structured-data-pipeline=structured_data_pipeline.main:cli",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
