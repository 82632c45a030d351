#!/usr/bin/env python3
"""
Setup configuration for vcard-builder package.

Install in development mode: pip install -e .[test]
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read the README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="vcard-builder",
    version="1.0.0",
    description="Build and parse vCard 3.0 contact records with a chainable API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["vcard_builder", "vcard_builder.*"]),
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Communications",
        "Topic :: Text Processing",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords="vcard vcf contacts address-book",
)
