from __future__ import annotations

import os

from setuptools import setup


def read_version() -> str:
    """Read the version number, preferring the environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "1.0.0"

setup(
    name="genestring",
    version=read_version(),
    description="Fixed-capacity bit-addressable gene strings packed into 64-bit words.",
    long_description="Fixed-capacity bit-addressable gene strings packed into 64-bit words.",
    long_description_content_type="text/plain",
    packages=["genestring"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
)
