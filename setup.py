"""
TensorGrid – 3D cube layouts for inspecting N-dimensional tensor shapes.
"""

import re
from pathlib import Path
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


def read_version():
    """Read version from TensorGrid/version.py without importing package."""
    version_path = Path(__file__).resolve().parent / "TensorGrid" / "version.py"
    text = version_path.read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*"([^"]+)"', text, re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find __version__ in TensorGrid/version.py")
    return match.group(1)


setup(
    name="tensorgrid",
    version=read_version(),
    author="TensorGrid Team",
    description="Visualize N-dimensional tensor shapes as 3D grids of cubes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Visualization",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.5.0",
        "pandas>=1.3.0",
        "plotly>=6.1.1",
    ],
    entry_points={
        'console_scripts': [
            'tensorgrid=TensorGrid.web.cli:main',
            'tensorgrid-layout=TensorGrid.cli:main',
        ],
    },
    extras_require={
        "web": [
            "streamlit>=1.23.0",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
        ],
    },
)
