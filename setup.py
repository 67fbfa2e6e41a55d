from setuptools import setup, find_packages

# Import version from the package
from jsonindex.version import __version__

setup(
    name="jsonindex",
    version=__version__,
    packages=find_packages(include=["jsonindex", "jsonindex.*"]),
    install_requires=[
        "typer>=0.9.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "jsonindex=jsonindex.main:app",
        ],
    },
    python_requires=">=3.10",
)
