"""
setup.py for multilevel-linkage.

All project metadata lives in pyproject.toml; this file only exists so that
legacy ``python setup.py develop`` workflows keep working.
"""

from setuptools import setup


if __name__ == "__main__":
    # Read configuration from pyproject.toml
    setup()
