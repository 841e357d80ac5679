#!/usr/bin/env python

import os
import re
from setuptools import setup

# Utility functions so that we can populate the package description and the
# version number automatically.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()

def find_version(fname):
    version_file = read(fname)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")

setup(
    name="SeqSet",
    version=find_version("seqset/__init__.py"),
    author="SeqSet developers",
    description="An insertion ordered set with structural equality that plugs into generic sequence functions",
    license="MIT",
    packages=["seqset","seqset.util"],
    package_data={"seqset": ["py.typed"]},
    zip_safe=False,  # https://mypy.readthedocs.io/en/latest/installed_packages.html
    python_requires=">=3.8",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    long_description=read("README.rst"),
)
