# !/usr/bin/env python
# Copyright (c) 2024, Juanwu Lu.
# Released under the BSD 3-Clause License.
# Please see the LICENSE file that should have been included as part of this
# project source code.
import importlib.util
import os

from setuptools import find_packages, setup

# load the metadata module alone, the package needs runtime dependencies
_spec = importlib.util.spec_from_file_location(
    "_metadata", os.path.join("logarithm", "_metadata.py")
)
_metadata = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(_metadata)

setup(
    name="logarithm",
    version=_metadata.version,
    author=_metadata.author,
    description="Validated logarithms in arbitrary bases.",
    packages=find_packages(include=["logarithm", "logarithm.*"]),
    python_requires=">=3.8",
    install_requires=["lightning>=2.0"],
    extras_require={"test": ["pytest"]},
)
