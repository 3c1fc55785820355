# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="sharecheck",
    version="0.1.0",
    description="sharecheck — exact Shamir secret reconstruction with bad-share detection",
    author="sharecheck contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sharecheck=sharecheck.cli:main",
        ],
    },
)
