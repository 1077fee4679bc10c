# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Setup configuration for the SDK Registry Resolver
"""

from setuptools import setup, find_packages

setup(
    name="sdk-registry-resolver",
    version="1.0.0",
    description="Resolve installable SDK versions from remote artifact registry listings",
    author="Jason Cafarelli",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "httpx>=0.25.0",
        "pydantic>=2.0.0",
        "tomli-w>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sdk-registry=sdk_registry.cli:main",
        ]
    },
)
