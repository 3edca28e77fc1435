"""
Setup script for the tron-racing package.

Installs the ``tron_racing`` package from ``src/`` together with the
``tron-racing`` console script.
"""

from setuptools import setup, find_packages

setup(
    name="tron-racing",
    version="1.0.0",
    description="Time-trial racing rounds, map rotation and per-map leaderboards for a hosted game server",
    author="Tron Racing Contributors",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "tron-racing=tron_racing.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Games/Entertainment",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
