"""Setup script for Adaptor Mesh."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="adaptor-mesh",
    version="0.1.0",
    author="Adaptor Mesh Team",
    description="Keep cross-chain pool adaptors trusting each other across a mesh of networks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["adaptor_mesh", "adaptor_mesh.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: System :: Distributed Computing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "adaptor-mesh=adaptor_mesh.cli.main:main",
        ],
    },
)
