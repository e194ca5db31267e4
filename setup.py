"""Setup script for the Daisyworld package."""

from setuptools import setup, find_packages

setup(
    name="daisyworld",
    version="0.1.0",
    description="Daisyworld energy-balance simulation of albedo feedback",
    packages=find_packages(include=['src', 'src.*']),
    package_data={
        "": ["*.md", "*.txt"],
    },
    include_package_data=True,
    install_requires=[
        "numpy",
        "matplotlib",
        "xarray",
        "pandas",
        "pyyaml",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
    ],
    python_requires=">=3.8",
)
