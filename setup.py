from setuptools import setup, find_packages

setup(
    name="dist_lib",
    version="0.1.0",
    description="Composable probability distributions on a shared uniform source",
    packages=find_packages(exclude=["dist_lib.tests"]),
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": [
            "scipy>=1.10.0",
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
