from setuptools import setup, find_packages

setup(
    name="icosphere_painter",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "torch>=2.0.0",
        "numpy>=1.20.0",
        "matplotlib>=3.7.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
)
