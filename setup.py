# setup.py
from setuptools import setup, find_packages

setup(
    name="objviewer",
    version="1.0.0",
    description="Wavefront OBJ flattener and 4x4 matrix kernel for real-time viewers",
    packages=find_packages(include=["objviewer", "objviewer.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
