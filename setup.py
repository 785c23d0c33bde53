# setup.py
from setuptools import setup, find_packages

setup(
    name="theta",
    version="0.1.0",
    description="Evaluation core of a small Scheme-style interpreter",
    packages=find_packages(include=["theta", "theta.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["theta=theta.interpreter:main"],
    },
    zip_safe=False,
)
