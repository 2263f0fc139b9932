# setup.py
from setuptools import setup, find_packages

setup(
    name="tramp",
    version="0.1.0",
    description="A small Scheme-like reader and evaluator with trampolined tail calls",
    packages=find_packages(include=["tramp", "tramp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tramp = tramp.__main__:main"],
    },
    zip_safe=False,
)
