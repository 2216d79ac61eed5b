# setup.py
from setuptools import setup, find_packages

setup(
    name="halftau",
    version="0.3.0",
    description="A minimal Lisp-family interpreter: lexer, parser and tree-walking evaluator",
    packages=find_packages(include=["halftau", "halftau.*"]),
    package_data={"halftau": ["prelude/*.lisp"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["halftau=halftau.__main__:main"],
    },
    zip_safe=False,
)
