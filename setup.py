# setup.py
from setuptools import setup, find_packages

setup(
    name="minischeme",
    version="0.1.0",
    description="Stateless S-expression reader and evaluator for a minimal Scheme core",
    packages=find_packages(include=["minischeme", "minischeme.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minischeme = minischeme.repl:main"],
    },
    zip_safe=False,
)
