# setup.py
from setuptools import setup, find_packages

setup(
    name="skeme",
    version="0.1.0",
    packages=find_packages(include=["skeme", "skeme.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["skeme = skeme.interpreter:main"],
    },
    zip_safe=False,
)
