# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa",
    version="0.3.0",
    description="A small Clojure-flavoured Lisp interpreter",
    packages=find_packages(include=["kappa", "kappa.*"]),
    package_data={"kappa": ["prelude/*.clj"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["kappa = kappa.cli:main"],
    },
    zip_safe=False,
)
