# setup.py
from setuptools import setup, find_packages

setup(
    name="flowlisp",
    version="0.1.0",
    description="Evaluator for flow, a small Lisp with currying and persistent scopes",
    packages=find_packages(include=["flowlisp", "flowlisp.*"]),
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["flowlisp=flowlisp.interpreter:main"],
    },
    zip_safe=False,
)
