from setuptools import setup, find_packages

setup(
    name="lotto-analyzer",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        "numpy",
        "pandas",
        "PyYAML",
        "marshmallow>=3.0.0"
    ],
    extras_require={
        "tests": ["pytest"]
    },
    python_requires=">=3.8",
)
