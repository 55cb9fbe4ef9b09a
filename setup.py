from setuptools import setup, find_packages

setup(
    name="inflation_return_engine",
    version="0.1.0",
    description="Fixed income portfolio returns across inflation scenarios",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "scipy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "inflation-returns=inflation_return_engine.cli:main",
        ],
    },
    python_requires=">=3.8",
)
