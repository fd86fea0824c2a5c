from setuptools import setup, find_packages

setup(
    name="learning-curves",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "scipy>=1.10.0",
        "matplotlib>=3.7.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "learning-curves=learning_curves.cli:main",
        ],
    },
    description="Crawford unit and Wright cumulative average learning curves: unit, block and aggregate estimates",
    python_requires=">=3.10",
)
