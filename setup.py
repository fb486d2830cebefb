from setuptools import setup, find_packages

setup(
    name="arburg",
    version="1.0.0",
    description="arburg: autoregressive model fitting and extrapolation with Burg's method",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=1.3.0",
        "pyarrow>=10.0.0",
        "pydantic>=2.0.0",
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "statsmodels>=0.13.0",
        ],
    },
)
