"""Setup configuration for the Field Operations Dashboard package."""

from setuptools import setup, find_namespace_packages

setup(
    name="fieldops-dashboard",
    version="1.0.0",
    description="Field operations list screens with a declarative filter and table view engine",
    author="Alex",
    author_email="",
    packages=find_namespace_packages(include=["config", "src.*", "app", "app.*"]),
    package_data={"config": ["*.yaml"]},
    python_requires=">=3.11",
    install_requires=[
        "duckdb>=1.0.0",
        "pandas>=2.1.0",
        "streamlit>=1.32.0",
        "plotly>=5.18.0",
        "openpyxl>=3.1.0",
        "python-dotenv>=1.0.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
)
