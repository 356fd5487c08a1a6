from setuptools import setup, find_packages
from pathlib import Path

readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")
else:
    long_description = "Composable runtime validation for untyped data: schemas, sanitized values and path-located error messages."

setup(
    name="not-me",
    version="0.1.0",
    description="Composable runtime validation for untyped data",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=6.0",
        "pydantic>=2.0.0",  # Declarative schema definitions
        "typer>=0.9.0",  # CLI
    ],
    entry_points={
        "console_scripts": [
            "not-me=not_me.cli:main",
        ],
    },
    extras_require={
        "dev": [
            "pytest",
            "coverage",
            "hypothesis",
            "parameterized==0.9.0",
        ],
    },
)
