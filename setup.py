# setup.py
from setuptools import setup, find_packages

setup(
    name="raml-validate",             # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # will find raml_validate/
    install_requires=["pandas"],      # Timestamp / NaT handling in the date type
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
    description="Compile declarative parameter schemas into reusable validators",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
