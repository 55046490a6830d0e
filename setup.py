from importlib.machinery import SourceFileLoader

import toml
from setuptools import setup

version = SourceFileLoader("__version__", "gridsort/__init__.py").load_module()

setup_variables = toml.load("pyproject.toml")["project"]

setup(
    name=setup_variables["name"],
    version=str(version.__version__),
    classifiers=setup_variables["classifiers"],
    author=setup_variables["authors"][0]["name"],
    author_email=setup_variables["authors"][0]["email"],
    packages=["gridsort", "gridsort.schemas", "gridsort.services", "gridsort.sorting", "gridsort.utils"],
    install_requires=setup_variables["dependencies"],
    description="Sort coordination for data grids",
    long_description=setup_variables["readme"],
)
