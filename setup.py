import re
from pathlib import Path

import toml
from setuptools import setup

version = re.search(r'^__version__ = "(.+)"$', Path("orderfilter/__init__.py").read_text(), re.MULTILINE).group(1)

setup_variables = toml.load("pyproject.toml")["project"]

setup(
    name=setup_variables["name"],
    version=version,
    classifiers=setup_variables["classifiers"],
    author=setup_variables["authors"][0]["name"],
    author_email=setup_variables["authors"][0]["email"],
    packages=["orderfilter", "orderfilter.api", "orderfilter.cli", "orderfilter.db", "orderfilter.db.sorting"],
    install_requires=setup_variables["dependencies"],
    description="Query string ordering for SQLAlchemy collection endpoints",
    long_description=Path(setup_variables["readme"]).read_text(),
)
