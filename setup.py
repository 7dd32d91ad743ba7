#! /usr/bin/env python
# -*- coding: utf-8 -*-

import os
from setuptools import find_packages, setup


def load_requirements(filename):
    basedir = os.path.dirname(os.path.abspath(__file__))
    with open(os.path.join(basedir, "requirements", filename), "r") as f:
        return [
            line.rstrip("\n")
            for line in f.readlines()
            if not line.startswith(("#", "-r")) and line.rstrip("\n")
        ]


def load_version():
    basedir = os.path.dirname(os.path.abspath(__file__))
    namespace = {}
    with open(os.path.join(basedir, "src", "controlled_proxy", "_version.py")) as f:
        exec(f.read(), namespace)
    return namespace["__version__"]


install_requires = load_requirements("base.in")
test_requires = load_requirements("test.in")


trove_classifiers = [
    "Development Status :: 4 - Beta",
    "License :: OSI Approved :: GNU General Public License (GPL)",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Natural Language :: English",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
    ]


setup(
    name="controlled-proxy",
    version=load_version(),
    description="Switch members of any object on and off at runtime",
    long_description=open("README.rst", "r").read(),
    author="the Controlled-Proxy developers",
    url="https://github.com/controlled-proxy/controlled-proxy/",
    license="GNU GPL",
    package_dir={"": "src"},
    packages=find_packages("src"),
    classifiers=trove_classifiers,
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={
        "test": test_requires,
    },
    include_package_data=True,
)
