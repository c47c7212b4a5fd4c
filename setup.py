#!/usr/bin/env python
# encoding: utf-8

import os
import re

from setuptools import setup, find_packages


# Utility function to read the README file.
# Used for the long_description.  It's nice, because now 1) we have a top level
# README file and 2) it's easier to type in the README file than to put a raw
# string in below ...
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


def version():
    return re.search(r'^VERSION = "([^"]+)"',
                     read(os.path.join('orderedmap', '__init__.py')),
                     re.MULTILINE).group(1)


setup(
    name = "orderedmap",
    version = version(),
    author = "Alexander Mollberg",
    author_email = "amollberg@users.noreply.github.com",
    description = ("A map that keeps the order in which keys were first stored"),
    license = "Apache-2.0",
    keywords = "ordered map dictionary insertion order container",
    packages=find_packages(exclude=['tests', 'tests.*']),
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
        "License :: OSI Approved :: Apache Software License",
    ],
    install_requires=[],
    extras_require={
        'test': read("requirements-dev.txt").split(),
    },
)
