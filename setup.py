#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='litag',
    version='0.1.0',
    description='GraphQL API for agents, authors and books backed by SQLAlchemy',
    long_description=read("README.rst"),
    packages=['litag', 'litag.database', 'litag.graph'],
    keywords="graphql sqlalchemy flask books",
    install_requires=[
        "flask>=2.2",
        "graphlayer>=0.2.8",
        "graphql-core>=3.2,<3.3",
        "python-dotenv>=1.0",
        "sqlalchemy>=2.0",
    ],
    extras_require={
        "test": [
            "hypothesis>=6.0",
            "precisely>=0.1.9",
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "litag=litag.__main__:main",
        ],
    },
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
