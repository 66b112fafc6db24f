# -*- coding: utf-8 -*-
from setuptools import setup
from setuptools import find_packages
import re

with open('README.md', encoding='utf-8') as file:
    long_description = file.read()
with open('proto/__init__.py', encoding='utf-8') as file:
    version = re.search(r'__version__ = "(.+)"', file.read()).group(1)

setup(
    name='Proto',
    version=version,
    description='Prototype-based objects: main routines, prototype chains, lazy activation and type tags.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='LGPL-3.0',

    packages=find_packages(exclude=['tests', 'examples']),
    install_requires=[],
    include_package_data=True,
    zip_safe=False,
    test_suite='tests',
    extras_require={
        'testing': ['pytest', 'pytest-xdist'],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Development Status :: 3 - Alpha',
        'Topic :: Software Development :: Libraries',
    ],
)
