#!/usr/bin/env python

import os
import re

from setuptools import setup

here = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(here, 'minipercolation', '__init__.py')) as f:
    version = re.search(r"__version__ = '([^']+)'", f.read()).group(1)

setup(
    name='minipercolation',
    version=version,
    description="3D site percolation on a cubic lattice, MiniPNM style",
    author='Roderic Day',
    author_email='roderic.day@gmail.com',
    url='www.pmeal.com',
    license='MIT',
    packages=['minipercolation'],
    install_requires=[
        'numpy>=1.17',
        'scipy',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'minipercolation = minipercolation.__main__:main',
        ],
    },
    python_requires='>=3.7',
)
