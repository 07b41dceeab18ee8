# -*- coding: utf-8 -*-
"""
PopStack
-----------------------

Provides a last-in-first-out stack and a small driver that pushes 1, 2 and 3
onto it and pops them back, printing each popped value.
"""
import sys
from setuptools import setup

if sys.version_info < (3, 6):
    raise Exception("PopStack requires Python 3.6 or higher.")

tests_require = ["pytest>=2.6"]

setup(
    name="PopStack",
    version="0.1",
    packages=["popstack"],
    license="MIT",
    description='A LIFO stack and a driver that pops it empty.',
    long_description=__doc__,
    classifiers=[
        'Intended Audience :: Developers',
        'Environment :: Console',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    install_requires=[],
    tests_require=tests_require,
    extras_require={
        'tests': tests_require,
    },
    entry_points={'console_scripts': ['popstack=popstack.__main__:main']},
)
