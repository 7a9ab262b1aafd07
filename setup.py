"""
Setup.py script for limbint
"""
from setuptools import setup, find_packages
import os

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='limbint',
    version='0.2.1',
    description='Arbitrary-precision two\'s-complement integers',
    long_description=long_description,

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='bigint arbitrary-precision integer',

    packages=find_packages(include=['limbint', 'limbint.*']),
    python_requires='>=3.7',

    install_requires=['py'],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    entry_points={
        "console_scripts": [
            "limbint = limbint.__main__:main",
        ],
    },
)
