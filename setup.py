import os
from setuptools import setup


def read(fname):
    try:
        with open(os.path.join(os.path.dirname(__file__), fname)) as f:
            return f.read()
    except OSError:
        return ""

setup(
    name="dmixem",
    version="0.1.0",

    description="Expectation-Maximization (EM) fitting of mixtures of discrete exponential family distributions",
    long_description=read("README.rst"),

    license="MIT",
    keywords="numeric em expectation maximization mixture poisson binomial geometric discrete statistics",

    packages=['dmixem', 'dmixem.distribution'],

    python_requires=">=3.8",

    install_requires=[
        "numpy>=1.17.0",
        "scipy>=1.4.0",
    ],

    extras_require={
        "test": ["pytest>=6.0"],
    },

    entry_points={
        "console_scripts": [
            "dmixem = dmixem.cli:main",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",

        "Intended Audience :: Science/Research",

        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
