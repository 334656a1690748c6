from setuptools import setup, find_packages
import os
import io
from memotools.version import __version__

here = os.path.abspath(os.path.dirname(__file__))

# Get the long description from the README file
with io.open(os.path.join(here, "README.rst"), encoding="utf-8") as ff:
    long_description = ff.read()

setup(
    name="memotools",
    version=__version__,
    description="A generic function memoizer and the numeric tools that exercise it",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    python_requires=">=3.9",
    license="GPLv3+",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13"
    ],
    keywords="memoize cache fibonacci",
    packages=find_packages(),
    install_requires=[
        "configargparse>=1.5.3",
        "appdirs>=1.4.4",
        "psutil>=5.9.0",
        "rich>=12.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    scripts=[ff for ff in os.listdir(here) if ff.startswith("mt-")],
)
