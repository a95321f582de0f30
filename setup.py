""" lsaglib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import lsaglib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=lsaglib.name,
    version=lsaglib.__version__,
    license=lsaglib.__license__,
    author=lsaglib.__author__,
    author_email=lsaglib.__author_email__,
    description="A demonstration library for linkable ring signatures",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "dataclasses-json>=0.5.7",
        "pycryptodome>=3.15",
        "pydantic-settings>=2.0",
    ],
    extras_require={"test": ["pytest"]},
    keywords="ring-signature linkable-ring-signature lsag key-image rsa education",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
