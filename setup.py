""" toyecc build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import toyecc

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=toyecc.name,
    version=toyecc.__version__,
    license=toyecc.__license__,
    author=toyecc.__author__,
    author_email=toyecc.__author_email__,
    description="Toy elliptic curve arithmetic for Diffie-Hellman demonstrations",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["toyecc = toyecc.__main__:main"]},
    keywords=(
        "elliptic-curves finite-fields diffie-hellman discrete-logarithm "
        "baby-step-giant-step cryptography education"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
