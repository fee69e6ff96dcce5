""" ecstealth build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecstealth

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecstealth.name,
    version=ecstealth.__version__,
    license=ecstealth.__license__,
    author=ecstealth.__author__,
    author_email=ecstealth.__author_email__,
    description="Dual-key elliptic curve stealth addresses",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["btclib>=2023.7.12,<2024", "pycryptodome>=3.19"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords=(
        "stealth-address elliptic-curves ecdh secp256k1 "
        "ethereum bitcoin privacy"
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
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
