"""
Packaging of the setcookie library. The library is pure Python: cookies are
encoded and decoded by plain modules, there are no extensions to compile.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup


def get_version() -> str:
    init_file = Path(__file__).parent / "setcookie" / "__init__.py"
    match = re.search(r'^__version__ = "([^"]+)"', init_file.read_text(), re.M)
    if match is None:
        raise RuntimeError("Cannot find the package version")
    return match.group(1)


setup(
    name="setcookie",
    version=get_version(),
    description=(
        "Encoding, parsing and sending of HTTP cookies with the Set-Cookie header"
    ),
    license="MIT",
    python_requires=">=3.9",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=["python-dateutil>=2.8"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Internet :: WWW/HTTP",
    ],
)
