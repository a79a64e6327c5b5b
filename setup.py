import pathlib
import re
import sys

from setuptools import setup

if sys.version_info < (3, 9):
    raise RuntimeError("httpcookie requires Python 3.9+")


HERE = pathlib.Path(__file__).parent

txt = (HERE / "httpcookie" / "__init__.py").read_text("utf-8")
try:
    version = re.findall(r'^__version__ = "([^"]+)"\r?$', txt, re.M)[0]
except IndexError:
    raise RuntimeError("Unable to determine version.")


install_requires = [
    "attrs>=21.3.0",
    "multidict>=6.0",
]

tests_require = [
    "pytest",
]


setup(
    name="httpcookie",
    version=version,
    description="HTTP cookie parsing, formatting and an in-memory cookie jar",
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Operating System :: OS Independent",
        "Topic :: Internet :: WWW/HTTP",
    ],
    license="Apache 2",
    packages=["httpcookie"],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require={"test": tests_require},
    include_package_data=True,
)
