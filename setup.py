import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))

try:
    # Get the long description from the README file
    with open(os.path.join(here, "readme.md"), encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    # This exception is a problem when launching tox
    # Could not find a better workaround
    # Forcing the inclusion of the readme in the archive seems overkill
    long_description = ""

setup(
    name="nnumber",
    version="1.0.0",
    license="MIT",
    description="Conversion between US N-Number registrations and ICAO addresses",
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": ["nnumber=nnumber.console:main"],
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={
        "nnumber": ["nnumber.conf", "py.typed"],
    },
    python_requires=">=3.10",
    install_requires=[
        "pandas>=1.0.0,<3",
        "appdirs",  # proper configuration directories
        "python-dotenv",
        "typing_extensions",
        "tqdm>=4.28",  # progressbars
        "rich",
        "click",
    ],
    extras_require={
        "dev": [
            "pytest",
            "mypy",
            "ruff",
            "pre-commit",
        ]
    },
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        "Development Status :: 4 - Beta",
        # Indicate who your project is intended for
        "Intended Audience :: Information Technology",
        "Intended Audience :: Science/Research",
        # Indicate relevant topics
        "Topic :: Scientific/Engineering :: Information Analysis",
        "Topic :: Software Development :: Libraries",
        # Pick your license as you wish (should match "license" above)
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Typing :: Typed",
    ],
)
