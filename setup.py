from setuptools import setup, find_packages

__package_name__ = "rbnet"
__description__ = "This package builds random Boolean networks with a fixed in-degree K and simulates their synchronous dynamics."

__version__ = open("rbnet/_version.py", "rt").read().split('\'')[1]

setup(
      name = __package_name__,
      version = __version__,
      description = __description__,
      long_description = __description__,

      license = "MIT",

      packages = find_packages(exclude=["tests", "tests.*"]),

      python_requires = ">=3.10",

      classifiers = [
          "Programming Language :: Python :: 3",
      ],

      install_requires = [
          "numpy",
          "networkx",
          "pandas",
          "pyeda"
      ],

      extras_require = {
          "test": ["pytest"],
      },
)
