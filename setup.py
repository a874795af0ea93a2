from setuptools import setup
from codecs import open
from os import path
from onpage import __version__ as pkg_version, __author__ as pkg_author, __license__ as pkg_license

# Load the README file for use in the long description
local_dir = path.abspath(path.dirname(__file__))
with open(path.join(local_dir, "README.rst"), encoding="utf-8") as f:
  long_description = f.read()

requires = [
  "requests",
]

tests_requires = [
  "nose2",
  "nose2[coverage_plugin]",
]

extras_require = {
  "doc": ["sphinx", "sphinx_rtd_theme"],
  "test": tests_requires,
  "lint": ["pylint"],
}

setup(
  name="onpage",
  version=pkg_version,
  description="OnPage Python client: schema resources, fields and field path resolution",
  long_description=long_description,
  long_description_content_type="text/x-rst",
  author=pkg_author,
  license=pkg_license,
  classifiers=[
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Programming Language :: Python :: 3",
    "Topic :: Database :: Front-Ends",
    "Operating System :: OS Independent",
  ],
  keywords="onpage pim schema",
  packages=["onpage"],
  python_requires=">=3.7",
  install_requires=requires,
  extras_require=extras_require,
  tests_require=tests_requires,
  test_suite="nose2.collector.collector",
)
