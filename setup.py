import os
import re

import setuptools


def read(fname):
   return open(os.path.join(os.path.dirname(__file__), fname)).read()


def version():
   return re.search(r'^__version__ = "([^"]+)"', read("factory_player/__init__.py"), re.M).group(1)


setuptools.setup(
   name='factory-player',
   version=version(),
   description='Factory Method demonstration: play a file with the player made for the host platform',
   long_description=read('README.md'),
   long_description_content_type="text/markdown",
   license="BSD2",
   keywords="factory method design pattern player",
   packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
   install_requires=[
      'krozark-current-platform',
   ],
   extras_require={
      'test': ['pytest'],
   },
   entry_points={
      'console_scripts': [
         'factory-player=factory_player.cli:main',
      ],
   },
   classifiers=[
      "Programming Language :: Python",
      "Programming Language :: Python :: 3",
      "Operating System :: POSIX :: Linux",
      "Operating System :: Microsoft :: Windows",
    ],
   python_requires='>=3.10',
)
