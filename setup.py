# -*- coding: utf-8 -*-
"""Setup for the kbandit library."""
import os

from kbandit import __version__

from setuptools import setup, find_packages


here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.md')) as readme_file:
    README = readme_file.read()


VERSION = __version__


CLASSIFIERS = """
        Development Status :: 4 - Beta
        Intended Audience :: Science/Research
        Intended Audience :: Developers
        Programming Language :: Python
        Programming Language :: Python :: 3
        Topic :: Scientific/Engineering
        Operating System :: Unix
        Operating System :: MacOS

        """


requires = [
    'numpy>=1.17',
    'colander',
    ]

tests_require = [
    'pytest',
    ]


setup(name='kbandit',
      version=VERSION,
      description='Monte-Carlo tournament of epsilon-greedy exploration rates on k-armed bandits',
      long_description=README,
      long_description_content_type='text/markdown',
      classifiers=[_f for _f in CLASSIFIERS.split('\n') if _f.strip()],
      keywords='multi-armed bandit epsilon greedy exploration monte carlo simulation',
      packages=find_packages(include=['kbandit', 'kbandit.*']),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.6',
      install_requires=requires,
      tests_require=tests_require,
      extras_require={
          'testing': tests_require,
          },
      )
