from itertools import chain
from setuptools import setup

extras = {
    'test': ['pytest>=3.10', 'numpy', 'flake8', 'coverage']
}
# 'all' includes all of the above
extras['all'] = list(chain(*extras.values()))

setup(name='pyset',
      version='2026.0.0',
      description='Generic mathematical sets with a hash-backed implementation.',
      author='Jørgen Dokken',
      author_email='dokken@simula.no',
      license='LGPL-3.0',
      packages=['pyset'],
      package_dir={'pyset': 'pyset'},
      install_requires=[],
      extras_require=extras
      )
