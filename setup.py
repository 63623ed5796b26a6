from setuptools import setup

with open('requirements.txt') as f:
    required = f.read().splitlines()

reqs = [ir for ir in required if ir.strip()]

setup(name='simple-hilbert',
      description="Hilbert space-filling curve on 2^n * 2^n structured grids: cell <-> distance conversion, grid orderings and locality tools.",
      install_requires=reqs,
      extras_require={'test': ['pytest']},
      test_suite='tests',
      version='1.0',
      packages=['hilbert_sfc'])
