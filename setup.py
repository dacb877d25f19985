import os

from setuptools import setup, find_packages


def read(name):
    return open(os.path.join(os.path.dirname(__file__), name)).read()


setup(
    name='ndprep',
    description='N-dimensional arrays and tabular data preprocessing on top of NumPy and pandas.',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    version='0.1.0',
    license='BSD 3-Clause',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=['numpy', 'pandas', 'tabulate'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8'
)
