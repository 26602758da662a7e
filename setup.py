from setuptools import setup, find_packages


setup(
    name='cykit',
    license='Apache 2.0',
    description='CYK membership testing for context-free grammars in Chomsky Normal Form',
    version='0.0.dev1',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=['numpy',
                      'tabulate',
                      'ply'],
    extras_require={'test': ['pytest']},
)
