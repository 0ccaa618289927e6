from setuptools import find_namespace_packages, setup

setup(
    name='cssutil',
    version='0.1.0',
    description='Classification of code points, and escaping and serialization of text, per the CSS Syntax and CSSOM specifications',
    package_dir={ '': 'src' },
    packages=find_namespace_packages(where='src', include=[ 'cssutil*' ]), # `cssutil.syntax` has no `__init__.py`, making it a namespace package
    python_requires='>=3.10', # Structural pattern matching
    extras_require={ 'test': [ 'pytest', 'hypothesis' ] },
)
