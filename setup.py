from setuptools import setup, find_packages
setup(
    name='adaquad',
    version='0.1',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests']),
    scripts=['src/run_integrals.py'],
    install_requires=[
        'numpy>=1.14.0',
        'matplotlib>=2.1.2',
    ],
    extras_require={
        'test': ['scipy>=1.0', 'pytest'],
    },
    python_requires='>=3.6',
)
