from glob import glob
from setuptools import setup


setup(
    name='devcalc',
    version='0.1.0',
    description='Programmer calculator with hex, octal and binary output',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['devcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
