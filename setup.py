"""Setup script for dfr_xsec package."""

from setuptools import setup, find_packages

setup(
    name='dfr_xsec',
    version='1.0',
    packages=find_packages(include=['dfr_xsec', 'dfr_xsec.*']),
    package_data={
        'dfr_xsec': ['config/*.yaml'],
    },
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'scipy>=1.9.0',
        'pyyaml>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
