"""
Possible resources:
  - https://packaging.python.org/guides/distributing-packages-using-setuptools/
"""
from setuptools import setup, find_packages

import ecatconf


with open('README.rst') as file:
    longDescription = file.read()


setup(
    author='LinuxCNC-EtherCAT contributors',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Manufacturing',
        'License :: OSI Approved :: GNU General Public License v2 (GPLv2)',
        'Natural Language :: English',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Scientific/Engineering',
        'Topic :: System :: Hardware',
        'Topic :: Utilities',
    ],
    description='Generate LinuxCNC-EtherCAT XML configs from the devices on the EtherCAT bus.',
    install_requires=[
        'setuptools',
        'ruamel.yaml',
        'tomlkit >= 0.11.0',
        'configobj',
        'lxml',
    ],
    extras_require = {
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'ecatconf = ecatconf.__main__:main',
        ],
    },
    keywords='EtherCAT LinuxCNC CiA402 configuration',
    long_description=longDescription,
    name='ecatconf',
    packages=find_packages(exclude=['tests']),
    package_data={
        'ecatconf': ['drivers.yaml'],
    },
    include_package_data=True,
    python_requires='>=3.9',
    test_suite='tests',
    version=ecatconf.__version__,
    license='GPLv2',
    platforms=['Linux'],
)
