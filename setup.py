from setuptools import setup, find_packages

version_parts = (0, 3, 0, 'a', 4)
version = '.'.join(map(str, version_parts))

setup(
    name='amino-hamcrest',
    description='hamcrest matchers for amino data types and concurrent futures',
    version=version,
    author='Torsten Schmits',
    author_email='torstenschmits@gmail.com',
    license='MIT',
    packages=find_packages(exclude=['unit', 'unit.*']),
    install_requires=[
        'amino~=13.0.1a4',
        'PyHamcrest>=2.0.2',
    ],
    tests_require=[
        'kallikrein~=0.22.0a15',
    ],
    extras_require={
        'test': [
            'kallikrein~=0.22.0a15',
        ],
    },
)
