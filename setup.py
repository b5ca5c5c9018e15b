# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('httprange', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst') as f:
    long_description = f.read()

setup(
    name='HTTPRange',
    version=metadata['version'],
    description='Parse, validate and render HTTP range headers',
    long_description=long_description,
    url=metadata['homepage'],
    license='MIT',

    python_requires='>=3.6',
    install_requires=[
        'lxml >= 3.6.0',
        'dominate >= 2.2.0',
    ],
    extras_require={
        'test': [
            'pytest >= 3.0',
        ],
    },

    packages=[
        'httprange',
        'httprange.inputs',
        'httprange.known',
        'httprange.reports',
        'httprange.util',
    ],
    package_data={
        'httprange': ['notices.xml'],
        'httprange.known': ['*.csv'],
        'httprange.reports': ['html.css'],
    },
    entry_points={
        'console_scripts': [
            'httprange=httprange.cli:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Internet :: WWW/HTTP',
    ],
    keywords='HTTP range requests Content-Range Accept-Ranges RFC 7233',
)
