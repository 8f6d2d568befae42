#!/usr/bin/env python3
from setuptools import setup, find_packages
import os
import re

here = os.path.abspath(os.path.dirname(__file__))


## Version and blurb #########################################################

def _read_defaults():
    with open(os.path.join(here, 'mailheaders', 'defaults.py')) as fd:
        source = fd.read()
    appver = re.search(r'^APPVER = "([^"]+)"', source, re.M).group(1)
    about = re.search(r'^ABOUT = """\\\n(.*?)"""', source, re.M | re.S)
    return appver, about.group(1)

APPVER, ABOUT = _read_defaults()


## "Main" ####################################################################

setup(
    name='mailheaders',
    version=APPVER,
    description='Tokenizer for comma separated e-mail header values',
    long_description=ABOUT,
    long_description_content_type='text/plain',
    license='AGPL-3.0-or-later',
    python_requires='>=3.6',
    packages=find_packages(),
    install_requires=[],
    extras_require={
        'test': ['pytest', 'pynose', 'mock'],
    },
)
