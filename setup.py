#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
#
# Ethereum ECRECOVER precompile, emulated in python
#
# To use this command to install and yet be able to edit the code (here). Great for dev:
#
#   pip install --editable .
#
# with test dependencies
#
#   pip install --editable '.[test]'
#
# cross-checking other crypto libraries (set ETHRECOVER_BACKEND to pick one)
#
#   pip install --editable '.[test_plus]'
#
#
import re
from setuptools import setup

# can't import the package here: it wants a crypto library at import time
with open("ethrecover/__init__.py", "r") as fh:
    __version__ = re.search(r"^__version__ = '([^']+)'", fh.read(), re.M).group(1)

# these minimum versions are tested, some earlier values would probably work too.
requirements = [
    'coincurve>=15.0.1',
    'pycryptodome>=3.10.1',
]

test_requirements = [
    'pytest',
]

# only for developers playing with crypto libraries - cross library comparisons
test_plus_requirements = [
    'wallycore>=0.8.2',
    # needs libsecp256k1 installed, with recovery module
    'python-secp256k1',
] + test_requirements

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name='ethrecover',
    version=__version__,
    packages=[ 'ethrecover' ],
    python_requires='>3.6.0',
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
        'test_plus': test_plus_requirements,
    },
    description="Ethereum ecrecover precompile (address 0x01), byte-exact, in Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        'Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: MacOS :: MacOS X',
    ],
)
