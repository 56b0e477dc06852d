#
# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#

__version__ = '1.0.0'

__all__ = [ 'precompile', 'recover', 'layout', 'exceptions', 'constants', 'utils', 'compat' ]

# EVM-exact precompile: bytes in, 32 bytes or nothing out
from ethrecover.precompile import precompiled_ecrecover, validate_signature_values, required_gas

# hash + v|r|s in, address out
from ethrecover.recover import ecrecover, recover_address

from ethrecover.exceptions import EcRecoverError, MalformedInput, InvalidSignature
