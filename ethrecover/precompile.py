#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# precompile.py
#
# Emulate the EVM precompile at address 0x01 (ECRECOVER), byte for byte.
#
# Follows geth's core/vm/contracts.go: invalid signatures are not errors,
# they just produce empty output.
#
import logging
from .constants import *
from .layout import PrecompileInput
from .utils import left_pad, force_bytes
from . import compat

logger = logging.getLogger(__name__)


def validate_signature_values(v, r, s, homestead=False):
    '''
    Range check a signature, where "v" is the recovery id (0 or 1, not 27/28).

    With homestead=True, also require low-s (s <= N/2), as done for transaction
    signatures since Homestead. The precompile never does that.
    '''
    if r < 1 or s < 1:
        return False

    if homestead and s > SECP256K1_HALF_N:
        return False

    return r < SECP256K1N and s < SECP256K1N and v in (0, 1)


def required_gas(data=b''):
    # flat price, input is not looked at
    return ECRECOVER_GAS


def precompiled_ecrecover(data, sig_to_pubkey=None, keccak=None):
    '''
    Run ECRECOVER over raw calldata. Returns 32 bytes (left-padded address)
    or b'' when the signature is unusable.

    - sig_to_pubkey(msg_digest, r+s+rec_id) => 65-byte uncompressed pubkey,
      raising ValueError when it cannot recover
    - keccak(bytes) => 32 byte digest
    Both default to the library picked in compat.py.
    '''
    sig_to_pubkey = sig_to_pubkey or compat.CT_sig_to_pubkey
    keccak = keccak or compat.keccak256

    data = force_bytes(data, 'data')
    if len(data) < ECRECOVER_INPUT_LENGTH:
        logger.debug("ecrecover: short input (%d bytes), zero padded", len(data))

    args = PrecompileInput.decode(data)

    if not args.padding_ok:
        logger.debug("ecrecover: non-zero bytes ahead of v")
        return b''

    # tighter sig s values input homestead only apply to tx sigs
    if not validate_signature_values(args.rec_id, args.r, args.s):
        logger.debug("ecrecover: v/r/s out of range (v=%d)", args.v)
        return b''

    try:
        pubkey = sig_to_pubkey(args.msg_hash, args.recoverable_sig())
    except ValueError as exc:
        # not on curve, point at infinity, etc.
        logger.debug("ecrecover: recovery failed: %s", exc)
        return b''

    assert len(pubkey) == UNCOMPRESSED_PUBKEY_SIZE, 'expecting uncompressed pubkey'

    # the first byte of pubkey is bitcoin heritage
    return left_pad(keccak(pubkey[1:])[-ADDRESS_SIZE:], WORD_SIZE)

# EOF
