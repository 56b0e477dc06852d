#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# recover.py
#
# Friendlier front door: (hash, v|r|s) in, 20-byte address out.
#
# Handy for proving that signatures made elsewhere will pass Solidity's
# ecrecover() before you ship them on chain.
#
from .constants import *
from .exceptions import InvalidSignature
from .layout import CompactSig
from .precompile import precompiled_ecrecover
from .utils import render_address

def ecrecover(msg_hash, vrs, sig_to_pubkey=None, keccak=None):
    # Recover signer's address (20 bytes) from 32-byte hash and 65-byte v|r|s
    # - v must be 27 or 28 already; chain-id encoded values (EIP-155) are not undone
    # - raises MalformedInput on wrong sizes, InvalidSignature if precompile says no
    sig = CompactSig.decode(vrs)
    data = sig.as_precompile_input(msg_hash).encode()

    output = precompiled_ecrecover(data, sig_to_pubkey=sig_to_pubkey, keccak=keccak)
    if not output:
        raise InvalidSignature(f'no signer recovered (v={sig.v})')

    assert len(output) == WORD_SIZE

    # extract the address from the returned word
    return output[WORD_SIZE - ADDRESS_SIZE:]

def recover_address(msg_hash, vrs, **kws):
    # same, but rendered for humans: 0x + EIP-55 checksummed hex
    return render_address(ecrecover(msg_hash, vrs, **kws))

# EOF
