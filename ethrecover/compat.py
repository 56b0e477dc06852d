#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Wrappers for choice of crypto libraries. AKA API Cleanup
#
# My standards:
# - message digests are already digested (32 bytes), never hashed again
# - recoverable signature: 65 bytes, r(32) + s(32) + rec_id(1), rec_id at the END
# - pubkeys come back uncompressed: 65 bytes with 0x04 marker
# - recovery failure raises ValueError, nothing else
# - tragically? these all are libsecp256k1 underneath
#
# Set ETHRECOVER_BACKEND=coincurve|pysecp|wally to force a choice.
#
import os, logging
from Crypto.Hash import keccak

__all__ = [ 'keccak256', 'CT_sig_to_pubkey', 'BACKEND', 'BACKENDS' ]

logger = logging.getLogger(__name__)

def keccak256(msg):
    # single-shot Keccak-256, as used by Ethereum (not NIST SHA3-256)
    k = keccak.new(digest_bits=256)
    k.update(bytes(msg))
    return k.digest()

# Other codes must be implemented elsewhere...
#

def CT_sig_to_pubkey(msg_digest, sig):
    # returns a pubkey (65 bytes, uncompressed)
    assert len(sig) == 65
    raise NotImplementedError

# search order when not forced
BACKENDS = [ 'coincurve', 'pysecp', 'wally' ]

def _load(name):
    if name == 'coincurve':
        # Coincurve <https://ofek.dev/coincurve/api/>
        from ethrecover.wrap_coincurve import CT_sig_to_pubkey
    elif name == 'pysecp':
        from ethrecover.wrap_pysecp import CT_sig_to_pubkey
    elif name == 'wally':
        # Wally Core <https://wally.readthedocs.io/en/release_0.8.3/crypto/>
        from ethrecover.wrap_wally import CT_sig_to_pubkey
    else:
        raise RuntimeError(f"unknown crypto backend: {name} (want one of {BACKENDS})")

    return CT_sig_to_pubkey

BACKEND = os.environ.get('ETHRECOVER_BACKEND', None)

if BACKEND:
    # forced; let import problems surface as-is
    CT_sig_to_pubkey = _load(BACKEND)
else:
    for _name in BACKENDS:
        try:
            CT_sig_to_pubkey = _load(_name)
            BACKEND = _name
            break
        except (ImportError, OSError):
            # OSError: binding present but shared library missing
            continue
    else:
        raise RuntimeError("need a crypto library")

logger.debug("crypto backend: %s", BACKEND)

# EOF
