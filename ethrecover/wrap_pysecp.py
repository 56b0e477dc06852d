#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
#
# Compatibility wrapper for "pysecp256k1".
#
# - needs libsecp256k1 installed, built with recovery module
# - library raises its own exception types, we promote to ValueError
#
from pysecp256k1 import ec_pubkey_serialize
from pysecp256k1.recovery import ecdsa_recover, ecdsa_recoverable_signature_parse_compact


def CT_sig_to_pubkey(msg_digest: bytes, sig: bytes) -> bytes:
    # returns uncompressed pubkey (65 bytes)
    assert len(msg_digest) == 32
    assert len(sig) == 65

    compact_sig, rec_id = bytes(sig[0:64]), sig[64]
    try:
        _rec_sig = ecdsa_recoverable_signature_parse_compact(compact_sig, rec_id)
        _pub = ecdsa_recover(_rec_sig, bytes(msg_digest))
    except Exception as exc:
        raise ValueError(f"recovery failed: {exc}") from exc

    return ec_pubkey_serialize(_pub, compressed=False)

# EOF
