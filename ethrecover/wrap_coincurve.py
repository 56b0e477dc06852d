#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
#
# Compatibility wrapper for "coincurve".
#
# nice docs: <https://ofek.dev/coincurve/api/>
#
# - recoverable signatures are r(32) + s(32) + rec_id(1), same as libsecp256k1
# - hasher=None or it will sha256 our digest again
#
from coincurve import PublicKey

def CT_sig_to_pubkey(msg_digest, sig):
    # returns uncompressed pubkey (65 bytes), raises ValueError if not recoverable
    assert len(msg_digest) == 32
    assert len(sig) == 65

    pub = PublicKey.from_signature_and_message(bytes(sig), bytes(msg_digest), hasher=None)

    return pub.format(compressed=False)

# EOF
