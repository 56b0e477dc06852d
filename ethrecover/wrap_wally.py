#
# Compatibility wrapper for "wallycore".
#
# see <https://wally.readthedocs.io/en/release_0.8.3/crypto/>
#
# - recoverable sigs want a header byte up front, BIP-137 style: 27 + rec_id (+4 compressed)
# - always hands back compressed pubkeys, so decompress after
#
from wallycore import ec_sig_to_public_key, ec_public_key_decompress

def CT_sig_to_pubkey(msg_digest, sig):
    assert len(msg_digest) == 32
    assert len(sig) == 65

    rec_id = sig[64]
    if rec_id not in (0, 1, 2, 3):
        raise ValueError(f'bad recovery id: {rec_id}')

    header = bytes([31 + rec_id])
    pub = ec_sig_to_public_key(bytes(msg_digest), header + bytes(sig[0:64]))

    return bytes(ec_public_key_decompress(pub))

# EOF
