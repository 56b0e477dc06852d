#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
import pytest
from coincurve import PrivateKey

from ethrecover.compat import keccak256
from ethrecover.constants import SECP256K1N

# (private key, address) pairs everyone knows
KNOWN_KEYS = [
    (1, '0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf'),
    (2, '0x2B5AD5c4795c026514f8317c7a215E218DcCD6cF'),
]

def make_sig(privkey, digest, high_s=False):
    # sign with coincurve, return (v, r, s) in Ethereum terms: v is 27/28
    # - libsecp256k1 always makes low-s; flip to the high-s twin if asked
    raw = PrivateKey(privkey).sign_recoverable(digest, hasher=None)
    assert len(raw) == 65

    r = int.from_bytes(raw[0:32], 'big')
    s = int.from_bytes(raw[32:64], 'big')
    rec_id = raw[64]
    assert rec_id in (0, 1)

    if high_s:
        s = SECP256K1N - s
        rec_id ^= 1

    return 27 + rec_id, r, s

def calldata(digest, v, r, s):
    # hash | v | r | s, each a 32-byte word
    return digest + v.to_bytes(32, 'big') + r.to_bytes(32, 'big') + s.to_bytes(32, 'big')

def vrs(v, r, s):
    return bytes([v]) + r.to_bytes(32, 'big') + s.to_bytes(32, 'big')

@pytest.fixture(params=KNOWN_KEYS, ids=['key1', 'key2'])
def known_key(request):
    num, addr = request.param
    return num.to_bytes(32, 'big'), addr

@pytest.fixture
def test_digest():
    return keccak256(b'test')

@pytest.fixture
def signed(known_key, test_digest):
    # valid calldata for the precompile, plus the answer we expect
    privkey, addr = known_key
    v, r, s = make_sig(privkey, test_digest)
    return calldata(test_digest, v, r, s), addr

# EOF
