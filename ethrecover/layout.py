#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# layout.py
#
# Fixed byte layouts: the 128-byte precompile input and the 65-byte compact signature.
#
#   precompile input:  hash(32) | zeros(31) v(1) | r(32) | s(32)
#   compact signature: v(1) | r(32) | s(32)
#   for libsecp256k1:  r(32) | s(32) | rec_id(1)
#
from collections import namedtuple
from .constants import *
from .utils import right_pad, be_int, u256, expect_length


class PrecompileInput(namedtuple('PrecompileInput', 'msg_hash v r s')):
    # v, r and s are full 256-bit words as read off the wire

    __slots__ = ()

    @classmethod
    def decode(cls, data):
        # short calldata reads as zeros; anything past 128 bytes is ignored
        data = right_pad(data, ECRECOVER_INPUT_LENGTH)[0:ECRECOVER_INPUT_LENGTH]

        return cls(msg_hash=data[HASH_SLICE],
                    v=be_int(data[V_SLICE]),
                    r=be_int(data[R_SLICE]),
                    s=be_int(data[S_SLICE]))

    def encode(self):
        assert len(self.msg_hash) == HASH_SIZE
        return bytes(self.msg_hash) + u256(self.v) + u256(self.r) + u256(self.s)

    @property
    def padding_ok(self):
        # only the low byte of the v word may be non-zero
        return self.v < 0x100

    @property
    def rec_id(self):
        # byte arithmetic, so v=0 wraps to 229 rather than going negative
        return ((self.v & 0xff) - V_OFFSET) & 0xff

    def recoverable_sig(self):
        # what libsecp256k1 wants: rec_id goes at the end
        return u256(self.r) + u256(self.s) + bytes([self.rec_id])


class CompactSig(namedtuple('CompactSig', 'v r s')):
    __slots__ = ()

    @classmethod
    def decode(cls, vrs):
        vrs = expect_length(vrs, COMPACT_SIG_SIZE, 'vrs')

        return cls(v=vrs[0], r=be_int(vrs[1:33]), s=be_int(vrs[33:65]))

    def encode(self):
        return bytes([self.v]) + u256(self.r) + u256(self.s)

    def as_precompile_input(self, msg_hash):
        # v lands in the low byte of its word, so padding is clean by construction
        msg_hash = expect_length(msg_hash, HASH_SIZE, 'msg_hash')
        return PrecompileInput(msg_hash, self.v, self.r, self.s)

# EOF
