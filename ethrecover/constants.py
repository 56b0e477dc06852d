#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# System constants.
#

# order of the secp256k1 group, "N"
SECP256K1N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# upper bound on "s" for homestead (low-s) transaction signatures
SECP256K1_HALF_N = SECP256K1N // 2

# legacy Ethereum offset applied to the recovery id: v = 27 + rec_id
V_OFFSET = 27

# precompile at address 0x01 costs a flat amount of gas
ECRECOVER_GAS = 3000

# input is (hash, v, r, s), each 32 bytes
ECRECOVER_INPUT_LENGTH = 128

HASH_SIZE = 32
WORD_SIZE = 32
ADDRESS_SIZE = 20

# compact signature is v(1) + r(32) + s(32)
COMPACT_SIG_SIZE = 65

# uncompressed SEC1 public key: 0x04 + X(32) + Y(32)
UNCOMPRESSED_PUBKEY_SIZE = 65

# byte offsets within the 128-byte precompile input
HASH_SLICE = slice(0, 32)
V_SLICE = slice(32, 64)
R_SLICE = slice(64, 96)
S_SLICE = slice(96, 128)

# EOF
