# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
from binascii import b2a_hex, a2b_hex
from .constants import *
from .compat import keccak256
from .exceptions import MalformedInput

# show bytes as hex in a string
B2A = lambda x: b2a_hex(x).decode('ascii')

def left_pad(b, size):
    # zeros in front, like a big-endian number. Never truncates.
    return bytes(b).rjust(size, b'\x00')

def right_pad(b, size):
    # zeros after, like calldata that ran short
    return bytes(b).ljust(size, b'\x00')

def be_int(b):
    return int.from_bytes(b, 'big')

def u256(x):
    return x.to_bytes(WORD_SIZE, 'big')

def force_bytes(foo, field='data'):
    # accept bytes-like, or "0x" hex strings; reject anything else early
    if isinstance(foo, str):
        try:
            return a2b_hex(foo[2:] if foo[0:2] in ('0x', '0X') else foo)
        except ValueError as exc:
            raise MalformedInput(f'{field}: not hex', field=field) from exc

    if not isinstance(foo, (bytes, bytearray, memoryview)):
        raise MalformedInput(f'{field}: expected bytes, got {type(foo).__name__}', field=field)

    return bytes(foo)

def expect_length(foo, size, field):
    # bytes-like of exactly "size" bytes, or MalformedInput
    foo = force_bytes(foo, field)
    if len(foo) != size:
        raise MalformedInput(f'{field}: need {size} bytes, got {len(foo)}',
                                field=field, length=len(foo))
    return foo

def pubkey_to_address(pubkey):
    # 65-byte uncompressed pubkey => 20-byte address
    # - first byte is bitcoin heritage (0x04 marker), not hashed
    assert len(pubkey) == UNCOMPRESSED_PUBKEY_SIZE, 'expecting uncompressed pubkey'

    return keccak256(pubkey[1:])[-ADDRESS_SIZE:]

def render_address(addr):
    # EIP-55 mixed-case checksum form, with 0x prefix
    # - uppercase where the matching nibble of keccak(lowercase hex) is >= 8
    assert len(addr) == ADDRESS_SIZE

    low = B2A(addr)
    md = B2A(keccak256(low.encode('ascii')))

    return '0x' + ''.join(c.upper() if int(m, 16) >= 8 else c for c, m in zip(low, md))

# EOF
