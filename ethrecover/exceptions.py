#
# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Exceptions
#

class EcRecoverError(ValueError):
    pass

class MalformedInput(EcRecoverError):
    # caller gave us something of the wrong shape; nothing was processed
    def __init__(self, msg, field=None, length=None):
        self.field = field
        self.length = length
        super().__init__(msg)

class InvalidSignature(EcRecoverError):
    # precompile produced no output: bad v/r/s, dirty padding, or unrecoverable point
    pass

# EOF
