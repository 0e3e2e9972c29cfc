"""HMAC-based Extract-and-Expand Key Derivation Function (HKDF) as defined in RFC 5869.

HKDF turns limited input keying material into one or more cryptographically
strong secret keys. The hash is always supplied by the caller as a constructor
for fresh hash objects, e.g. hashlib.sha256.
"""

import hmac
import operator

from streamkdf.custom_errors import EntropyLimitExceeded, InvalidParameterError

MAX_BLOCKS = 255


def extract(hash_factory, secret, salt=None):
    """Generates a pseudorandom key for use with expand from an input secret and an optional salt.

    Only use this directly if the extracted key is reused with several expand calls and
    different info values. Most callers, including ones needing several keys, should use derive.
    """
    if salt is None:
        salt = bytes(hash_factory().digest_size)
    if secret is None:
        secret = b""
    extractor = hmac.new(bytes(salt), bytes(secret), hash_factory)
    return extractor.digest()


class Expander:
    """Reader of output keying material for one pseudorandom key and info value.

    Blocks are generated on demand: T(i) = HMAC(prk, T(i-1) | info | i) for i in 1..255.
    Reads mutate the expander, so one instance must not be shared between threads
    without a lock around it.
    """

    def __init__(self, hash_factory, prk, info=None):
        self.expander = hmac.new(bytes(prk), digestmod=hash_factory)
        self.size = self.expander.digest_size
        self.info = b"" if info is None else bytes(info)
        self.counter = 1
        # prev is T(counter - 1), buf is the unread tail of it
        self.prev = b""
        self.buf = b""

    @property
    def remaining(self):
        """Number of bytes that can still be read"""
        return len(self.buf) + (MAX_BLOCKS - self.counter + 1) * self.size

    def read(self, n):
        """Returns the next n bytes of output keying material.

        Raises EntropyLimitExceeded without consuming anything if fewer than n bytes remain.
        """
        if isinstance(n, bool):
            raise InvalidParameterError(f'read length must be an integer. \n'
                                        f'The type given was {type(n)}')
        try:
            n = operator.index(n)
        except TypeError:
            raise InvalidParameterError(f'read length must be an integer. \n'
                                        f'The type given was {type(n)}')
        if n < 0:
            raise InvalidParameterError(f'read length must not be negative. \n'
                                        f'The value given was {n}')
        remains = self.remaining
        if remains < n:
            raise EntropyLimitExceeded(f'hkdf: entropy limit reached, {n} bytes requested '
                                       f'but only {remains} remain')

        # leftovers from the previous block go first
        out = bytearray(self.buf[:n])
        self.buf = self.buf[len(out):]

        while len(out) < n:
            block = self.next_block()
            need = n - len(out)
            out += block[:need]
            self.buf = block[need:]
        return bytes(out)

    def readinto(self, buffer):
        """Fills a writable bytes-like buffer with output keying material. Returns the number of bytes written"""
        # release both views on every path
        with memoryview(buffer) as raw, raw.cast("B") as view:
            if view.readonly:
                raise InvalidParameterError("readinto needs a writable buffer")
            data = self.read(len(view))
            view[:] = data
        return len(data)

    def next_block(self):
        """Generates T(counter) and advances the counter"""
        block_hmac = self.expander.copy()
        block_hmac.update(self.prev)
        block_hmac.update(self.info)
        block_hmac.update(bytes([self.counter]))
        self.prev = block_hmac.digest()
        self.counter += 1
        return self.prev


def expand(hash_factory, prk, info=None):
    """Returns an Expander for the given pseudorandom key and optional context info, skipping extraction.

    prk should come from extract, or be a uniformly random or pseudorandom cryptographically
    strong key (RFC 5869, section 3.3). Most callers want derive instead.
    """
    return Expander(hash_factory, prk, info)


def derive(hash_factory, secret, salt=None, info=None):
    """Returns an Expander for the given secret, salt and context info. Salt and info may be None"""
    prk = extract(hash_factory, secret, salt)
    return expand(hash_factory, prk, info)
