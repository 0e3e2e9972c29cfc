import hashlib

import pytest


class TinyHash:
    """sha256 cut down to a 4 byte digest, so the 255 block limit is only 1020 bytes"""
    digest_size = 4
    block_size = 64
    name = 'tiny'

    def __init__(self, data=b""):
        self._hash = hashlib.sha256(data)

    def update(self, data):
        self._hash.update(data)

    def digest(self):
        return self._hash.digest()[:self.digest_size]

    def copy(self):
        other = TinyHash()
        other._hash = self._hash.copy()
        return other


@pytest.fixture
def tiny_hash():
    return TinyHash


@pytest.fixture(params=[hashlib.sha1, hashlib.sha256, hashlib.sha512], ids=['sha1', 'sha256', 'sha512'])
def hash_factory(request):
    return request.param
