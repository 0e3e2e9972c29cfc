import hashlib

import hkdf
import pytest

from streamkdf.custom_errors import EntropyLimitExceeded
from streamkdf.hkdf_interface import hkdf_derive, hkdf_expand, hkdf_extract


def test_extract_encodes_string_key_material():
    assert hkdf_extract(None, "derived") == hkdf_extract(None, b"derived")


def test_expand_encodes_string_info():
    prk = hkdf_extract(b"salt", b"secret")
    assert hkdf_expand(prk, "c hs traffic", 64) == hkdf_expand(prk, b"c hs traffic", 64)


def test_expand_default_length():
    assert len(hkdf_expand(hkdf_extract(None, b""), "derived")) == 32


def test_expand_past_limit_fails():
    with pytest.raises(EntropyLimitExceeded):
        hkdf_expand(hkdf_extract(None, b"secret"), b"", 255 * 32 + 1)


@pytest.mark.parametrize("salt", [None, b"", b"salt"])
@pytest.mark.parametrize("info", [b"", b"context"])
def test_matches_hkdf_package(hash_factory, salt, info):
    prk = hkdf_extract(salt, b"secret", hash=hash_factory)
    assert prk == hkdf.hkdf_extract(salt, b"secret", hash=hash_factory)
    for length in (0, 1, 31, 64, 200):
        expected = hkdf.hkdf_expand(prk, info, length, hash=hash_factory)
        assert hkdf_expand(prk, info, length, hash=hash_factory) == expected


def test_derive_matches_hkdf_class():
    expected = hkdf.Hkdf(b"salt", b"secret", hash=hashlib.sha256).expand(b"context", 80)
    assert hkdf_derive(b"secret", b"salt", b"context", 80) == expected


def test_matches_hkdf_package_with_injected_hash(tiny_hash):
    prk = hkdf_extract(b"salt", b"secret", hash=tiny_hash)
    expected = hkdf.hkdf_expand(prk, b"context", 1020, hash=tiny_hash)
    assert hkdf_expand(prk, b"context", 1020, hash=tiny_hash) == expected
