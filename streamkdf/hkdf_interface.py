import hashlib

from streamkdf import kdf


def hkdf_extract(salt, input_key_material, hash=hashlib.sha256):
    if isinstance(input_key_material, str):
        input_key_material = bytes(input_key_material, 'utf-8')
    return kdf.extract(hash, input_key_material, salt)


def hkdf_expand(pseudo_random_key, info=b"", length=32, hash=hashlib.sha256):
    if isinstance(info, str):
        info = bytes(info, 'utf-8')
    return kdf.expand(hash, pseudo_random_key, info).read(length)


def hkdf_derive(input_key_material, salt=None, info=b"", length=32, hash=hashlib.sha256):
    """Extract then expand in one call, returning length bytes of output keying material"""
    prk = hkdf_extract(salt, input_key_material, hash)
    return hkdf_expand(prk, info, length, hash)
