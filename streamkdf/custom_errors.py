"""File for custom exception classes"""


class EntropyLimitExceeded(Exception):
    """A read would need more than 255 HMAC blocks from one expander"""
    pass


class MissingParameterError(Exception):
    """Exception for a missing config parameter"""
    pass


class InvalidParameterError(Exception):
    """Exception for a parameter that exists, but is not valid"""
    pass


class DerivationMismatchError(Exception):
    """Two HKDF implementations produced different output for the same inputs"""
    pass
