"""This module contains validation of the benchmark configuration file"""

import hashlib

from streamkdf.custom_errors import *
from streamkdf.kdf import MAX_BLOCKS

# variable length digests cannot key an HMAC
UNSUPPORTED_HASHES = {'shake_128', 'shake_256'}


def get_parameter(data, config_option):
    """Returns the value of the given config_option, or raises an error if it does not exist in your config file."""
    try:
        return data[config_option]
    except KeyError:
        raise MissingParameterError(f"{config_option} does not exist in your config file.")


def check_positive_int(data, data_key):
    """Checks if the value at the given key in data is a positive integer"""
    value = get_parameter(data, data_key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidParameterError(f'{data_key} must be a positive integer. \n'
                                    f'The type given was {type(value)}')
    if value < 1:
        raise InvalidParameterError(f'{data_key} must be at least 1. \n'
                                    f'The value given was {value}')
    return value


def check_non_negative_int(data, data_key):
    """Checks if the value at the given key in data is an integer >= 0"""
    value = get_parameter(data, data_key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidParameterError(f'{data_key} must be an integer. \n'
                                    f'The type given was {type(value)}')
    if value < 0:
        raise InvalidParameterError(f'{data_key} must not be negative. \n'
                                    f'The value given was {value}')
    return value


def check_string(data, data_key):
    """Ensures the value at the given key in data is a string"""
    value = get_parameter(data, data_key)
    if not isinstance(value, str):
        raise InvalidParameterError(f'{data_key} must be a string. \n'
                                    f'The {data_key} type in the config file was: {type(value)}')
    return value


def check_hash_name(data, data_key='hash'):
    """Resolves the hash name at the given key to its hashlib constructor.
       Only fixed length algorithms guaranteed by hashlib are accepted"""
    name = check_string(data, data_key).lower()
    if name not in hashlib.algorithms_guaranteed or name in UNSUPPORTED_HASHES:
        supported = sorted(hashlib.algorithms_guaranteed - UNSUPPORTED_HASHES)
        raise InvalidParameterError(f'{data_key} must be one of {supported}. \n'
                                    f'The value given was {name}')
    return getattr(hashlib, name)


def check_output_length(output_length, hash_factory):
    """Checks that output_length can be produced by one expander of the given hash"""
    limit = MAX_BLOCKS * hash_factory().digest_size
    if output_length > limit:
        raise InvalidParameterError(f'output_length must be at most {limit} for this hash. \n'
                                    f'The value given was {output_length}')
    return output_length
