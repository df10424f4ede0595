"""
Bencode package for encoding and decoding BitTorrent data.
"""
from .decoder import BencodeDecoder, decode, decode_from
from .encoder import encode
from .errors import *
from .structure import (BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType,
                        from_python, to_python)

__all__ = [
    'decode', 'decode_from', 'encode', 'BencodeDecoder',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'to_python', 'from_python',
    'BencodeError', 'BencodeDecodeError', 'BencodeEncodeError',
    'MalformedLength', 'TruncatedInput', 'UnrecognizedTag', 'InvalidInteger',
    'MalformedKey', 'DuplicateKey', 'UnsortedKeys', 'TrailingData', 'NestingTooDeep',
]
