"""
Exceptions raised while decoding or encoding Bencode data.
"""
from ..errors import TorrentMetaError

__all__ = [
    "BencodeError",
    "BencodeDecodeError",
    "BencodeEncodeError",
    "MalformedLength",
    "TruncatedInput",
    "UnrecognizedTag",
    "InvalidInteger",
    "MalformedKey",
    "DuplicateKey",
    "UnsortedKeys",
    "TrailingData",
    "NestingTooDeep",
]


class BencodeError(TorrentMetaError):
    """Base class for Bencode errors."""
    pass


class BencodeDecodeError(BencodeError, ValueError):
    """Raised when input bytes are not valid Bencode."""
    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at index {position}")
        self.position = position


class BencodeEncodeError(BencodeError, TypeError):
    """Raised when an object cannot be bencoded."""
    pass


class MalformedLength(BencodeDecodeError):
    """Byte string length prefix is not `<digits>:`."""


class TruncatedInput(BencodeDecodeError):
    """Input ended before a value was complete."""


class UnrecognizedTag(BencodeDecodeError):
    """A value was expected but the byte does not start one."""


class InvalidInteger(BencodeDecodeError):
    """Integer body is empty, non-canonical or not a number."""


class MalformedKey(BencodeDecodeError):
    """Dictionary key is not a byte string."""


class DuplicateKey(MalformedKey):
    pass


class UnsortedKeys(MalformedKey):
    pass


class TrailingData(BencodeDecodeError):
    pass


class NestingTooDeep(BencodeDecodeError):
    pass
