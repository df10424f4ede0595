"""
Bencode decoder for BitTorrent metainfo files.

Every parsing method takes the cursor index and returns a
``(value, next_index)`` pair; the decoder itself holds only the input
buffer and its options, so each grammar rule can be called on its own.
"""
import logging

from .errors import (
    DuplicateKey,
    InvalidInteger,
    MalformedKey,
    MalformedLength,
    NestingTooDeep,
    TrailingData,
    TruncatedInput,
    UnrecognizedTag,
    UnsortedKeys,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString

logger = logging.getLogger(__name__)

MAX_DEPTH = 256

_DIGITS = b"0123456789"


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into Bencode value trees.

    In lenient mode (the default) duplicate dictionary keys keep the last
    value, unsorted keys are accepted and length prefixes may carry leading
    zeros. This is non-standard and only kept for reading sloppy torrent
    files. Strict mode rejects all of them. Integers are always held to
    their canonical form.
    """
    def __init__(self, data, strict: bool = False, max_depth: int = MAX_DEPTH):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeDecoder expects bytes-like input")
        self.data = bytes(data)
        self.strict = strict
        self.max_depth = max_depth

    def decode(self):
        """Decodes one complete value spanning the whole buffer."""
        value, end = self.decode_at(0)
        if end != len(self.data):
            extra = len(self.data) - end
            if self.strict:
                raise TrailingData(f"{extra} unexpected trailing bytes", end)
            logger.debug("Ignoring %d trailing bytes after index %d", extra, end)
        return value

    def decode_at(self, i: int):
        """Decodes the value starting at index ``i``."""
        if i < 0:
            raise ValueError("cursor must not be negative")
        return self._parse_value(i, 0)

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _peek(self, i: int) -> bytes:
        if i >= len(self.data):
            raise UnrecognizedTag("Unexpected end of input", i)
        return self.data[i:i+1]

    def _scan_digits(self, i: int) -> int:
        """Returns the index of the first non-digit byte at or after ``i``."""
        end = len(self.data)
        while i < end and self.data[i] in _DIGITS:
            i += 1
        return i

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self, i: int, depth: int):
        ch = self._peek(i)

        if ch == b'i':
            return self._parse_int(i)

        if ch.isdigit():  # Bencode strings start with length, which is a digit
            return self._parse_string(i)

        if ch == b'l':
            return self._parse_list(i, depth + 1)

        if ch == b'd':
            return self._parse_dict(i, depth + 1)

        raise UnrecognizedTag(f"Invalid token {ch!r}", i)

    def _parse_int(self, i: int):
        """Parses ``i<digits>e``."""
        start = i
        i += 1  # skip 'i'

        negative = self.data[i:i+1] == b'-'
        if negative:
            i += 1

        digits_start = i
        i = self._scan_digits(i)
        digits = self.data[digits_start:i]

        if i >= len(self.data):
            raise TruncatedInput("Unterminated integer", start)
        if not digits:
            raise InvalidInteger("Integer has no digits", start)
        if self.data[i:i+1] != b'e':
            raise InvalidInteger(f"Unexpected byte {self.data[i:i+1]!r} in integer", i)
        if len(digits) > 1 and digits[:1] == b'0':
            raise InvalidInteger("Integer has a leading zero", start)
        if negative and digits == b'0':
            raise InvalidInteger("Negative zero is not allowed", start)

        try:
            num = int(digits)
        except ValueError as exc:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            raise InvalidInteger("Integer is too large", start) from exc

        return BencodeInt(-num if negative else num), i + 1  # skip 'e'

    def _parse_string(self, i: int):
        """Parses ``<length>:<bytes>``."""
        start = i
        colon = self._scan_digits(i)
        length_bytes = self.data[start:colon]

        if colon >= len(self.data):
            raise MalformedLength("String length is missing its colon", start)
        if self.data[colon:colon+1] != b':':
            raise MalformedLength(
                f"Unexpected byte {self.data[colon:colon+1]!r} in string length", colon
            )
        if self.strict and len(length_bytes) > 1 and length_bytes[:1] == b'0':
            raise MalformedLength("String length has a leading zero", start)

        try:
            length = int(length_bytes)
        except ValueError as exc:
            raise MalformedLength("String length is too large", start) from exc

        begin = colon + 1
        end = begin + length
        if end > len(self.data):
            raise TruncatedInput(
                f"String needs {length} bytes, only {len(self.data) - begin} left", start
            )

        return BencodeString(self.data[begin:end]), end

    def _parse_list(self, i: int, depth: int):
        """Parses ``l<values>e``."""
        self._check_depth(i, depth)
        i += 1  # skip 'l'
        items = []

        while self._peek(i) != b'e':
            item, i = self._parse_value(i, depth)
            items.append(item)

        return BencodeList(items), i + 1  # skip 'e'

    def _parse_dict(self, i: int, depth: int):
        """Parses ``d<key><value>...e``."""
        self._check_depth(i, depth)
        i += 1  # skip 'd'
        obj = {}
        previous = None

        while self._peek(i) != b'e':
            # keys MUST be strings
            if not self._peek(i).isdigit():
                raise MalformedKey("Dictionary key must be a byte string", i)
            key_pos = i
            key, i = self._parse_string(i)
            key = key.value

            if key in obj:
                if self.strict:
                    raise DuplicateKey(f"Duplicate dictionary key {key!r}", key_pos)
                logger.warning("Duplicate dictionary key %r at index %d, keeping last value", key, key_pos)
            elif previous is not None and key < previous:
                if self.strict:
                    raise UnsortedKeys(f"Dictionary key {key!r} is out of order", key_pos)
                logger.debug("Unsorted dictionary key %r at index %d", key, key_pos)
            previous = key

            value, i = self._parse_value(i, depth)
            obj[key] = value

        return BencodeDict(obj), i + 1  # skip 'e'

    def _check_depth(self, i: int, depth: int):
        if depth > self.max_depth:
            raise NestingTooDeep(f"Nesting deeper than {self.max_depth} levels", i)


def decode(data, strict: bool = False):
    """
    Convenience function to decode Bencoded data.
    """
    return BencodeDecoder(data, strict=strict).decode()


def decode_from(data, cursor: int = 0, strict: bool = False):
    """
    Decodes one value starting at ``cursor``.
    Returns ``(value, new_cursor)``; bytes after the value are left alone.
    """
    return BencodeDecoder(data, strict=strict).decode_at(cursor)
