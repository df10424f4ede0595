"""
Bencode encoder for BitTorrent metainfo files.

Output is always canonical: dictionary keys sorted by raw bytes and
integers in minimal decimal form, so equal trees encode to equal bytes.
"""
from .errors import BencodeEncodeError
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, key_to_bytes


def encode(obj) -> bytes:
    """Encodes a Python object or BencodeType into bencoded bytes."""

    if isinstance(obj, bool):
        raise BencodeEncodeError("Cannot bencode a bool")

    if isinstance(obj, (int, BencodeInt)):
        value = obj if isinstance(obj, int) else obj.value
        return encode_int(value)

    if isinstance(obj, str):
        return encode_str(obj)

    if isinstance(obj, (bytes, bytearray, BencodeString)):
        value = obj.value if isinstance(obj, BencodeString) else bytes(obj)
        return encode_bytes(value)

    if isinstance(obj, (list, tuple, BencodeList)):
        value = obj.value if isinstance(obj, BencodeList) else obj
        return encode_list(value)

    if isinstance(obj, (dict, BencodeDict)):
        value = obj.value if isinstance(obj, BencodeDict) else obj
        return encode_dict(value)

    raise BencodeEncodeError(f"Cannot bencode object of type {type(obj)}")


# ------------------------------------------------------------
#   Encoding primitives
# ------------------------------------------------------------

def encode_int(n: int) -> bytes:
    """Encodes an integer to bencoded bytes (e.g., i123e)."""
    try:
        digits = str(n)
    except ValueError as exc:
        # str() refuses ints past sys.get_int_max_str_digits()
        raise BencodeEncodeError("Integer is too large to encode") from exc
    return b"i" + digits.encode() + b"e"


def encode_bytes(b: bytes) -> bytes:
    """Encodes bytes to bencoded bytes (e.g., 4:spam)."""
    return str(len(b)).encode() + b":" + b


def encode_str(s: str) -> bytes:
    """Encodes a string to bencoded bytes (e.g., 4:spam)."""
    return encode_bytes(s.encode())


def encode_list(lst) -> bytes:
    """Encodes a list to bencoded bytes (e.g., l4:spame)."""
    encoded_items = b"".join(encode(x) for x in lst)
    return b"l" + encoded_items + b"e"


def encode_dict(d) -> bytes:
    """Encodes a dictionary to bencoded bytes (e.g., d3:cow3:moo4:spam4:eggse)."""
    pairs = {}
    for key, value in d.items():
        key_bytes = key_to_bytes(key)
        if key_bytes in pairs:
            raise BencodeEncodeError(f"Duplicate dictionary key {key_bytes!r}")
        pairs[key_bytes] = value

    parts = [b"d"]
    for key_bytes in sorted(pairs):
        parts.append(encode_bytes(key_bytes))
        parts.append(encode(pairs[key_bytes]))
    parts.append(b"e")

    return b"".join(parts)

