"""
Data structures for representing Bencoded types.
"""
from types import MappingProxyType

from .errors import BencodeEncodeError

__all__ = [
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
    "to_python",
    "from_python",
]


class BencodeType:
    """Base class for all Bencode data types. Instances are immutable."""
    __slots__ = ("_value",)

    def __init__(self, value):
        object.__setattr__(self, "_value", value)

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._value == other._value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


class BencodeInt(BencodeType):
    """Represents a Bencoded integer."""
    __slots__ = ()

    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        super().__init__(value)

    def __hash__(self):
        return hash((BencodeInt, self._value))


class BencodeString(BencodeType):
    """Represents a Bencoded byte string."""
    __slots__ = ()

    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeString requires bytes.")
        super().__init__(bytes(value))

    def __len__(self):
        return len(self._value)

    def __hash__(self):
        return hash((BencodeString, self._value))


class BencodeList(BencodeType):
    """Represents a Bencoded list."""
    __slots__ = ()

    def __init__(self, value):
        if not isinstance(value, (list, tuple)):
            raise TypeError("BencodeList requires a list.")
        for item in value:
            if not isinstance(item, BencodeType):
                raise TypeError("BencodeList items must be Bencode values.")
        super().__init__(tuple(value))

    def __len__(self):
        return len(self._value)

    def __iter__(self):
        return iter(self._value)

    def __getitem__(self, index):
        return self._value[index]


class BencodeDict(BencodeType):
    """Represents a Bencoded dictionary."""
    __slots__ = ()

    def __init__(self, value: dict):
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        # keys must be bytes (bencode requirement)
        for k, v in value.items():
            if not isinstance(k, bytes):
                raise TypeError("BencodeDict keys must be bytes.")
            if not isinstance(v, BencodeType):
                raise TypeError("BencodeDict values must be Bencode values.")
        super().__init__(MappingProxyType(dict(value)))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return dict(self._value) == dict(other._value)

    __hash__ = None

    def __repr__(self):
        return f"BencodeDict({dict(self._value)!r})"

    def __len__(self):
        return len(self._value)

    def __iter__(self):
        return iter(self._value)

    def __contains__(self, key):
        return key in self._value

    def __getitem__(self, key):
        return self._value[key]

    def get(self, key, default=None):
        return self._value.get(key, default)

    def items(self):
        return self._value.items()


# ------------------------------------------------------------
#   Conversion helpers
# ------------------------------------------------------------

def to_python(node):
    """Unwraps a Bencode tree into plain bytes / int / list / dict."""
    if isinstance(node, (BencodeString, BencodeInt)):
        return node.value
    if isinstance(node, BencodeList):
        return [to_python(item) for item in node]
    if isinstance(node, BencodeDict):
        return {k: to_python(v) for k, v in node.items()}
    raise TypeError(f"Not a Bencode value: {type(node)}")


def from_python(obj):
    """Wraps plain Python data (str, bytes, int, list, dict) as a Bencode tree."""
    if isinstance(obj, BencodeType):
        return obj

    if isinstance(obj, bool):
        raise BencodeEncodeError("Cannot bencode a bool")

    if isinstance(obj, int):
        return BencodeInt(obj)

    if isinstance(obj, str):
        return BencodeString(obj.encode())

    if isinstance(obj, (bytes, bytearray)):
        return BencodeString(obj)

    if isinstance(obj, (list, tuple)):
        return BencodeList([from_python(x) for x in obj])

    if isinstance(obj, dict):
        items = {}
        for key, value in obj.items():
            key_bytes = key_to_bytes(key)
            if key_bytes in items:
                raise BencodeEncodeError(f"Duplicate dictionary key {key_bytes!r}")
            items[key_bytes] = from_python(value)
        return BencodeDict(items)

    raise BencodeEncodeError(f"Cannot bencode object of type {type(obj)}")


def key_to_bytes(key) -> bytes:
    if isinstance(key, str):
        return key.encode()
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    if isinstance(key, BencodeString):
        return key.value
    raise BencodeEncodeError(f"Dictionary keys must be strings, got {type(key)}")
