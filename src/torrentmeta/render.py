"""
Human-readable rendering of Bencode trees.
"""
import json

from .bencode import BencodeDict, BencodeInt, BencodeList, BencodeString
from .errors import TorrentMetaError

HEX_KEY_PREFIX = "hex:"


class RenderError(TorrentMetaError):
    """Raised when two dictionary keys would render to the same JSON key."""
    pass


def bytes_to_text(b: bytes) -> str:
    """UTF-8 text when the bytes decode cleanly, lowercase hex otherwise."""
    try:
        return b.decode("utf-8")
    except UnicodeDecodeError:
        return b.hex()


def key_to_text(k: bytes) -> str:
    """Dictionary keys that are not UTF-8 render as hex behind a 'hex:' prefix."""
    try:
        return k.decode("utf-8")
    except UnicodeDecodeError:
        return HEX_KEY_PREFIX + k.hex()


def to_jsonable(node, hex_keys=()):
    """
    Converts a Bencode tree into JSON-serializable Python data.
    Byte strings stored under a key in ``hex_keys`` are always shown as hex
    (e.g. b"pieces", which can happen to be valid UTF-8).
    """
    if isinstance(node, BencodeString):
        return bytes_to_text(node.value)
    if isinstance(node, BencodeInt):
        return node.value
    if isinstance(node, BencodeList):
        return [to_jsonable(item, hex_keys) for item in node]
    if isinstance(node, BencodeDict):
        out = {}
        for k, v in node.items():
            name = key_to_text(k)
            if name in out:
                raise RenderError(f"Dictionary keys collide when rendered as {name!r}")
            if k in hex_keys and isinstance(v, BencodeString):
                out[name] = v.value.hex()
            else:
                out[name] = to_jsonable(v, hex_keys)
        return out
    raise TypeError(f"Not a Bencode value: {type(node)}")


def render_json(node, hex_keys=()) -> str:
    return json.dumps(to_jsonable(node, hex_keys), ensure_ascii=False)
