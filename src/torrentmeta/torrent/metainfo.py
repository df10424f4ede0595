"""
Torrent metainfo: info hash and piece digests from a decoded .torrent root.
"""
import hashlib
import logging

from ..bencode import BencodeDict, BencodeInt, BencodeList, BencodeString, decode, encode
from ..errors import TorrentMetaError

logger = logging.getLogger(__name__)

PIECE_HASH_LEN = 20


class MetainfoError(TorrentMetaError):
    """Raised when a decoded torrent does not have the expected layout."""
    pass


class MissingField(MetainfoError):
    def __init__(self, field: str, expected: str):
        super().__init__(f"Torrent field {field!r} is missing or not {expected}")
        self.field = field


class InvalidPiecesLength(MetainfoError):
    def __init__(self, length: int):
        super().__init__(
            f"'pieces' is {length} bytes long, not a multiple of {PIECE_HASH_LEN}"
        )
        self.length = length


def derive_info_hash(info) -> bytes:
    """
    SHA-1 over the canonical bencoding of the 'info' dictionary.
    The source file's byte layout does not matter: key order and integer
    spelling are normalized by the encoder before hashing.
    """
    if not isinstance(info, BencodeDict):
        raise MissingField("info", "a dictionary")
    return hashlib.sha1(encode(info)).digest()


def split_piece_hashes(pieces) -> list:
    """Splits the concatenated 'pieces' field into 20-byte SHA-1 digests."""
    if isinstance(pieces, BencodeString):
        raw = pieces.value
    elif isinstance(pieces, (bytes, bytearray)):
        raw = bytes(pieces)
    else:
        raise TypeError(f"'pieces' must be bytes, got {type(pieces)}")
    if len(raw) % PIECE_HASH_LEN:
        raise InvalidPiecesLength(len(raw))
    return [raw[i:i+PIECE_HASH_LEN] for i in range(0, len(raw), PIECE_HASH_LEN)]


def _text(b: BencodeString) -> str:
    return b.value.decode("utf-8", errors="replace")


def _require(d: BencodeDict, key: bytes, kind, expected: str):
    node = d.get(key)
    if not isinstance(node, kind):
        raise MissingField(key.decode(), expected)
    return node


class TorrentMeta:
    """
    Read-only view of a decoded .torrent root dictionary.
    No I/O happens here; callers hand in the decoded root (or raw bytes).
    """
    def __init__(self, root: BencodeDict):
        if not isinstance(root, BencodeDict):
            raise MetainfoError("Invalid torrent: root must be a dictionary")

        self.data = root

        # ------------------ ANNOUNCE URL ------------------
        self.announce = _text(_require(root, b"announce", BencodeString, "a string"))

        # ------------------ INFO ------------------
        self.info = _require(root, b"info", BencodeDict, "a dictionary")
        self.info_hash = derive_info_hash(self.info)

        # ------------------ PIECE LENGTH ------------------
        self.piece_length = _require(self.info, b"piece length", BencodeInt, "an integer").value

        # ------------------ PIECES ------------------
        self.pieces = split_piece_hashes(_require(self.info, b"pieces", BencodeString, "a string"))

        # ------------------ ANNOUNCE-LIST ------------------
        self.announce_list = self._parse_announce_list(root.get(b"announce-list"))

        # ------------------ NAME ------------------
        name_b = self.info.get(b"name")
        self.name = _text(name_b) if isinstance(name_b, BencodeString) else None

        # ------------------ FILES ------------------
        self.files = self._parse_files()

        self.total_length = sum(f["length"] for f in self.files)
        self.is_multi = b"files" in self.info
        self.is_single = not self.is_multi
        self.num_pieces = len(self.pieces)
        if self.piece_length > 0 and self.total_length:
            self.last_piece_length = (self.total_length % self.piece_length) or self.piece_length
        else:
            self.last_piece_length = self.piece_length

        logger.debug("Parsed torrent %r: %d pieces, info_hash=%s",
                     self.name, self.num_pieces, self.info_hash_hex)

    @classmethod
    def from_bytes(cls, raw: bytes, strict: bool = False) -> "TorrentMeta":
        return cls(decode(raw, strict=strict))

    @property
    def info_hash_hex(self) -> str:
        return self.info_hash.hex()

    @property
    def piece_hashes_hex(self) -> list:
        return [p.hex() for p in self.pieces]

    @staticmethod
    def _parse_announce_list(ann_list_b):
        if ann_list_b is None:
            return None
        if not isinstance(ann_list_b, BencodeList):
            raise MetainfoError("'announce-list' must be a list")

        tiers = []
        for tier in ann_list_b:
            if not isinstance(tier, BencodeList):
                raise MetainfoError("'announce-list' tiers must be lists")
            urls = []
            for u in tier:
                if not isinstance(u, BencodeString):
                    raise MetainfoError("'announce-list' URLs must be strings")
                urls.append(_text(u))
            if urls:
                tiers.append(urls)
        return tiers or None

    def _parse_files(self):
        files_b = self.info.get(b"files")
        if files_b is None:
            if b"length" not in self.info:
                return []
            length_b = _require(self.info, b"length", BencodeInt, "an integer")
            return [{"length": length_b.value, "path": self.name}]

        if not isinstance(files_b, BencodeList):
            raise MetainfoError("'files' must be a list")

        files = []
        for entry in files_b:
            if not isinstance(entry, BencodeDict):
                raise MetainfoError("'files' entries must be dictionaries")
            length_b = _require(entry, b"length", BencodeInt, "an integer")
            path_b = _require(entry, b"path", BencodeList, "a list")
            parts = []
            for p in path_b:
                if not isinstance(p, BencodeString):
                    raise MetainfoError("file path components must be strings")
                parts.append(_text(p))
            files.append({"length": length_b.value, "path": "/".join(parts)})
        return files

    def __repr__(self):
        return (
            f"TorrentMeta(name={self.name!r}, files={len(self.files)}, pieces={self.num_pieces}, "
            f"multi={self.is_multi}, announce={self.announce!r})"
        )
