"""
torrentmeta: Bencode codec and .torrent identity metadata (info hash, piece hashes).
"""
from .bencode import decode, decode_from, encode
from .errors import TorrentMetaError
from .torrent import TorrentMeta, derive_info_hash, split_piece_hashes

__version__ = "0.1.0"

__all__ = [
    'decode',
    'decode_from',
    'encode',
    'derive_info_hash',
    'split_piece_hashes',
    'TorrentMeta',
    'TorrentMetaError',
]
