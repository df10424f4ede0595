"""
Torrent metainfo package: info hash and piece digests from decoded .torrent data.
"""
from .metainfo import (InvalidPiecesLength, MetainfoError, MissingField, TorrentMeta,
                       derive_info_hash, split_piece_hashes)

__all__ = [
    'TorrentMeta',
    'derive_info_hash',
    'split_piece_hashes',
    'MetainfoError',
    'MissingField',
    'InvalidPiecesLength',
]
