"""
Base exception shared by every torrentmeta error.
"""


class TorrentMetaError(Exception):
    """Root of all errors raised by torrentmeta."""
    pass
