import argparse
import logging
import sys
from pathlib import Path

from .bencode import decode
from .errors import TorrentMetaError
from .render import render_json
from .torrent import TorrentMeta

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torrentmeta",
        description="Decode Bencode values and inspect .torrent files",
    )
    parser.add_argument('--strict', action='store_true',
                        help='reject duplicate or unsorted keys and trailing data')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='show logs (-vv for debug)')

    commands = parser.add_subparsers(dest='command', required=True)

    decode_cmd = commands.add_parser('decode', help='decode a bencoded value and print it as JSON')
    decode_cmd.add_argument('value', help='bencoded value, e.g. d3:cow3:mooe')

    info_cmd = commands.add_parser('info', help='print tracker, info hash and piece hashes')
    info_cmd.add_argument('torrent', type=Path, help='path to the .torrent file')

    return parser


def cmd_decode(args) -> None:
    value = decode(args.value.encode(), strict=args.strict)
    print(render_json(value))


def cmd_info(args) -> None:
    raw = args.torrent.read_bytes()
    logger.info("Read %d bytes from %s", len(raw), args.torrent)

    meta = TorrentMeta.from_bytes(raw, strict=args.strict)

    info_json = render_json(meta.info, hex_keys={b"pieces"})

    print(f"Tracker URL: {meta.announce}")
    print(f"Info: {info_json}")
    print(f"Info Hash: {meta.info_hash_hex}")
    print(f"Piece Length: {meta.piece_length}")
    print("Piece Hashes:")
    for piece_hash in meta.piece_hashes_hex:
        print(piece_hash)


COMMANDS = {
    'decode': cmd_decode,
    'info': cmd_info,
}


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG if args.verbose > 1 else logging.INFO)

    try:
        COMMANDS[args.command](args)
    except (TorrentMetaError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
