import hashlib
import json

import pytest

from torrentmeta.bencode import encode
from torrentmeta.cli import main


def write_torrent(path, pieces):
    info = {"length": 40, "name": "hello.txt", "piece length": 20, "pieces": pieces}
    path.write_bytes(encode({"announce": "http://tracker.local/announce", "info": info}))
    return hashlib.sha1(encode(info)).hexdigest()


@pytest.mark.parametrize("value, expected", [
    ("4:spam", "spam"),
    ("i52e", 52),
    ("i-1e", -1),
    ("l4:spam4:eggse", ["spam", "eggs"]),
    ("d3:cow3:moo4:spam4:eggse", {"cow": "moo", "spam": "eggs"}),
])
def test_decode_command(capsys, value, expected):
    assert main(["decode", value]) == 0
    out = capsys.readouterr().out
    assert json.loads(out) == expected


def test_decode_command_error(capsys):
    assert main(["decode", "4:sp"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")


def test_decode_command_strict(capsys):
    assert main(["decode", "d1:bi1e1:ai2ee"]) == 0
    assert main(["--strict", "decode", "d1:bi1e1:ai2ee"]) == 1


def test_info_command(tmp_path, capsys):
    piece_a = hashlib.sha1(b"a").digest()
    piece_b = hashlib.sha1(b"b").digest()
    torrent = tmp_path / "hello.torrent"
    info_hash = write_torrent(torrent, piece_a + piece_b)

    assert main(["info", str(torrent)]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Tracker URL: http://tracker.local/announce"
    assert lines[1].startswith("Info: ")
    info = json.loads(lines[1][len("Info: "):])
    assert info["name"] == "hello.txt"
    assert info["pieces"] == (piece_a + piece_b).hex()
    assert lines[2] == f"Info Hash: {info_hash}"
    assert lines[3] == "Piece Length: 20"
    assert lines[4] == "Piece Hashes:"
    assert lines[5:] == [piece_a.hex(), piece_b.hex()]


def test_info_command_bad_pieces(tmp_path, capsys):
    torrent = tmp_path / "bad.torrent"
    write_torrent(torrent, b"\x00" * 39)

    assert main(["info", str(torrent)]) == 1
    assert "not a multiple of 20" in capsys.readouterr().err


def test_info_command_missing_file(tmp_path, capsys):
    assert main(["info", str(tmp_path / "nope.torrent")]) == 1
    assert "error:" in capsys.readouterr().err


def test_unknown_command():
    with pytest.raises(SystemExit) as exc_info:
        main(["peers"])
    assert exc_info.value.code == 2



def test_info_command_keeps_binary_keys(tmp_path, capsys):
    info = {b"ff": 2, b"\xff": 1, "piece length": 20, "pieces": b"\x01" * 20}
    torrent = tmp_path / "keys.torrent"
    torrent.write_bytes(encode({"announce": "http://tracker.local/announce", "info": info}))

    assert main(["info", str(torrent)]) == 0
    lines = capsys.readouterr().out.splitlines()
    rendered = json.loads(lines[1][len("Info: "):])
    assert rendered["ff"] == 2
    assert rendered["hex:ff"] == 1


def test_info_command_colliding_keys(tmp_path, capsys):
    info = {"hex:ff": 2, b"\xff": 1, "piece length": 20, "pieces": b"\x01" * 20}
    torrent = tmp_path / "collide.torrent"
    torrent.write_bytes(encode({"announce": "http://tracker.local/announce", "info": info}))

    assert main(["info", str(torrent)]) == 1
    assert "collide" in capsys.readouterr().err
