import json

import pytest

from torrentmeta.bencode import decode
from torrentmeta.errors import TorrentMetaError
from torrentmeta.render import RenderError, render_json, to_jsonable


def test_render_text_and_binary():
    obj = decode(b"d4:name5:hello4:rawx2:\xff\x00e")
    print("Rendered:", render_json(obj))
    assert to_jsonable(obj) == {"name": "hello", "rawx": "ff00"}


def test_binary_key_does_not_swallow_text_key():
    obj = decode(b"d2:ffi2e1:\xffi1ee")
    rendered = json.loads(render_json(obj))
    assert rendered == {"ff": 2, "hex:ff": 1}


def test_colliding_rendered_keys_raise():
    obj = decode(b"d6:hex:ffi2e1:\xffi1ee")
    with pytest.raises(RenderError):
        render_json(obj)
    with pytest.raises(TorrentMetaError):
        to_jsonable(obj)


def test_hex_keys_force_hex_values():
    obj = decode(b"d6:pieces4:abcd4:name4:abcde")
    assert to_jsonable(obj, hex_keys={b"pieces"}) == {"pieces": "61626364", "name": "abcd"}
