from __future__ import annotations

import binascii

import pytest

from hs256jwt.utils import encoding


def test_b64encode_omits_padding_and_uses_url_alphabet():
    assert encoding.b64encode(b"\xfb\xff") == "-_8"
    assert encoding.b64decode("-_8") == b"\xfb\xff"


@pytest.mark.parametrize("segment", ["ab+c", "ab/c", "YQ==", "a b", "abcde", "YR"])
def test_b64decode_rejects_invalid_segments(segment):
    with pytest.raises(binascii.Error):
        encoding.b64decode(segment)


def test_verify_uses_same_key_material_for_str_and_bytes():
    signature = encoding.sign("k3y", "a.b")

    assert encoding.verify(signature, b"k3y", "a.b")
    assert not encoding.verify(signature, b"other", "a.b")
