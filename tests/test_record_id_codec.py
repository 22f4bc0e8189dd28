# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: test_record_id_codec.py
# -----------------------------------------------------------------------------
import re

import pytest

from demo.SampleData import README_KEY, sample_data
from memory.RecordIdCodec import decode_id, encode_id
from memory.exceptions import DecodingError

README_URL = "https://github.com/microsoft/semantic-kernel/blob/main/README.md"
KEY_CHARS = re.compile(r"^[A-Za-z0-9_\-=]*$")


def test_encode_readme_url_matches_documented_key():
    assert encode_id(README_URL) == README_KEY
    assert README_KEY == (
        "aHR0cHM6Ly9naXRodWIuY29tL21pY3Jvc29mdC9zZW1hbnRpYy1rZXJuZWwvYmxvYi9tYWluL1JFQURNRS5tZA=="
    )


def test_decode_readme_key():
    assert decode_id(README_KEY) == README_URL


def test_none_maps_to_empty_string():
    assert encode_id(None) == ""
    assert decode_id(None) == ""


def test_empty_string():
    assert encode_id("") == ""
    assert decode_id("") == ""


@pytest.mark.parametrize(
    "real_id",
    [
        "id_1",
        "a",
        "ab",
        "abc",
        "äöü ß – naïve café",
        "日本語のキー",
        "emoji 🚀 key",
        "query?x=1&y=2#frag",
        "~~~???>>>",
    ],
)
def test_round_trip(real_id):
    assert decode_id(encode_id(real_id)) == real_id


def test_encoded_keys_use_only_allowed_characters():
    for real_id in list(sample_data()) + ["~~~???>>>", "日本語"]:
        assert KEY_CHARS.match(encode_id(real_id)), real_id


def test_url_safe_alphabet_replaces_plus_and_slash():
    # b"~~~???>>>" encodes to "+/" characters in standard base64
    encoded = encode_id("~~~???>>>")
    assert "+" not in encoded and "/" not in encoded
    assert "-" in encoded or "_" in encoded


def test_padding_is_always_emitted():
    assert encode_id("a") == "YQ=="
    assert encode_id("ab") == "YWI="
    assert encode_id("abc") == "YWJj"


def test_encode_is_not_idempotent():
    once = encode_id("id_1")
    assert encode_id(once) != once


@pytest.mark.parametrize(
    "bad",
    [
        "YQ",            # missing padding
        "Y===",          # too much padding
        "YW+j",          # standard alphabet character
        "YW/j",
        "YWJj!",
        "YW Jj",
        "_w==",          # 0xFF is not valid UTF-8
    ],
)
def test_decode_rejects_malformed_input(bad):
    with pytest.raises(DecodingError):
        decode_id(bad)


def test_decoding_error_is_a_value_error():
    with pytest.raises(ValueError):
        decode_id("%%%%")
