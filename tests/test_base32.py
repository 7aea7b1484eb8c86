import os

import pytest

from twofa_helper import base32
from twofa_helper.errors import Base32Error, InvalidCharacter, InvalidPadding


def test_encode_known_values() -> None:
    assert base32.encode(b"f") == "my"
    assert base32.encode(b"fo") == "mzxq"
    assert base32.encode(b"foobar") == "mzxw6ytboi"
    assert base32.encode(b"\x00") == "aa"
    assert base32.encode(b"\xff" * 5) == "77777777"


def test_encode_has_no_padding_and_expected_length() -> None:
    for n in range(1, 30):
        text = base32.encode(b"\xa5" * n)
        assert "=" not in text
        assert len(text) == (n * 8 + 4) // 5


def test_round_trip_random_lengths() -> None:
    for n in range(1, 65):
        data = os.urandom(n)
        text = base32.encode(data)
        assert set(text) <= set(base32.ALPHABET)
        assert base32.decode(text) == data


def test_decode_known_secret() -> None:
    secret = base32.decode("s4gnvxgqote3kaktbayfxwiqubju45ob")
    assert len(secret) == 20
    assert base32.encode(secret) == "s4gnvxgqote3kaktbayfxwiqubju45ob"


def test_decode_rejects_character_outside_alphabet() -> None:
    with pytest.raises(InvalidCharacter) as excinfo:
        base32.decode("1")
    assert excinfo.value.character == "1"
    assert excinfo.value.position == 0
    assert str(excinfo.value) == 'Invalid character in Base32 string "1".'


@pytest.mark.parametrize("text", ["MY", "my==", "m y", "my8", "0a"])
def test_decode_is_strict(text) -> None:
    with pytest.raises(InvalidCharacter):
        base32.decode(text)


def test_decode_rejects_non_zero_leftover_bits() -> None:
    assert base32.decode("my") == b"f"
    with pytest.raises(InvalidPadding):
        base32.decode("mz")


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        base32.decode("mz")
    assert issubclass(InvalidCharacter, Base32Error)


def test_decode_empty_and_short_text() -> None:
    assert base32.decode("") == b""
    assert base32.decode("a") == b""


def test_random_secret() -> None:
    assert len(base32.random_secret()) == base32.DEFAULT_SECRET_LENGTH
    assert base32.random_secret(10) != base32.random_secret(10)
    with pytest.raises(ValueError):
        base32.random_secret(0)


def test_random_base32_decodes_to_twenty_bytes() -> None:
    text = base32.random_base32()
    assert len(text) == 32
    assert len(base32.decode(text)) == 20
