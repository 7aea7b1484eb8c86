import secrets

from .errors import InvalidCharacter, InvalidPadding

# Lowercase alphabet, no "=" padding. Not interchangeable with base64.b32encode.
ALPHABET = "abcdefghijklmnopqrstuvwxyz234567"

DEFAULT_SECRET_LENGTH = 20

_INDEX = {c: i for i, c in enumerate(ALPHABET)}


def encode(data: bytes) -> str:
    """
    Encodes bytes as base32 text, 5 bits per character, most significant bit first.

    A trailing group shorter than 5 bits is padded with zero bits on the low end.
    No padding characters are appended, so the output length is
    ``ceil(len(data) * 8 / 5)``.

    :param data: the bytes to encode
    :returns: base32 text
    """
    output = []
    buffer = 0
    bits = 0
    for byte in bytearray(data):
        buffer = ((buffer << 8) | byte) & 0xFFF
        bits += 8
        while bits >= 5:
            bits -= 5
            output.append(ALPHABET[(buffer >> bits) & 0x1F])
    if bits > 0:
        output.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])
    return "".join(output)


def decode(text: str) -> bytes:
    """
    Decodes base32 text produced by :func:`encode`.

    :param text: base32 text in the lowercase ``a-z2-7`` alphabet
    :returns: the decoded bytes, ``floor(len(text) * 5 / 8)`` of them
    :raises InvalidCharacter: a character is outside the alphabet
    :raises InvalidPadding: the leftover bits at the end are not all zero
    """
    output = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(text):
        index = _INDEX.get(char)
        if index is None:
            raise InvalidCharacter(char, position)
        buffer = ((buffer << 5) | index) & 0x1FFF
        bits += 5
        if bits >= 8:
            bits -= 8
            output.append((buffer >> bits) & 0xFF)
    if buffer & ((1 << bits) - 1):
        raise InvalidPadding()
    return bytes(output)


def random_secret(length: int = DEFAULT_SECRET_LENGTH) -> bytes:
    """
    Returns ``length`` bytes from the operating system's CSPRNG.
    """
    if length < 1:
        raise ValueError("length must be a positive integer")
    return secrets.token_bytes(length)


def random_base32(length: int = DEFAULT_SECRET_LENGTH) -> str:
    return encode(random_secret(length))
