import string
import unicodedata
from hmac import compare_digest
from typing import Optional

from . import base32

# RFC 3986 unreserved characters; everything else is percent-encoded.
UNRESERVED = frozenset(string.ascii_letters + string.digits + "-_.~")


def escape(text: str) -> str:
    """
    Percent-encodes every character outside the unreserved set.

    The escape is taken from the character's code point, not from its UTF-8
    bytes as :func:`urllib.parse.quote` would do: ``"é"`` becomes ``%E9``
    rather than ``%C3%A9``. Code points above ``0xFF`` use as many hex digits
    as they need (``"😀"`` becomes ``%1F600``).
    """
    return "".join(c if c in UNRESERVED else "%{:02X}".format(ord(c)) for c in text)


def build_uri(label: str, secret: bytes, issuer: Optional[str] = None) -> str:
    # -> "otpauth://totp/CoolCat%40example.com?secret=s4gnvxgq...&issuer=Example"
    """
    Returns the provisioning URI for a TOTP secret.

    This can then be encoded in a QR Code and used to provision the Google
    Authenticator app.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param label: name of the account
    :param secret: the raw secret bytes, written as unpadded lowercase base32
    :param issuer: the name of the OTP issuer; this will be the
        organization title of the OTP entry in Authenticator.
        ``None`` and ``""`` both leave the parameter out.
    :returns: provisioning uri
    """
    uri = "otpauth://totp/{0}?secret={1}".format(escape(label), base32.encode(secret))
    if issuer:
        uri += "&issuer={0}".format(escape(issuer))
    return uri


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
