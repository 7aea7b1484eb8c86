from dataclasses import dataclass
from typing import Callable, Optional

from . import base32, qr, utils

DEFAULT_LABEL = "Unnamed TOTP"


@dataclass(frozen=True)
class Enrollment:
    """
    Everything needed to provision a new authenticator entry.
    """

    label: str
    issuer: Optional[str]
    secret: bytes
    secret_generated: bool
    uri: str

    @property
    def secret_base32(self) -> str:
        return base32.encode(self.secret)


def enroll(
    label: Optional[str] = None,
    secret: Optional[bytes] = None,
    issuer: Optional[str] = None,
    random_bytes: Callable[[int], bytes] = base32.random_secret,
) -> Enrollment:
    """
    Prepares a provisioning URI, generating a secret when none is given.

    :param label: account label, defaults to ``"Unnamed TOTP"``
    :param secret: raw secret bytes; when ``None``, ``random_bytes`` is called
        once for ``DEFAULT_SECRET_LENGTH`` bytes
    :param issuer: optional issuer name
    :param random_bytes: source of random bytes
    :returns: the enrollment result
    """
    if label is None:
        label = DEFAULT_LABEL
    generated = secret is None
    if secret is None:
        secret = random_bytes(base32.DEFAULT_SECRET_LENGTH)
    return Enrollment(
        label=label,
        issuer=issuer,
        secret=secret,
        secret_generated=generated,
        uri=utils.build_uri(label, secret, issuer=issuer),
    )


def provision(
    label: Optional[str] = None,
    secret: Optional[bytes] = None,
    issuer: Optional[str] = None,
    display: qr.DisplayCallback = qr.show_in_terminal,
    random_bytes: Callable[[int], bytes] = base32.random_secret,
) -> Enrollment:
    """
    Runs :func:`enroll` and hands the QR code of its URI to ``display`` once.

    :param display: receives the rendered QR code, e.g. :func:`twofa_helper.qr.show_in_terminal`
        or :func:`twofa_helper.qr.image_saver`
    :returns: the enrollment result
    """
    result = enroll(label=label, secret=secret, issuer=issuer, random_bytes=random_bytes)
    display(qr.make_qr(result.uri))
    return result
