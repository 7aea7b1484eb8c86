"""QR rendering of provisioning URIs, backed by the ``qrcode`` package."""

from typing import Callable, Optional, TextIO

import qrcode

# Pixels per module when saving an image.
BOX_SIZE = 5

DisplayCallback = Callable[[qrcode.QRCode], None]


def make_qr(uri: str) -> qrcode.QRCode:
    """
    Builds the QR matrix for ``uri`` with error correction level Q.
    """
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_Q,
        box_size=BOX_SIZE,
        border=4,
    )
    qr.add_data(uri)
    qr.make(fit=True)
    return qr


def show_in_terminal(qr: qrcode.QRCode, out: Optional[TextIO] = None) -> None:
    qr.print_ascii(out=out, invert=True)


def save_image(qr: qrcode.QRCode, path: str) -> None:
    img = qr.make_image(fill_color="black", back_color="white")
    img.save(path)


def image_saver(path: str) -> DisplayCallback:
    """
    Returns a display callback that writes the QR code to ``path`` as an image.
    """

    def _display(qr: qrcode.QRCode) -> None:
        save_image(qr, path)

    return _display
