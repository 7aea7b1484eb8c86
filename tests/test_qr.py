import io

import qrcode

from twofa_helper import qr


def test_make_qr_uses_level_q() -> None:
    code = qr.make_qr("otpauth://totp/label?secret=my")
    assert code.error_correction == qrcode.constants.ERROR_CORRECT_Q
    assert code.box_size == qr.BOX_SIZE
    assert code.data_list


def test_show_in_terminal_writes_matrix() -> None:
    out = io.StringIO()
    qr.show_in_terminal(qr.make_qr("otpauth://totp/label?secret=my"), out=out)
    assert len(out.getvalue().splitlines()) > 10


def test_image_saver(tmp_path) -> None:
    target = tmp_path / "code.png"
    display = qr.image_saver(str(target))
    display(qr.make_qr("otpauth://totp/label?secret=my"))
    assert target.stat().st_size > 0
