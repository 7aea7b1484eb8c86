import calendar
import datetime
import time
from typing import Optional, Union

from . import base32, utils
from .otp import OTP

INTERVAL = 30

TimeLike = Union[int, float, datetime.datetime]


class TOTP(OTP):
    """
    Handler for time-based OTP counters with a fixed 30 second step.
    """

    @classmethod
    def from_base32(cls, text: str) -> "TOTP":
        """
        :param text: secret in the lowercase base32 alphabet
        :raises twofa_helper.errors.Base32Error: the text is not valid base32
        """
        return cls(base32.decode(text))

    def at(self, for_time: TimeLike) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(time.time())

    def verify(self, otp: str, for_time: Optional[TimeLike] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        :param otp: the OTP to check against
        :param for_time: time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = time.time()
        return utils.strings_equal(str(otp), self.at(for_time))

    def provisioning_uri(self, label: str, issuer: Optional[str] = None) -> str:
        """
        Returns the provisioning URI for the OTP.  This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        :param label: name of the user account
        :param issuer: the name of the OTP issuer; omitted when empty
        :returns: provisioning URI
        """
        return utils.build_uri(label, self.secret, issuer=issuer)

    @staticmethod
    def timecode(for_time: TimeLike) -> int:
        """
        Number of whole intervals since the Unix epoch. Naive datetimes are read as UTC.
        """
        if isinstance(for_time, datetime.datetime):
            if for_time.tzinfo is None:
                seconds = calendar.timegm(for_time.utctimetuple())
            else:
                seconds = int(for_time.timestamp())
        else:
            seconds = int(for_time)
        return seconds // INTERVAL


def compute(secret: bytes, for_time: Optional[TimeLike] = None) -> str:
    """
    Computes the TOTP code for ``secret`` at ``for_time``, or at the current time.
    """
    totp = TOTP(secret)
    if for_time is None:
        return totp.now()
    return totp.at(for_time)
