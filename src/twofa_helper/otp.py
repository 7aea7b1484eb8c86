import hashlib
import hmac

DIGITS = 6


class OTP(object):
    """
    Base class for OTP handlers. Holds the raw shared secret.
    """

    def __init__(self, secret: bytes) -> None:
        if not secret:
            raise ValueError("secret must not be empty")
        self.secret = bytes(secret)

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            For TOTP this is the number of 30 second steps since the Unix epoch.
        """
        # Implements RFC 4226 with SHA-1 and 6 digits
        if input < 0:
            raise ValueError("input must be positive integer")
        hmac_hash = hmac.new(self.secret, self.int_to_bytestring(input), hashlib.sha1).digest()
        # Dynamic truncation: the low nibble of the last byte picks a 4 byte window.
        offset = hmac_hash[-1] & 0xF
        code = (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )
        return str(code % 10**DIGITS).zfill(DIGITS)

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        return i.to_bytes(padding, "big")
