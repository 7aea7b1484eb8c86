from . import base32 as base32
from .enroll import Enrollment as Enrollment
from .enroll import enroll as enroll
from .enroll import provision as provision
from .errors import Base32Error as Base32Error
from .errors import InvalidCharacter as InvalidCharacter
from .errors import InvalidPadding as InvalidPadding
from .otp import OTP as OTP
from .totp import TOTP as TOTP
from .totp import compute as compute
from .utils import build_uri as build_uri
from .utils import escape as escape
