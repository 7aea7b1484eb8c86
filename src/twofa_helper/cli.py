"""CLI entry point for twofa-helper."""

from typing import Optional

import click

from . import qr as qr_render
from .base32 import decode
from .enroll import enroll, provision
from .errors import Base32Error
from .log import logger, set_verbose
from .totp import TOTP

SECRET_ENVVAR = "TWOFA_HELPER_SECRET"


class CommandError(click.ClickException):
    """Printed as a red ``ERROR:`` line; exits with status 1."""

    exit_code = 1

    def show(self, file=None) -> None:
        click.secho("ERROR: {}".format(self.format_message()), fg="red", err=True)


def _decode_secret(text: str) -> bytes:
    try:
        secret = decode(text)
    except Base32Error as e:
        raise CommandError(str(e)) from e
    if not secret:
        raise CommandError("Secret must not be empty.")
    return secret


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def main(verbose: bool) -> None:
    """Issue TOTP codes and provision authenticator apps."""
    set_verbose(verbose)


@main.command("generate-qr")
@click.option("--label", default=None, help='Account label, "Unnamed TOTP" if omitted.')
@click.option("--secret", default=None, help="Base32 secret; a random one is generated if omitted.")
@click.option("--issuer", default=None, help="Issuer name shown by the authenticator app.")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the QR code to this image file instead of the terminal.",
)
def generate_qr(label: Optional[str], secret: Optional[str], issuer: Optional[str], output: Optional[str]) -> None:
    """Create a provisioning QR code."""
    display = qr_render.show_in_terminal if output is None else qr_render.image_saver(output)
    result = provision(
        label=label,
        secret=_decode_secret(secret) if secret is not None else None,
        issuer=issuer,
        display=display,
    )
    logger.debug("provisioning uri built for label %r", result.label)
    click.echo("TOTP QR code created.")
    if result.secret_generated:
        click.echo("Using random secret: {}".format(result.secret_base32))
    if output is not None:
        logger.debug("qr code written to %s", output)
        click.echo("QR code saved to {}".format(output))


@main.command()
@click.option("--label", default=None, help='Account label, "Unnamed TOTP" if omitted.')
@click.option("--secret", default=None, help="Base32 secret; a random one is generated if omitted.")
@click.option("--issuer", default=None, help="Issuer name shown by the authenticator app.")
def uri(label: Optional[str], secret: Optional[str], issuer: Optional[str]) -> None:
    """Print the provisioning URI without rendering it."""
    result = enroll(
        label=label,
        secret=_decode_secret(secret) if secret is not None else None,
        issuer=issuer,
    )
    click.echo(result.uri)


@main.command("get-otp")
@click.option("--secret", required=True, envvar=SECRET_ENVVAR, help="Base32 secret.")
def get_otp(secret: str) -> None:
    """Print the current 6 digit code."""
    totp = TOTP(_decode_secret(secret))
    click.echo(totp.now())


if __name__ == "__main__":
    main()
