"""ABOUTME: CLI commands for checking addresses and email bodies
ABOUTME: check-email reports format/disposable status, extract prints the token and verification link"""

from typing import TextIO

import click
import structlog
from wtforms import ValidationError

from signupcheck.domain.extraction import extract_token_from_email, extract_verification_url
from signupcheck.domain.validators import (
    SignupEmailValidator,
    is_disposable_email,
    is_valid_email,
    is_valid_email_strict,
    normalize_email,
)

logger = structlog.get_logger(__name__)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


@click.command("check-email")
@click.argument("address")
@click.option("--strict", is_flag=True, help="Use the RFC 5322 style grammar instead of the permissive check")
@click.option("--allow-disposable", is_flag=True, help="Do not reject disposable email domains")
def check_email(address: str, strict: bool, allow_disposable: bool) -> None:
    """Check ADDRESS the way the signup form would."""
    normalized = normalize_email(address)
    click.echo(f"  Normalised: {normalized}")
    click.echo(f"  Valid format: {_yes_no(is_valid_email(normalized))}")
    click.echo(f"  Valid format (strict): {_yes_no(is_valid_email_strict(normalized))}")
    click.echo(f"  Disposable: {_yes_no(is_disposable_email(normalized))}")

    validator = SignupEmailValidator(strict=strict, allow_disposable=allow_disposable)
    try:
        validator.validate_str(address)
    except ValidationError as e:
        logger.info("email rejected", email=normalized, reason=str(e))
        click.echo(click.style(f"✗ Rejected: {e}", "red"))
        raise click.Abort() from e

    click.echo(click.style("✓ Accepted", "green"))


@click.command("extract")
@click.argument("email_file", type=click.File("r", errors="replace"), default="-")
def extract(email_file: TextIO) -> None:
    """Print the verification token and link found in EMAIL_FILE (stdin by default)."""
    body = email_file.read()
    token = extract_token_from_email(body)
    url = extract_verification_url(body)

    if token is None and url is None:
        click.echo(click.style("✗ No verification token or link found", "red"))
        raise click.Abort()

    click.echo(f"  Token: {token or '-'}")
    click.echo(f"  URL: {url or '-'}")
