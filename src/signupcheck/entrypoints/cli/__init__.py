"""ABOUTME: Main CLI entry point using Click for signupcheck
ABOUTME: Provides commands to check email addresses and pull verification links out of email bodies"""

import click

from signupcheck import __version__
from signupcheck.logging import logging_setup


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Email signup and verification checks."""
    ctx.ensure_object(dict)
    logging_setup()


@cli.command()
def version() -> None:
    """Show signupcheck version."""
    click.echo(f"signupcheck {__version__}")


# Import subcommands to register them
from .emails import check_email, extract  # noqa: E402

cli.add_command(check_email)
cli.add_command(extract)


if __name__ == "__main__":
    cli()
