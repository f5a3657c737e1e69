from __future__ import annotations

import os
import sys

import click

from . import __version__
from .browser import open_in_browser
from .core import get_crate_info, get_crate_link
from .crates_api import DEFAULT_REGISTRY
from .errors import CargoNavError
from .links import LinkKind


@click.command()
@click.argument("crate_name")
@click.argument("link_kind", required=False)
@click.option(
    "--registry",
    envvar="CARGO_NAV_REGISTRY",
    default=DEFAULT_REGISTRY,
    show_default=True,
    help="Base URL of the crate registry",
)
@click.option(
    "--print",
    "print_only",
    is_flag=True,
    default=False,
    help="Print the link instead of opening it",
)
@click.option(
    "--info",
    "show_info",
    is_flag=True,
    default=False,
    help="Print a summary of the crate's links and exit",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
@click.version_option(__version__, prog_name="cargo-nav")
def main(
    crate_name: str,
    link_kind: str | None,
    registry: str,
    print_only: bool,
    show_info: bool,
    debug: bool,
):
    """
    Open a link for CRATE_NAME in the browser.

    LINK_KIND picks which link: h/homepage (default), r/repository,
    d/documentation or c/crate for the crate's registry page.
    """
    try:
        LinkKind.from_token(link_kind, crate_name)
        if show_info:
            click.echo(get_crate_info(crate_name, registry, debug=debug).describe())
            return
        url = get_crate_link(crate_name, link_kind, registry, debug=debug)
    except CargoNavError as exc:
        raise click.ClickException(str(exc)) from exc

    if print_only:
        click.echo(url)
    else:
        click.echo(f"Opening {url}")
        open_in_browser(url, debug=debug)


def strip_cargo_subcommand(args: list[str]) -> list[str]:
    """
    Drop the 'nav' cargo passes along when run as `cargo nav ...`.

    Cargo sets the CARGO variable for its subcommands, which tells that case
    apart from a plain `cargo-nav nav` lookup of a crate called 'nav'.
    """
    if os.environ.get("CARGO") and args[:1] == ["nav"]:
        return args[1:]
    return args


def run() -> None:
    """Console-script entry point."""
    main(args=strip_cargo_subcommand(sys.argv[1:]), prog_name="cargo-nav")
