"""CLI entrypoint for revdb."""

import logging
import sys

import click

from . import __version__
from .revisions import Revision, parse_revision


def _parse_revisions(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[Revision]:
    """click callback: turn each --revision notation into a Revision."""
    revisions = []
    for text in value:
        try:
            revisions.append(parse_revision(text))
        except ValueError as e:
            raise click.BadParameter(str(e), ctx=ctx, param=param) from e
    return revisions


revision_option = click.option(
    "--revision",
    "-r",
    "revisions",
    multiple=True,
    callback=_parse_revisions,
    metavar="NOTATION",
    help="Revision as NAME[@DATABASE_PATH][:+added,-removed,~modified] (repeatable, applied in order)",
)

json_option = click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output results as JSON",
)


@click.group()
@click.version_option(__version__, prog_name="revdb")
@click.option("--verbose", is_flag=True, help="Log ledger changes to stderr")
def cli(verbose: bool) -> None:
    """revdb - Revision ledger for a virtual file database.

    Build a ledger from revisions given on the command line and ask which
    paths it blacklists.
    """
    if verbose:
        from rich.console import Console
        from rich.logging import RichHandler

        logger = logging.getLogger("revdb")
        logger.setLevel(logging.DEBUG)
        if not any(isinstance(h, RichHandler) for h in logger.handlers):
            logger.addHandler(RichHandler(console=Console(stderr=True), show_time=False, show_path=False))


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@revision_option
@click.option(
    "--exact",
    is_flag=True,
    help="Query paths exactly as given (skip separator normalization)",
)
@json_option
@click.option(
    "--fail-on-blacklisted",
    is_flag=True,
    help="Exit with error if any path is blacklisted",
)
def check(
    paths: tuple[str, ...],
    revisions: list[Revision],
    exact: bool,
    output_json: bool,
    fail_on_blacklisted: bool,
) -> None:
    """Screen PATHS against the revisions.

    A path is blacklisted when any revision adds or removes it; modified
    files still load from their original location.
    """
    from .commands.check import run_check

    exit_code = run_check(
        list(paths),
        revisions,
        normalize=not exact,
        output_json=output_json,
        fail_on_blacklisted=fail_on_blacklisted,
    )
    sys.exit(exit_code)


@cli.command()
@revision_option
@json_option
def show(revisions: list[Revision], output_json: bool) -> None:
    """Show the ledger the revisions produce.

    Later revisions replace earlier ones of the same name, keeping their
    position.
    """
    from .commands.show import run_show

    exit_code = run_show(revisions, output_json=output_json)
    sys.exit(exit_code)


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
