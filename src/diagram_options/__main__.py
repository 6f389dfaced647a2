"""CLI entry point for diagram-options."""

import logging
import sys

import click

from diagram_options.registry import DiagramOptions


@click.command()
@click.option(
    "--set",
    "-s",
    "settings",
    type=(str, str),
    multiple=True,
    metavar="NAME VALUE",
    help="Set an option, e.g. --set linetype spline",
)
@click.option("--list", "-l", "list_options", is_flag=True, help="List the available options and exit")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log debug output to stderr")
def main(settings: tuple[tuple[str, str], ...], list_options: bool, verbose: bool) -> None:
    """Validate UML diagram options and print the resolved settings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    options = DiagramOptions()

    if list_options:
        for option in options:
            click.echo(f"{options.prefix}{option.name}  {option.get_valid_values()} (default: {option.default})")
        return

    pairs = [(f"{options.prefix}{name}", value) for name, value in settings]
    errors = options.check_options(pairs)
    if errors:
        for error in errors:
            click.echo(f"error: {error}", err=True)
        sys.exit(1)

    options.set(pairs)
    config = options.resolve()

    for name, variant in config.as_dict().items():
        click.echo(f"{name}: {variant}")


if __name__ == "__main__":
    main()
