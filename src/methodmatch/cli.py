"""CLI entry point for methodmatch tool."""

import logging

import click

from methodmatch.commands import compare, find


@click.group()
@click.version_option(version="0.1.0", prog_name="methodmatch")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, verbose):
    """Method Identity Recovery Tool.

    Match methods of a reference build against a transformed build by
    comparing instruction opcodes.
    """
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Register commands
main.add_command(compare.compare)
main.add_command(find.find)


if __name__ == "__main__":
    main()
