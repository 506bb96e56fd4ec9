import click

from springls.cli.format import format_files
from springls.cli.list import list_properties
from springls.cli.lsp import lsp
from springls.cli.validate import validate


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """springls - Spring Boot configuration language server"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(lsp)
cli.add_command(validate)
cli.add_command(format_files)
cli.add_command(list_properties)


if __name__ == "__main__":
    cli()
