from typing import Optional, Tuple

import click

from springls.cli.utils import configure_logging, load_catalog_from_options, output_error, output_result


@click.command(name="list")
@click.argument("prefix", required=False)
@click.option("--catalog", "catalog_paths", multiple=True, type=click.Path(exists=True, dir_okay=False),
              help="Extra property catalog file (repeatable)")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def list_properties(prefix: Optional[str], catalog_paths: Tuple[str, ...], json_output: bool, debug: bool):
    """List the properties known to the catalog.

    \b
    Examples:
        springls list                   # List every property
        springls list spring.datasource # Only properties under a prefix
        springls list --json-output     # Output in JSON format
    """
    configure_logging(debug)

    try:
        catalog = load_catalog_from_options(catalog_paths)
        entries = [
            catalog.get(name) for name in catalog.keys()
            if not prefix or name == prefix or name.startswith(prefix.rstrip(".") + ".")
        ]

        if json_output:
            output_result(
                [
                    {
                        "name": entry.name,
                        "type": entry.type,
                        "description": entry.description,
                        "default": entry.default,
                        "enum": list(entry.enum) if entry.enum else None,
                    }
                    for entry in entries
                ],
                json_output=True,
            )
            return

        if not entries:
            click.echo("No properties found")
            return
        width = max(len(entry.name) for entry in entries)
        for entry in entries:
            click.echo(f"{entry.name.ljust(width)}  {entry.type:<8}  {entry.description}")
    except Exception as e:
        output_error(e, json_output, debug)
